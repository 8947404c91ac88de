#!/usr/bin/env python
"""
Thin wrapper script to invoke the whowhat CLI.

Running ``python git_whowhat.py`` is equivalent to running the
``git-whowhat`` console script installed via ``pyproject.toml``.
"""

from whowhat.cli import main


if __name__ == "__main__":
    main(prog_name="git-whowhat")
