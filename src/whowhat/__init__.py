"""
Top-level package for whowhat.

This package exposes the ``git whowhat`` command via the
``whowhat.cli`` module: it reports which files were touched in a
revision range and by which set of authors.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
