"""
Version control system (VCS) integration.

This package wraps the ``git log`` history query used to find out who
touched which files in a revision range.
"""

from .git_client import GitClient, GitError, resolve_log_args  # noqa: F401
