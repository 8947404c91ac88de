"""
Grouping logic for the author report.

This package turns the streamed ``git log`` lines into a file to authors
index and folds that index into groups of files sharing the same author
set. See :mod:`whowhat.grouping.history_parser` and
:mod:`whowhat.grouping.group_model` for details.
"""

from .group_model import AuthorGroup, build_groups, group_key  # noqa: F401
from .history_parser import parse_history  # noqa: F401
