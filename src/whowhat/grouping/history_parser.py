"""
Parser for the streamed ``git log`` history.

The history query prints an author header line for every commit,
followed by the paths that commit touched. The parser keeps track of
the most recent author and records every path against it, building a
mapping from each path to the set of distinct authors who touched it.

The parser is permissive: a line that is not an author header is a
path, whatever it looks like.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional, Set

from whowhat.vcs.git_client import AUTHOR_MARKER


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


# Path -> distinct author names.
FileAuthorIndex = Dict[str, Set[str]]


def is_author_line(line: str) -> bool:
    """Return True if ``line`` is an author header carrying a name."""
    return len(line) > len(AUTHOR_MARKER) and line.startswith(AUTHOR_MARKER)


def parse_history(lines: Iterable[str], index: Optional[FileAuthorIndex] = None) -> FileAuthorIndex:
    """Fold history lines into a path to authors index.

    Parameters
    ----------
    lines : Iterable[str]
        Output lines of the history query, without line terminators.
    index : FileAuthorIndex, optional
        Index to add to. A new one is created when omitted.

    Returns
    -------
    FileAuthorIndex
        The updated index.

    Notes
    -----
    Empty lines are skipped and do not reset the current author. Paths
    seen before the first header are recorded under the empty author
    name ``""`` rather than rejected.
    """
    if index is None:
        index = {}
    current_author = ""
    for line in lines:
        if not line:
            continue
        if is_author_line(line):
            current_author = line[len(AUTHOR_MARKER):]
            continue
        index.setdefault(line, set()).add(current_author)

    logger.debug(
        "Parsed %d file(s) touched by %d author(s)",
        len(index),
        len(set().union(*index.values())) if index else 0,
    )
    return index
