"""Plain text rendering of author groups."""

from __future__ import annotations

from typing import Iterable

from whowhat.grouping.group_model import AuthorGroup


def render_group(group: AuthorGroup) -> str:
    """Render one group: its authors one per line, then its tab-indented files."""
    authors = "\n".join(group.authors)
    files = "\n\t".join(group.files)
    return f"{authors}\n\t{files}\n"


def render_report(groups: Iterable[AuthorGroup]) -> str:
    """Render every group, separated by a blank line.

    An empty iterable renders as the empty string.
    """
    return "\n".join(render_group(group) for group in groups)
