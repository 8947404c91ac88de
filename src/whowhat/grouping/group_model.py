"""
Data models for author grouping.

An :class:`AuthorGroup` is a set of files that were all touched by
exactly the same set of authors. Groups are keyed by the sorted,
comma-joined author names so that the order in which authors were seen
never matters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Set


KEY_SEPARATOR = ","


def group_key(authors: Iterable[str]) -> str:
    """Return the canonical key for a set of author names."""
    return KEY_SEPARATOR.join(sorted(set(authors)))


def group_files(index: Mapping[str, Set[str]]) -> Dict[str, List[str]]:
    """Collect the paths of ``index`` under their author group key.

    File order inside a group follows the index and is not sorted.
    """
    groups: Dict[str, List[str]] = {}
    for path, authors in index.items():
        groups.setdefault(group_key(authors), []).append(path)
    return groups


@dataclass
class AuthorGroup:
    """Representation of files sharing one author set.

    Attributes
    ----------
    key : str
        Sorted, comma-joined author names.
    files : List[str]
        Paths touched by exactly those authors, sorted.
    """

    key: str
    files: List[str] = field(default_factory=list)

    @property
    def authors(self) -> List[str]:
        return self.key.split(KEY_SEPARATOR)


def build_groups(index: Mapping[str, Set[str]]) -> List[AuthorGroup]:
    """Fold ``index`` into author groups with alphabetically sorted files.

    The order of the returned groups is not significant.
    """
    return [AuthorGroup(key=key, files=sorted(files)) for key, files in group_files(index).items()]
