#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitediff/diff/comparison.py
"""Set-membership comparison of two site snapshots.

:func:`compare` partitions the union of both snapshots' paths into
identical paths and :data:`Difference` entries (added, removed, changed).
It is a total function: any two well-formed snapshots compare successfully.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import ClassVar, Mapping, Union

from sitediff.snapshot import Snapshot


class DifferenceKind(str, Enum):
    """Status of a path that is not identical across snapshots."""

    ADDED = "added"
    REMOVED = "removed"
    CHANGED = "changed"


@dataclass(frozen=True)
class Added:
    """Path exists only in the "after" snapshot."""

    kind: ClassVar[DifferenceKind] = DifferenceKind.ADDED


@dataclass(frozen=True)
class Removed:
    """Path exists only in the "before" snapshot."""

    kind: ClassVar[DifferenceKind] = DifferenceKind.REMOVED


@dataclass(frozen=True)
class Changed:
    """Path exists in both snapshots with differing content."""

    before_content: str
    after_content: str

    kind: ClassVar[DifferenceKind] = DifferenceKind.CHANGED


Difference = Union[Added, Removed, Changed]


@dataclass(frozen=True)
class Comparison:
    """Result of comparing two snapshots.

    Attributes
    ----------
    identical : tuple of str
        Paths with equal content in both snapshots, in path order
    differences : mapping of str to Difference
        Read-only mapping, in path order, for every non-identical path

    """

    identical: tuple[str, ...] = ()
    differences: Mapping[str, Difference] = field(default_factory=lambda: MappingProxyType({}))

    def _paths_of(self, kind: DifferenceKind) -> tuple[str, ...]:
        return tuple(path for path, difference in self.differences.items() if difference.kind is kind)

    @property
    def added(self) -> tuple[str, ...]:
        """Paths only present after."""
        return self._paths_of(DifferenceKind.ADDED)

    @property
    def removed(self) -> tuple[str, ...]:
        """Paths only present before."""
        return self._paths_of(DifferenceKind.REMOVED)

    @property
    def changed(self) -> tuple[str, ...]:
        """Paths present in both snapshots with different content."""
        return self._paths_of(DifferenceKind.CHANGED)


def compare(before: Mapping[str, str], after: Mapping[str, str]) -> Comparison:
    """Compare two snapshots path by path.

    Paths are visited in lexicographic order so the resulting
    :class:`Comparison` (and every report derived from it) is stable across
    runs on identical input.

    Parameters
    ----------
    before : Snapshot or mapping of str to str
        The "before" site
    after : Snapshot or mapping of str to str
        The "after" site

    Returns
    -------
    Comparison
        Identical paths and per-path differences

    Examples
    --------
        >>> result = compare({"/a.html": "hi"}, {"/a.html": "hi", "/b.html": "new"})
        >>> result.identical
        ('/a.html',)
        >>> result.added
        ('/b.html',)

    """
    before = Snapshot.coerce(before, label="before")
    after = Snapshot.coerce(after, label="after")

    identical: list[str] = []
    differences: dict[str, Difference] = {}

    for path, before_content in before.items():
        if path not in after:
            differences[path] = Removed()
            continue

        after_content = after[path]
        if after_content != before_content:
            differences[path] = Changed(before_content=before_content, after_content=after_content)
        else:
            identical.append(path)

    for path in after:
        if path not in before:
            differences[path] = Added()

    ordered = {path: differences[path] for path in sorted(differences)}
    return Comparison(identical=tuple(identical), differences=MappingProxyType(ordered))
