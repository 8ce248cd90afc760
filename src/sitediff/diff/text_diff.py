#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitediff/diff/text_diff.py
"""Line-level diffs of changed files.

For every changed path the before and after contents are split into lines and
aligned with :class:`difflib.SequenceMatcher`. Each aligned line becomes a
:class:`LineChange` that knows its own display prefix and CSS class.

Counting rules
--------------
- Inserted lines always count towards ``lines_added``.
- Deleted lines count towards ``lines_removed`` unless they are blank
  (whitespace only); blank deletions are shown with a ``~`` prefix instead.
- Equal lines never count.

A changed path whose diff ends up with no added and no counted removed lines
is moved to the identical set by :func:`analyze_comparison`. This happens
after the diff is computed, so whitespace-only churn is classified by the
same rules as any other change.
"""

from __future__ import annotations

import difflib
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from markupsafe import Markup, escape

from sitediff.constants import (
    CSS_CLASS_ADDED,
    CSS_CLASS_BLANK_REMOVED,
    CSS_CLASS_REMOVED,
    PREFIX_ADDED,
    PREFIX_BLANK_REMOVED,
    PREFIX_EQUAL,
    PREFIX_REMOVED,
)
from sitediff.diff.comparison import Changed, Comparison

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")


class LineTag(str, Enum):
    """Kind of a single aligned line."""

    INSERT = "insert"
    DELETE = "delete"
    EQUAL = "equal"


@dataclass(frozen=True, slots=True)
class LineChange:
    """One line of a line-level diff.

    Attributes
    ----------
    tag : LineTag
        Whether the line was inserted, deleted, or is unchanged
    text : str
        Line content without its terminator

    """

    tag: LineTag
    text: str

    @property
    def is_blank(self) -> bool:
        """True for a deleted line containing only whitespace."""
        return self.tag is LineTag.DELETE and not self.text.strip()

    @property
    def counts_as_added(self) -> bool:
        """True if the line increments ``lines_added``."""
        return self.tag is LineTag.INSERT

    @property
    def counts_as_removed(self) -> bool:
        """True if the line increments ``lines_removed``."""
        return self.tag is LineTag.DELETE and not self.is_blank

    @property
    def prefix(self) -> str:
        """Single-character marker shown before the line."""
        if self.tag is LineTag.INSERT:
            return PREFIX_ADDED
        if self.tag is LineTag.DELETE:
            return PREFIX_BLANK_REMOVED if self.is_blank else PREFIX_REMOVED
        return PREFIX_EQUAL

    @property
    def css_class(self) -> str | None:
        """CSS class used by the HTML report, or None for unchanged lines."""
        if self.tag is LineTag.INSERT:
            return CSS_CLASS_ADDED
        if self.tag is LineTag.DELETE:
            return CSS_CLASS_BLANK_REMOVED if self.is_blank else CSS_CLASS_REMOVED
        return None

    def render_text(self) -> str:
        """Return the line with its prefix, unescaped."""
        return f"{self.prefix}{self.text}"

    def render_html(self) -> Markup:
        """Return the prefix followed by the HTML-escaped line text."""
        return Markup(self.prefix) + escape(self.text)


def split_lines(content: str) -> list[str]:
    """Split content into lines, treating line terminators as separators.

    Only ``\\n`` and ``\\r\\n`` end a line. Other characters that
    :meth:`str.splitlines` treats as breaks (form feed, ``\\u2028`` and
    friends) stay part of the line text, so a change to one of them is a
    visible line change.

    Examples
    --------
        >>> split_lines("one\\ntwo\\n")
        ['one', 'two']
        >>> split_lines("a\\u2028b")
        ['a\\u2028b']
        >>> split_lines("")
        []

    """
    lines = _LINE_BREAK.split(content)
    if lines[-1] == "":
        lines.pop()
    return lines


def iter_line_changes(before_lines: list[str], after_lines: list[str]) -> Iterator[LineChange]:
    """Yield aligned line changes covering every line of both sides.

    Replaced blocks are emitted as all deletions followed by all insertions.
    """
    matcher = difflib.SequenceMatcher(None, before_lines, after_lines, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            for line in after_lines[j1:j2]:
                yield LineChange(LineTag.EQUAL, line)
            continue
        if tag in ("delete", "replace"):
            for line in before_lines[i1:i2]:
                yield LineChange(LineTag.DELETE, line)
        if tag in ("insert", "replace"):
            for line in after_lines[j1:j2]:
                yield LineChange(LineTag.INSERT, line)


def diff_lines(before: str, after: str) -> list[LineChange]:
    """Compute the line-level diff of two texts.

    Parameters
    ----------
    before : str
        Original content
    after : str
        Updated content

    Returns
    -------
    list of LineChange
        Every line of both texts in alignment order

    Examples
    --------
        >>> [change.render_text() for change in diff_lines("a\\nb\\n", "a\\nc\\n")]
        [' a', '-b', '+c']

    """
    return list(iter_line_changes(split_lines(before), split_lines(after)))


@dataclass(frozen=True)
class ChangedFileReport:
    """Line-level diff and counts for one changed path.

    Attributes
    ----------
    path : str
        Site path of the file
    lines_added : int
        Number of inserted lines
    lines_removed : int
        Number of deleted non-blank lines
    changes : tuple of LineChange
        Aligned diff lines

    """

    path: str
    lines_added: int
    lines_removed: int
    changes: tuple[LineChange, ...]

    @classmethod
    def from_contents(cls, path: str, before: str, after: str) -> ChangedFileReport:
        """Diff ``before`` against ``after`` and count the changes."""
        changes = tuple(diff_lines(before, after))
        lines_added = sum(1 for change in changes if change.counts_as_added)
        lines_removed = sum(1 for change in changes if change.counts_as_removed)
        return cls(path=path, lines_added=lines_added, lines_removed=lines_removed, changes=changes)

    @property
    def has_substantive_changes(self) -> bool:
        """False when the only differences were blank-line deletions (or none)."""
        return self.lines_added > 0 or self.lines_removed > 0


@dataclass(frozen=True)
class ComparisonReport:
    """Comparison after line diffs and reclassification.

    Attributes
    ----------
    identical : tuple of str
        Identical paths, including reclassified ones, in path order
    added : tuple of str
        Paths only present after
    removed : tuple of str
        Paths only present before
    changed : tuple of ChangedFileReport
        Files with substantive line changes, in path order
    reclassified : tuple of str
        Paths whose content differed but produced no substantive line change

    """

    identical: tuple[str, ...] = ()
    added: tuple[str, ...] = ()
    removed: tuple[str, ...] = ()
    changed: tuple[ChangedFileReport, ...] = ()
    reclassified: tuple[str, ...] = ()

    @property
    def changed_paths(self) -> tuple[str, ...]:
        """Paths of the changed files."""
        return tuple(report.path for report in self.changed)

    @property
    def total_count(self) -> int:
        """Number of distinct paths across both snapshots."""
        return len(self.identical) + len(self.added) + len(self.removed) + len(self.changed)


def analyze_comparison(comparison: Comparison) -> ComparisonReport:
    """Diff every changed path and reclassify whitespace-only changes.

    Parameters
    ----------
    comparison : Comparison
        Output of :func:`sitediff.diff.comparison.compare`

    Returns
    -------
    ComparisonReport
        Partition of paths with per-file line diffs for changed files

    """
    changed: list[ChangedFileReport] = []
    reclassified: list[str] = []

    for path in comparison.changed:
        difference = comparison.differences[path]
        assert isinstance(difference, Changed)
        report = ChangedFileReport.from_contents(path, difference.before_content, difference.after_content)
        if report.has_substantive_changes:
            changed.append(report)
        else:
            logger.debug("No substantive line changes in %s, treating as identical", path)
            reclassified.append(path)

    return ComparisonReport(
        identical=tuple(sorted((*comparison.identical, *reclassified))),
        added=comparison.added,
        removed=comparison.removed,
        changed=tuple(changed),
        reclassified=tuple(reclassified),
    )
