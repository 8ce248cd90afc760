#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitediff/diff/document.py
"""Structured report document shared by all renderers.

:func:`build_document` turns a :class:`ComparisonReport` and its
:class:`ReportSummary` into a :class:`ReportDocument`: the ordered sections of
the report with anchors already assigned. Renderers only format a document;
they never re-derive classification or statistics.

Section order is fixed:

1. similarity indicator (from the summary)
2. identical files
3. added files
4. removed files
5. changed files, each linking to its diff
6. diffs
"""

from __future__ import annotations

from dataclasses import dataclass

from sitediff.constants import DEFAULT_REPORT_TITLE
from sitediff.diff.summary import ReportSummary, summarize
from sitediff.diff.text_diff import ChangedFileReport, ComparisonReport, LineChange
from sitediff.utils.text import path_anchor


@dataclass(frozen=True)
class FileListSection:
    """A titled listing of paths."""

    key: str
    title: str
    paths: tuple[str, ...]

    @property
    def count(self) -> int:
        """Number of listed paths."""
        return len(self.paths)


@dataclass(frozen=True)
class ChangedFileEntry:
    """A changed file as it appears in the listing and in the diffs section."""

    path: str
    anchor: str
    lines_added: int
    lines_removed: int
    changes: tuple[LineChange, ...]

    @classmethod
    def from_report(cls, report: ChangedFileReport) -> ChangedFileEntry:
        """Create an entry, assigning the path's anchor id."""
        return cls(
            path=report.path,
            anchor=path_anchor(report.path),
            lines_added=report.lines_added,
            lines_removed=report.lines_removed,
            changes=report.changes,
        )


@dataclass(frozen=True)
class ReportDocument:
    """Complete, renderer-independent content of a comparison report."""

    title: str
    summary: ReportSummary
    identical: FileListSection
    added: FileListSection
    removed: FileListSection
    changed: tuple[ChangedFileEntry, ...]

    @property
    def file_sections(self) -> tuple[FileListSection, ...]:
        """Identical, added and removed listings, in report order."""
        return (self.identical, self.added, self.removed)


def build_document(
    report: ComparisonReport,
    summary: ReportSummary | None = None,
    title: str = DEFAULT_REPORT_TITLE,
) -> ReportDocument:
    """Assemble the report document.

    Parameters
    ----------
    report : ComparisonReport
        Analyzed comparison
    summary : ReportSummary, optional
        Precomputed summary; computed from ``report`` when omitted
    title : str, default = "Site Comparison"
        Report title

    Returns
    -------
    ReportDocument
        Ordered report sections

    """
    if summary is None:
        summary = summarize(report)

    return ReportDocument(
        title=title,
        summary=summary,
        identical=FileListSection("identical", "Identical files", report.identical),
        added=FileListSection("added", "Added files", report.added),
        removed=FileListSection("removed", "Removed files", report.removed),
        changed=tuple(ChangedFileEntry.from_report(changed) for changed in report.changed),
    )
