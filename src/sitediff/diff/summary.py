#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitediff/diff/summary.py
"""Summary statistics for a comparison report."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from sitediff.constants import EMPTY_COMPARISON_SIMILARITY
from sitediff.diff.text_diff import ComparisonReport


def similarity_percent(identical_count: int, total_count: int) -> int:
    """Return the share of identical paths as a whole percentage.

    Rounds half up using integer arithmetic. An empty comparison (no files in
    either snapshot) is reported as ``EMPTY_COMPARISON_SIMILARITY`` (100).

    Parameters
    ----------
    identical_count : int
        Number of identical paths
    total_count : int
        Number of distinct paths across both snapshots

    Returns
    -------
    int
        Percentage between 0 and 100

    Examples
    --------
        >>> similarity_percent(1, 2)
        50
        >>> similarity_percent(1, 8)
        13
        >>> similarity_percent(0, 0)
        100

    """
    if total_count == 0:
        return EMPTY_COMPARISON_SIMILARITY
    return (identical_count * 200 + total_count) // (total_count * 2)


@dataclass(frozen=True)
class ReportSummary:
    """Totals across a comparison report."""

    identical_count: int = 0
    added_count: int = 0
    removed_count: int = 0
    changed_count: int = 0
    lines_added: int = 0
    lines_removed: int = 0
    percent_similar: int = EMPTY_COMPARISON_SIMILARITY

    @property
    def total_count(self) -> int:
        """Number of distinct paths across both snapshots."""
        return self.identical_count + self.added_count + self.removed_count + self.changed_count

    def to_dict(self) -> dict[str, Any]:
        """Return the summary as a plain dictionary, including ``total_count``."""
        data = asdict(self)
        data["total_count"] = self.total_count
        return data


def summarize(report: ComparisonReport) -> ReportSummary:
    """Aggregate counts and similarity for a comparison report.

    Parameters
    ----------
    report : ComparisonReport
        Output of :func:`sitediff.diff.text_diff.analyze_comparison`

    Returns
    -------
    ReportSummary
        File counts, summed line counts, and similarity percentage

    """
    identical_count = len(report.identical)
    return ReportSummary(
        identical_count=identical_count,
        added_count=len(report.added),
        removed_count=len(report.removed),
        changed_count=len(report.changed),
        lines_added=sum(changed.lines_added for changed in report.changed),
        lines_removed=sum(changed.lines_removed for changed in report.changed),
        percent_similar=similarity_percent(identical_count, report.total_count),
    )
