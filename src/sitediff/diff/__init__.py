#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitediff/diff/__init__.py
"""Site comparison and diff report engine.

This package is the pure, in-memory core of sitediff. It never touches the
file system or runs processes; it receives two snapshots and returns a
report.

Pipeline
--------
- ``compare``: partition paths into identical / added / removed / changed
- ``analyze_comparison``: line diffs for changed files; whitespace-only
  changes are reclassified as identical
- ``summarize``: counts, line totals and similarity percentage
- ``build_document``: ordered report sections with anchors
- renderers in :mod:`sitediff.diff.renderers`: HTML, JSON, text

Examples
--------
    >>> from sitediff.diff import analyze_comparison, compare, summarize
    >>> report = analyze_comparison(compare({"/a.html": "hi"}, {}))
    >>> summarize(report).percent_similar
    0

"""

from sitediff.diff.comparison import Added, Changed, Comparison, Difference, DifferenceKind, Removed, compare
from sitediff.diff.document import ChangedFileEntry, FileListSection, ReportDocument, build_document
from sitediff.diff.summary import ReportSummary, similarity_percent, summarize
from sitediff.diff.text_diff import (
    ChangedFileReport,
    ComparisonReport,
    LineChange,
    LineTag,
    analyze_comparison,
    diff_lines,
    split_lines,
)

__all__ = [
    "Added",
    "Changed",
    "ChangedFileEntry",
    "ChangedFileReport",
    "Comparison",
    "ComparisonReport",
    "Difference",
    "DifferenceKind",
    "FileListSection",
    "LineChange",
    "LineTag",
    "Removed",
    "ReportDocument",
    "ReportSummary",
    "analyze_comparison",
    "build_document",
    "compare",
    "diff_lines",
    "similarity_percent",
    "split_lines",
    "summarize",
]
