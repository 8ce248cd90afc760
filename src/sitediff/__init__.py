#  Copyright (c) 2025 Tom Villani, Ph.D.
"""sitediff - compare two builds of a static site.

sitediff takes two snapshots of a rendered site (a mapping of site path to
file text), partitions their paths into identical, added, removed and changed
files, diffs changed files line by line, and renders the result as an HTML,
JSON or plain-text report with an overall similarity percentage.

Changes that only add or remove blank lines are treated as formatting noise
and the file is reported as identical.

Examples
--------
Comparing two in-memory snapshots:

    >>> from sitediff import compare_snapshots, render_report
    >>> report, summary = compare_snapshots(
    ...     {"/index.html": "<h1>Hi</h1>"},
    ...     {"/index.html": "<h1>Hello</h1>"},
    ... )
    >>> summary.changed_count
    1
    >>> text = render_report(report, summary, format="text")

Comparing two built directories:

    >>> from sitediff import compare_directories
    >>> report, summary = compare_directories("public-old", "public-new")  # doctest: +SKIP

"""

from sitediff.api import compare_directories, compare_snapshots, render_report, write_report
from sitediff.diff import (
    ComparisonReport,
    ReportDocument,
    ReportSummary,
    analyze_comparison,
    build_document,
    compare,
    summarize,
)
from sitediff.exceptions import (
    BuildError,
    CollectionError,
    FileError,
    OutputWriteError,
    RenderingError,
    SiteDiffError,
    ValidationError,
)
from sitediff.options import (
    BuildOptions,
    CollectOptions,
    HtmlReportOptions,
    JsonReportOptions,
    SiteDiffOptions,
    TextReportOptions,
)
from sitediff.pipeline import PipelineResult, run_site_comparison
from sitediff.snapshot import Snapshot, collect_snapshot

__version__ = "0.1.0"

__all__ = [
    "BuildError",
    "BuildOptions",
    "CollectOptions",
    "CollectionError",
    "ComparisonReport",
    "FileError",
    "HtmlReportOptions",
    "JsonReportOptions",
    "OutputWriteError",
    "PipelineResult",
    "RenderingError",
    "ReportDocument",
    "ReportSummary",
    "SiteDiffError",
    "SiteDiffOptions",
    "Snapshot",
    "TextReportOptions",
    "ValidationError",
    "__version__",
    "analyze_comparison",
    "build_document",
    "collect_snapshot",
    "compare",
    "compare_directories",
    "compare_snapshots",
    "render_report",
    "run_site_comparison",
    "summarize",
    "write_report",
]
