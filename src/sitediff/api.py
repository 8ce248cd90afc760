#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitediff/api.py
"""Python API for site comparison.

This module provides high-level functions that chain the comparison core
(compare, analyze, summarize, render) and the file-tree collector.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, TypeVar

from sitediff.diff.comparison import compare
from sitediff.diff.document import build_document
from sitediff.diff.renderers import HtmlReportRenderer, JsonReportRenderer, TextReportRenderer
from sitediff.diff.summary import ReportSummary, summarize
from sitediff.diff.text_diff import ComparisonReport, analyze_comparison
from sitediff.exceptions import OutputWriteError, ValidationError
from sitediff.options import (
    BaseReportOptions,
    CollectOptions,
    HtmlReportOptions,
    JsonReportOptions,
    TextReportOptions,
)
from sitediff.snapshot import collect_snapshot

logger = logging.getLogger(__name__)

_OptionsT = TypeVar("_OptionsT", bound=BaseReportOptions)


def compare_snapshots(
    before: Mapping[str, str],
    after: Mapping[str, str],
) -> tuple[ComparisonReport, ReportSummary]:
    """Compare two snapshots and summarize the result.

    Parameters
    ----------
    before : Snapshot or mapping of str to str
        The "before" site
    after : Snapshot or mapping of str to str
        The "after" site

    Returns
    -------
    tuple of (ComparisonReport, ReportSummary)
        Analyzed comparison and its summary

    Examples
    --------
        >>> report, summary = compare_snapshots({"/a.html": "hi"}, {"/a.html": "hi"})
        >>> summary.percent_similar
        100

    """
    comparison = compare(before, after)
    report = analyze_comparison(comparison)
    summary = summarize(report)
    logger.debug(
        "Compared %d paths: %d identical, %d added, %d removed, %d changed",
        summary.total_count,
        summary.identical_count,
        summary.added_count,
        summary.removed_count,
        summary.changed_count,
    )
    return report, summary


def compare_directories(
    before_dir: str | Path,
    after_dir: str | Path,
    collect_options: CollectOptions | None = None,
) -> tuple[ComparisonReport, ReportSummary]:
    """Collect two built site directories and compare them.

    Raises
    ------
    CollectionError
        If either directory cannot be collected

    """
    logger.info("Collecting before site files")
    before = collect_snapshot(before_dir, collect_options, label="before")
    logger.info("Collecting after site files")
    after = collect_snapshot(after_dir, collect_options, label="after")
    logger.info("Comparing before and after")
    return compare_snapshots(before, after)


def render_report(
    report: ComparisonReport,
    summary: ReportSummary | None = None,
    format: str = "html",
    options: BaseReportOptions | None = None,
) -> str:
    """Render an analyzed comparison in the requested format.

    Parameters
    ----------
    report : ComparisonReport
        Analyzed comparison
    summary : ReportSummary, optional
        Precomputed summary; computed from ``report`` when omitted
    format : {"html", "json", "text"}, default "html"
        Output format
    options : BaseReportOptions, optional
        Options matching ``format``; defaults for the format when omitted

    Returns
    -------
    str
        Rendered report

    Raises
    ------
    ValidationError
        If ``format`` is unknown or ``options`` do not match it
    RenderingError
        If rendering fails

    """
    renderer: HtmlReportRenderer | JsonReportRenderer | TextReportRenderer
    if format == "html":
        renderer = HtmlReportRenderer(_check_options(options, HtmlReportOptions))
    elif format == "json":
        renderer = JsonReportRenderer(_check_options(options, JsonReportOptions))
    elif format == "text":
        renderer = TextReportRenderer(_check_options(options, TextReportOptions))
    else:
        raise ValidationError(
            f"Invalid format: {format}. Must be one of: html, json, text",
            parameter_name="format",
            parameter_value=format,
        )

    title = options.title if options is not None else renderer.options.title
    document = build_document(report, summary, title=title)
    return renderer.render(document)


def _check_options(options: BaseReportOptions | None, expected: type[_OptionsT]) -> _OptionsT:
    if options is None:
        return expected()
    if not isinstance(options, expected):
        raise ValidationError(
            f"Expected options of type '{expected.__name__}', got '{type(options).__name__}'",
            parameter_name="options",
            parameter_value=type(options).__name__,
        )
    return options


def write_report(text: str, path: str | Path) -> Path:
    """Write a rendered report to ``path``, creating parent directories.

    Raises
    ------
    OutputWriteError
        If the file cannot be written

    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(str(path), original_error=e) from e
    logger.info("Report written to %s", path)
    return path
