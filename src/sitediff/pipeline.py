#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitediff/pipeline.py
"""End-to-end comparison run.

:func:`run_site_comparison` performs every step of a comparison: clear the
work directory, build both site variants, format them, collect them into
snapshots, compare, and write the report to ``<work_dir>/report.<ext>``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from sitediff.api import compare_directories, render_report, write_report
from sitediff.build import build_site, format_site, reset_output_dir
from sitediff.constants import AFTER_DIR_NAME, BEFORE_DIR_NAME, REPORT_BASENAME, REPORT_FILE_EXTENSIONS
from sitediff.diff.summary import ReportSummary
from sitediff.diff.text_diff import ComparisonReport
from sitediff.exceptions import SiteDiffError, ValidationError
from sitediff.options import SiteDiffOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """Outcome of a pipeline run."""

    report_path: Path
    report: ComparisonReport
    summary: ReportSummary


def _stage(description: str, error: SiteDiffError) -> SiteDiffError:
    """Prefix an error message with the pipeline stage that failed."""
    error.message = f"{description}: {error.message}"
    error.args = (error.message,)
    return error


def run_site_comparison(options: SiteDiffOptions, cwd: str | Path | None = None) -> PipelineResult:
    """Build, collect, compare and report on two site variants.

    Parameters
    ----------
    options : SiteDiffOptions
        Complete run configuration
    cwd : str or Path, optional
        Directory the work directory and commands are relative to; defaults
        to the current directory

    Returns
    -------
    PipelineResult
        Path of the written report plus the comparison and its summary

    Raises
    ------
    ValidationError
        If the before or after build command is not configured
    SiteDiffError
        If any stage fails; the message names the failed stage

    """
    build = options.build
    if not build.before_command:
        raise ValidationError("No 'before' build command configured", parameter_name="before_command")
    if not build.after_command:
        raise ValidationError("No 'after' build command configured", parameter_name="after_command")

    base = Path(cwd) if cwd is not None else Path.cwd()
    work_dir = base / build.work_dir
    before_dir = work_dir / BEFORE_DIR_NAME
    after_dir = work_dir / AFTER_DIR_NAME

    for output_dir in (before_dir, after_dir):
        reset_output_dir(output_dir)

    try:
        build_site(build.before_command, before_dir, "before", cwd=base)
    except SiteDiffError as e:
        raise _stage("failed to build before site", e) from e

    try:
        build_site(build.after_command, after_dir, "after", cwd=base)
    except SiteDiffError as e:
        raise _stage("failed to build after site", e) from e

    if build.format_command:
        for output_dir in (before_dir, after_dir):
            try:
                format_site(build.format_command, output_dir, cwd=base)
            except SiteDiffError as e:
                raise _stage(f"failed to format {output_dir}", e) from e
    else:
        logger.info("No format command configured, skipping formatting")

    report, summary = compare_directories(before_dir, after_dir, options.collect)

    logger.info("Generating report")
    text = render_report(report, summary, format=options.report_format, options=options.report)

    report_path = work_dir / f"{REPORT_BASENAME}{REPORT_FILE_EXTENSIONS[options.report_format]}"
    write_report(text, report_path)

    return PipelineResult(report_path=report_path, report=report, summary=summary)
