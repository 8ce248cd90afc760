#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/sitediff/cli/__init__.py
"""Command line interface for sitediff.

Two subcommands are available:

``sitediff compare BEFORE AFTER``
    Compare two directories that already hold built sites.

``sitediff run``
    Build both site variants with the configured commands, format them,
    compare them, and write ``<work_dir>/report.<ext>``.

Build commands, the formatter and report defaults are read from a
configuration file (``--config``, ``$SITEDIFF_CONFIG``, a discovered
``.sitediff.*`` file, or ``[tool.sitediff]`` in ``pyproject.toml``).
Command line flags override the configuration.
"""

import argparse
import logging
import os
import sys
import webbrowser
from pathlib import Path

from sitediff.api import compare_directories, render_report, write_report
from sitediff.cli.builder import (
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
)
from sitediff.cli.config import load_config_with_priority
from sitediff.cli.output import print_plain_summary, print_summary_table, stream_supports_color
from sitediff.constants import CONFIG_ENV_VAR
from sitediff.diff.summary import ReportSummary
from sitediff.exceptions import SiteDiffError
from sitediff.logging_utils import configure_logging
from sitediff.options import HtmlReportOptions, SiteDiffOptions, TextReportOptions
from sitediff.pipeline import run_site_comparison

logger = logging.getLogger(__name__)


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    # --trace takes precedence over --log-level
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level.upper())
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _load_options(parsed_args: argparse.Namespace) -> SiteDiffOptions:
    """Load configuration and apply command line overrides.

    Raises
    ------
    argparse.ArgumentTypeError
        If the configuration cannot be loaded or holds invalid values

    """
    config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))
    try:
        options = SiteDiffOptions.from_config(config)
        return _apply_overrides(options, parsed_args)
    except (TypeError, ValueError) as e:
        raise argparse.ArgumentTypeError(f"Invalid configuration: {e}") from e


def _apply_overrides(options: SiteDiffOptions, parsed_args: argparse.Namespace) -> SiteDiffOptions:
    if parsed_args.format:
        options = options.with_format(parsed_args.format)

    report = options.report
    if parsed_args.title is not None:
        report = report.create_updated(title=parsed_args.title)
    if getattr(parsed_args, "collapse_identical", None) and isinstance(report, HtmlReportOptions):
        report = report.create_updated(collapse_identical=True)
    options = options.create_updated(report=report)

    if parsed_args.open_report is not None:
        options = options.create_updated(open_report=parsed_args.open_report)

    exclude = getattr(parsed_args, "exclude", None)
    if exclude is not None:
        options = options.create_updated(collect=options.collect.create_updated(exclude_patterns=tuple(exclude)))

    work_dir = getattr(parsed_args, "work_dir", None)
    if work_dir is not None:
        options = options.create_updated(build=options.build.create_updated(work_dir=work_dir))

    return options


def _report_summary(parsed_args: argparse.Namespace, summary: ReportSummary, report_path: Path | None) -> None:
    if parsed_args.rich:
        print_summary_table(summary, report_path)
    else:
        print_plain_summary(summary, report_path)


def _open_in_browser(path: Path) -> None:
    uri = path.resolve().as_uri()
    logger.info("Opening %s", uri)
    if not webbrowser.open(uri):
        logger.warning("Could not open a web browser for %s", path)


def handle_compare_command(parsed_args: argparse.Namespace, options: SiteDiffOptions) -> int:
    """Compare two built directories and write or print the report.

    Returns
    -------
    int
        Exit code (0 for success)

    """
    if parsed_args.open_report and not parsed_args.output:
        print("Error: --open requires --output", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    if isinstance(options.report, TextReportOptions):
        if parsed_args.output:
            # Files only get colors when explicitly requested
            use_color = parsed_args.color == "always"
        else:
            use_color = stream_supports_color(parsed_args.color, sys.stdout)
        options = options.create_updated(report=options.report.create_updated(use_color=use_color))

    report, summary = compare_directories(parsed_args.before, parsed_args.after, options.collect)
    text = render_report(report, summary, format=options.report_format, options=options.report)

    if parsed_args.output:
        output_path = write_report(text, parsed_args.output)
        _report_summary(parsed_args, summary, output_path)
        if options.open_report:
            _open_in_browser(output_path)
    else:
        print(text)
        if parsed_args.rich:
            print_summary_table(summary)

    return EXIT_SUCCESS


def handle_run_command(parsed_args: argparse.Namespace, options: SiteDiffOptions) -> int:
    """Run the full build, format and compare pipeline.

    Returns
    -------
    int
        Exit code (0 for success)

    """
    result = run_site_comparison(options)
    _report_summary(parsed_args, result.summary, result.report_path)
    if options.open_report:
        _open_in_browser(result.report_path)
    return EXIT_SUCCESS


def main(args: list[str] | None = None) -> int:
    """Execute the sitediff command line.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments; defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        options = _load_options(parsed_args)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        if parsed_args.command == "compare":
            return handle_compare_command(parsed_args, options)
        return handle_run_command(parsed_args, options)
    except SiteDiffError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)


if __name__ == "__main__":
    sys.exit(main())
