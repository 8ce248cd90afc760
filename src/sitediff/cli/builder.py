#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/sitediff/cli/builder.py
"""Argument parser and exit codes for the sitediff command line."""

import argparse

from sitediff.constants import DEFAULT_WORK_DIR, REPORT_FORMATS
from sitediff.exceptions import BuildError, FileError, RenderingError, ValidationError

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_BUILD_ERROR = 5
EXIT_RENDERING_ERROR = 7


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (ValidationError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR

    # Includes CollectionError
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, BuildError):
        return EXIT_BUILD_ERROR

    # Includes OutputWriteError
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def _add_report_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        "-f",
        choices=REPORT_FORMATS,
        default=None,
        help="Report format: html, json, or text (default: from config, else html)",
    )
    parser.add_argument("--title", default=None, help="Report title")
    parser.add_argument(
        "--open",
        dest="open_report",
        action="store_true",
        default=None,
        help="Open the written report in a web browser",
    )
    parser.add_argument(
        "--rich",
        action="store_true",
        help="Print a formatted summary table to stderr",
    )


def _add_global_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", help="Path to a configuration file (TOML, YAML, JSON or pyproject.toml)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Debug logging with timestamps and logger names",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the sitediff argument parser.

    Returns
    -------
    argparse.ArgumentParser
        Parser with ``compare`` and ``run`` subcommands

    """
    parser = argparse.ArgumentParser(
        prog="sitediff",
        description="Compare two builds of a static site and report what changed.",
    )
    _add_global_arguments(parser)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    compare_parser = subparsers.add_parser(
        "compare",
        help="Compare two already built site directories",
        description="Compare two built site directories and render a report.",
    )
    compare_parser.add_argument("before", help="Directory holding the 'before' site")
    compare_parser.add_argument("after", help="Directory holding the 'after' site")
    _add_report_arguments(compare_parser)
    compare_parser.add_argument("--output", "-o", help="Write the report to a file (default: stdout)")
    compare_parser.add_argument(
        "--exclude",
        nargs="+",
        metavar="GLOB",
        default=None,
        help="Filename patterns to skip (default: from config, else *.png *.ico)",
    )
    compare_parser.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Colorize text reports: auto (default, if terminal), always, never",
    )
    compare_parser.add_argument(
        "--collapse-identical",
        action="store_true",
        default=None,
        help="Collapse the identical file listing in HTML reports",
    )

    run_parser = subparsers.add_parser(
        "run",
        help="Build both site variants, format them, and compare",
        description=(
            "Clear the work directory, build the before and after sites with the configured "
            "commands, format them, and write a report into the work directory."
        ),
    )
    _add_report_arguments(run_parser)
    run_parser.add_argument(
        "--work-dir",
        default=None,
        help=f"Directory for build outputs and the report (default: from config, else {DEFAULT_WORK_DIR})",
    )

    return parser
