"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/sitediff/cli/output.py
import sys
from pathlib import Path
from typing import TextIO

from sitediff.constants import ColorMode
from sitediff.diff.summary import ReportSummary


def stream_supports_color(mode: ColorMode | str, stream: TextIO | None = None) -> bool:
    """Decide whether ANSI colors should be written to ``stream``.

    ``auto`` colors only when the stream is a terminal.
    """
    if mode == "always":
        return True
    if mode == "never":
        return False
    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    if callable(isatty):
        try:
            return bool(isatty())
        except (OSError, ValueError):
            return False
    return False


def print_summary_table(summary: ReportSummary, report_path: Path | None = None) -> None:
    """Print the comparison summary as a rich table on stderr.

    Parameters
    ----------
    summary : ReportSummary
        Summary of the comparison
    report_path : Path, optional
        Where the report was written, shown below the table

    """
    from rich.console import Console
    from rich.table import Table

    console = Console(stderr=True)

    table = Table(title=f"{summary.percent_similar}% similar")
    table.add_column("Category", style="cyan", no_wrap=True)
    table.add_column("Files", justify="right")

    table.add_row("Identical", str(summary.identical_count))
    table.add_row("Added", f"[green]{summary.added_count}[/green]")
    table.add_row("Removed", f"[red]{summary.removed_count}[/red]")
    table.add_row("Changed", f"[yellow]{summary.changed_count}[/yellow]")
    table.add_row("Total", str(summary.total_count), style="bold")

    console.print(table)
    console.print(f"Lines: [green]+{summary.lines_added}[/green] [red]-{summary.lines_removed}[/red]")
    if report_path is not None:
        console.print(f"Report: {report_path}")


def print_plain_summary(summary: ReportSummary, report_path: Path | None = None) -> None:
    """Print a one-line summary on stderr."""
    message = (
        f"{summary.percent_similar}% similar: {summary.identical_count} identical, "
        f"{summary.added_count} added, {summary.removed_count} removed, {summary.changed_count} changed"
    )
    print(message, file=sys.stderr)
    if report_path is not None:
        print(f"Report written to: {report_path}", file=sys.stderr)
