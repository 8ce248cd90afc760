#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitediff/diff/renderers/text.py
"""Plain-text report renderer with optional ANSI colors.

The text report follows the same section order as the HTML report and
prefixes diff lines exactly as the HTML view does (``+``, ``-``, ``~`` and a
space), which makes it suitable for terminals and CI logs.
"""

from __future__ import annotations

from typing import Iterator

from sitediff.diff.document import FileListSection, ReportDocument
from sitediff.diff.text_diff import LineChange, LineTag
from sitediff.options import TextReportOptions

RED = "\033[31m"
GREEN = "\033[32m"
BOLD = "\033[1m"
DIM = "\033[2m"
RESET = "\033[0m"

BAR_WIDTH = 40


class TextReportRenderer:
    """Render a report document as plain text.

    This renderer adds color codes when ``use_color`` is set:
    - Green for added lines
    - Red for removed lines
    - Dim for blank removed lines
    - Bold for headings

    Parameters
    ----------
    options : TextReportOptions, optional
        Rendering options; defaults to :class:`TextReportOptions`

    """

    def __init__(self, options: TextReportOptions | None = None):
        """Initialize the text renderer."""
        self.options = options or TextReportOptions()

    def render(self, document: ReportDocument) -> str:
        """Render ``document`` to a single string."""
        return "\n".join(self.iter_lines(document)) + "\n"

    def iter_lines(self, document: ReportDocument) -> Iterator[str]:
        """Yield the report line by line."""
        summary = document.summary
        yield self._bold(document.title)
        yield "=" * len(document.title)
        yield ""
        yield f"{similarity_bar(summary.percent_similar)} {summary.percent_similar}% similar"
        yield ""

        for section in document.file_sections:
            yield from self._file_list(section)

        yield self._bold(
            f"Changed files ({len(document.changed)}) +{summary.lines_added} -{summary.lines_removed}"
        )
        for entry in document.changed:
            yield f"  {entry.path} +{entry.lines_added} -{entry.lines_removed}"
        yield ""

        if not self.options.show_diffs:
            return

        for entry in document.changed:
            yield self._bold(f"--- {entry.path} +{entry.lines_added} -{entry.lines_removed}")
            for change in entry.changes:
                yield self._colorize(change)
            yield ""

    def _file_list(self, section: FileListSection) -> Iterator[str]:
        yield self._bold(f"{section.title} ({section.count})")
        for path in section.paths:
            yield f"  {path}"
        yield ""

    def _bold(self, text: str) -> str:
        return f"{BOLD}{text}{RESET}" if self.options.use_color else text

    def _colorize(self, change: LineChange) -> str:
        line = change.render_text()
        if not self.options.use_color or change.tag is LineTag.EQUAL:
            return line
        if change.tag is LineTag.INSERT:
            return f"{GREEN}{line}{RESET}"
        if change.is_blank:
            return f"{DIM}{line}{RESET}"
        return f"{RED}{line}{RESET}"


def similarity_bar(percent: int, width: int = BAR_WIDTH) -> str:
    """Return a fixed-width text bar proportional to ``percent``.

    Examples
    --------
        >>> similarity_bar(50, width=10)
        '[#####.....]'

    """
    filled = (max(0, min(percent, 100)) * width) // 100
    return "[" + "#" * filled + "." * (width - filled) + "]"
