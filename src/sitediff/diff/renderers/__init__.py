#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitediff/diff/renderers/__init__.py
"""Report renderers for various output formats.

Available Renderers
-------------------
- HtmlReportRenderer: Self-contained, navigable HTML page (the default)
- JsonReportRenderer: Structured JSON output for programmatic access
- TextReportRenderer: Plain-text output, optionally colorized for terminals

Examples
--------
Render a comparison as HTML:
    >>> from sitediff.diff import analyze_comparison, build_document, compare
    >>> from sitediff.diff.renderers import HtmlReportRenderer
    >>> document = build_document(analyze_comparison(compare(before, after)))
    >>> html = HtmlReportRenderer().render(document)

"""

from sitediff.diff.renderers.html import HtmlReportRenderer
from sitediff.diff.renderers.json import JsonReportRenderer
from sitediff.diff.renderers.text import TextReportRenderer

__all__ = [
    "HtmlReportRenderer",
    "JsonReportRenderer",
    "TextReportRenderer",
]
