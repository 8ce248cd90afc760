#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitediff/diff/renderers/json.py
"""JSON report renderer for structured output.

This renderer serializes a :class:`ReportDocument` into machine-readable
JSON suitable for CI tooling and further analysis.
"""

from __future__ import annotations

import json
from typing import Any, Dict

from sitediff.diff.document import ChangedFileEntry, ReportDocument
from sitediff.exceptions import RenderingError
from sitediff.options import JsonReportOptions


class JsonReportRenderer:
    """Render a report document as structured JSON.

    Parameters
    ----------
    options : JsonReportOptions, optional
        Rendering options; defaults to :class:`JsonReportOptions`

    Examples
    --------
    Render without line-level detail:
        >>> from sitediff.options import JsonReportOptions
        >>> renderer = JsonReportRenderer(JsonReportOptions(include_lines=False))

    """

    def __init__(self, options: JsonReportOptions | None = None):
        """Initialize the JSON renderer."""
        self.options = options or JsonReportOptions()

    def render(self, document: ReportDocument) -> str:
        """Render ``document`` to a JSON string.

        Raises
        ------
        RenderingError
            If the document cannot be serialized

        """
        data = self.to_dict(document)
        try:
            if self.options.pretty_print:
                return json.dumps(data, indent=self.options.indent, ensure_ascii=False)
            return json.dumps(data, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise RenderingError("failed to render report", rendering_stage="json", original_error=e) from e

    def to_dict(self, document: ReportDocument) -> Dict[str, Any]:
        """Convert the document into JSON-compatible data."""
        return {
            "type": "site_comparison",
            "title": document.title,
            "summary": document.summary.to_dict(),
            "identical": list(document.identical.paths),
            "added": list(document.added.paths),
            "removed": list(document.removed.paths),
            "changed": [self._changed_entry(entry) for entry in document.changed],
        }

    def _changed_entry(self, entry: ChangedFileEntry) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "path": entry.path,
            "anchor": entry.anchor,
            "lines_added": entry.lines_added,
            "lines_removed": entry.lines_removed,
        }
        if self.options.include_lines:
            data["lines"] = [
                {"tag": change.tag.value, "text": change.text, "blank": change.is_blank} for change in entry.changes
            ]
        return data
