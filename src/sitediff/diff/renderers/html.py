#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitediff/diff/renderers/html.py
"""HTML report renderer.

Produces a single self-contained HTML page (inline CSS, no external
resources) from a :class:`ReportDocument` using a Jinja2 template with
autoescaping enabled. Diff lines arrive pre-escaped as
:class:`markupsafe.Markup` from :meth:`LineChange.render_html`; every other
value is escaped by the template.
"""

from __future__ import annotations

import logging
from typing import Any

from jinja2 import Environment, StrictUndefined, Template, TemplateError

from sitediff.diff.document import ReportDocument
from sitediff.exceptions import RenderingError
from sitediff.options import HtmlReportOptions

logger = logging.getLogger(__name__)

REPORT_CSS = """
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
            line-height: 1.6;
            color: #333;
            max-width: 1200px;
            margin: 0 auto;
            padding: 20px;
            background-color: #f5f5f5;
        }
        .container {
            background-color: white;
            padding: 30px;
            border-radius: 8px;
            box-shadow: 0 2px 4px rgba(0,0,0,0.1);
        }
        h1 {
            color: #2c3e50;
            border-bottom: 3px solid #3498db;
            padding-bottom: 10px;
        }
        h2 {
            color: #1d3c78;
            font-size: 18px;
        }
        .similarity {
            background-color: #f0f4ff;
            border: 1px solid #cbd7f7;
            border-radius: 6px;
            padding: 12px 16px;
            margin-bottom: 20px;
        }
        .similarity-bar {
            height: 12px;
            background-color: #ffcccc;
            border-radius: 6px;
            overflow: hidden;
        }
        .similarity-fill {
            height: 100%;
            background-color: #28a745;
        }
        .similarity-text {
            font-weight: 600;
            color: #51658a;
        }
        .file-list li, .changed-list li {
            font-family: 'Courier New', Courier, monospace;
            font-size: 14px;
        }
        .stat-added {
            color: #116329;
        }
        .stat-removed {
            color: #82071e;
        }
        .file-diff {
            margin: 24px 0;
            border: 1px solid #ddd;
            border-radius: 6px;
            overflow: hidden;
        }
        .file-diff h3 {
            margin: 0;
            padding: 8px 12px;
            background-color: #fafbfc;
            border-bottom: 1px solid #ddd;
            font-size: 14px;
        }
        .file-diff pre {
            margin: 0;
            padding: 8px 0;
            overflow-x: auto;
            font-size: 13px;
        }
        .line {
            display: block;
            width: 100%;
            padding: 0 12px;
            white-space: pre;
        }
        .diff-add {
            background-color: #ccffcc;
        }
        .diff-remove {
            background-color: #ffcccc;
        }
        .diff-blank-remove {
            background-color: #f1f3f5;
            color: #7a8699;
        }
        details.identical-collapsed summary {
            cursor: pointer;
            color: #5b6b7f;
        }
"""

REPORT_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta http-equiv="x-ua-compatible" content="ie=edge">
  <meta name="viewport" content="width=device-width, initial-scale=1.0, maximum-scale=1">
  <title>{{ document.title }}</title>
{%- if options.include_styles %}
  <style>{{ css | safe }}  </style>
{%- endif %}
</head>
<body>
  <div class="container">
    <h1>{{ document.title }}</h1>
{%- macro stats(added, removed) -%}
<span class="stat-added">+{{ added }}</span> <span class="stat-removed">-{{ removed }}</span>
{%- endmacro %}
{%- macro file_list(section) %}
    <section id="{{ section.key }}">
      <h2>{{ section.title }} ({{ section.count }})</h2>
      <ol class="file-list">
      {%- for path in section.paths %}
        <li>{{ path }}</li>
      {%- endfor %}
      </ol>
    </section>
{%- endmacro %}
    <section class="similarity" id="similarity">
      <div class="similarity-bar" role="progressbar" aria-valuemin="0" aria-valuemax="100" \
aria-valuenow="{{ summary.percent_similar }}">
        <div class="similarity-fill" style="width: {{ summary.percent_similar }}%"></div>
      </div>
      <p class="similarity-text">{{ summary.percent_similar }}% similar \
({{ summary.identical_count }} of {{ summary.total_count }} files identical)</p>
    </section>
{%- if options.collapse_identical %}
    <details class="identical-collapsed">
      <summary>{{ document.identical.title }} ({{ document.identical.count }})</summary>
{{- file_list(document.identical) }}
    </details>
{%- else %}
{{- file_list(document.identical) }}
{%- endif %}
{{- file_list(document.added) }}
{{- file_list(document.removed) }}
    <section id="changed">
      <h2>Changed files ({{ document.changed | length }}) {{ stats(summary.lines_added, summary.lines_removed) }}</h2>
      <ol class="changed-list">
      {%- for entry in document.changed %}
        <li><a href="#{{ entry.anchor }}">{{ entry.path }}</a> {{ stats(entry.lines_added, entry.lines_removed) }}</li>
      {%- endfor %}
      </ol>
    </section>
    <section id="diffs">
      <h2>Diffs</h2>
    {%- for entry in document.changed %}
      <div class="file-diff" id="{{ entry.anchor }}">
        <h3>{{ entry.path }} {{ stats(entry.lines_added, entry.lines_removed) }}</h3>
        <pre><code>
        {%- for change in entry.changes -%}
<span class="line{% if change.css_class %} {{ change.css_class }}{% endif %}">{{ change.render_html() }}</span>
        {%- endfor -%}
        </code></pre>
      </div>
    {%- endfor %}
    </section>
  </div>
</body>
</html>
"""


class HtmlReportRenderer:
    """Render a report document as a standalone HTML page.

    Parameters
    ----------
    options : HtmlReportOptions, optional
        Rendering options; defaults to :class:`HtmlReportOptions`

    Examples
    --------
    Render an analyzed comparison:
        >>> from sitediff.diff import analyze_comparison, build_document, compare
        >>> report = analyze_comparison(compare({"/a.html": "x\\n"}, {"/a.html": "y\\n"}))
        >>> html = HtmlReportRenderer().render(build_document(report))

    """

    def __init__(self, options: HtmlReportOptions | None = None):
        """Initialize the HTML renderer."""
        self.options = options or HtmlReportOptions()
        self._env: Environment | None = None
        self._template: Template | None = None

    def _setup_jinja_env(self) -> Template:
        """Create the Jinja2 environment and compile the report template."""
        if self._template is None:
            self._env = Environment(autoescape=True, undefined=StrictUndefined, keep_trailing_newline=True)
            self._template = self._env.from_string(REPORT_TEMPLATE)
        return self._template

    def _template_context(self, document: ReportDocument) -> dict[str, Any]:
        return {
            "document": document,
            "summary": document.summary,
            "options": self.options,
            "css": REPORT_CSS,
        }

    def render(self, document: ReportDocument) -> str:
        """Render ``document`` to an HTML string.

        Parameters
        ----------
        document : ReportDocument
            Report to render

        Returns
        -------
        str
            Complete HTML document

        Raises
        ------
        RenderingError
            If the template fails to render; no partial output is returned

        """
        try:
            template = self._setup_jinja_env()
            html = template.render(**self._template_context(document))
        except TemplateError as e:
            raise RenderingError("failed to render report", rendering_stage="html", original_error=e) from e

        logger.debug("Rendered HTML report (%d characters)", len(html))
        return html
