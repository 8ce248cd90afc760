"""Unit tests for the HTML report renderer."""

from unittest.mock import patch

import pytest
from jinja2 import TemplateError

from sitediff.diff.comparison import compare
from sitediff.diff.document import build_document
from sitediff.diff.renderers.html import HtmlReportRenderer
from sitediff.diff.text_diff import analyze_comparison
from sitediff.exceptions import RenderingError
from sitediff.options import HtmlReportOptions
from sitediff.utils.text import path_anchor


def _render(before, after, **option_kwargs) -> str:
    document = build_document(analyze_comparison(compare(before, after)))
    return HtmlReportRenderer(HtmlReportOptions(**option_kwargs)).render(document)


@pytest.mark.unit
class TestHtmlReportRenderer:
    """Tests for HtmlReportRenderer."""

    def test_standalone_document(self):
        """Test that the output is a complete page with inline styles."""
        html = _render({"/a.html": "x"}, {"/a.html": "x"})
        assert html.startswith("<!DOCTYPE html>")
        assert "<style>" in html
        assert "</html>" in html
        assert "<link" not in html
        assert "<script" not in html

    def test_styles_can_be_omitted(self):
        """Test include_styles=False."""
        html = _render({"/a.html": "x"}, {"/a.html": "x"}, include_styles=False)
        assert "<style>" not in html

    def test_css_is_not_escaped(self):
        """Test that the stylesheet is embedded verbatim."""
        html = _render({}, {})
        assert "'Segoe UI'" in html
        assert "&#39;Segoe UI&#39;" not in html

    def test_similarity_indicator(self):
        """Test the similarity bar and text."""
        html = _render({"/a.html": "x", "/b.html": "y"}, {"/a.html": "x"})
        assert 'style="width: 50%"' in html
        assert "50% similar (1 of 2 files identical)" in html

    def test_empty_comparison(self):
        """Test that a zero-file comparison renders without error."""
        html = _render({}, {})
        assert "100% similar (0 of 0 files identical)" in html
        assert "Identical files (0)" in html

    def test_sections_in_fixed_order(self, before_files, after_files):
        """Test that sections appear in report order."""
        html = _render(before_files, after_files)
        positions = [
            html.index('id="similarity"'),
            html.index('id="identical"'),
            html.index('id="added"'),
            html.index('id="removed"'),
            html.index('id="changed"'),
            html.index('id="diffs"'),
        ]
        assert positions == sorted(positions)
        assert "Identical files (2)" in html
        assert "Added files (1)" in html
        assert "Removed files (1)" in html
        assert "<li>/new.html</li>" in html
        assert "<li>/old.html</li>" in html

    def test_changed_entry_links_to_diff(self):
        """Test that a changed file links to its anchored diff block."""
        html = _render({"/a.html": "line1\nline2\n"}, {"/a.html": "line1\nline2x\n"})
        anchor = path_anchor("/a.html")
        assert f'<a href="#{anchor}">/a.html</a>' in html
        assert f'<div class="file-diff" id="{anchor}">' in html
        assert "Changed files (1)" in html

    def test_line_styles(self):
        """Test per-line classes and prefixes."""
        html = _render({"/a.html": "keep\nold\n\n"}, {"/a.html": "keep\nnew\n"})
        assert '<span class="line"> keep</span>' in html
        assert '<span class="line diff-remove">-old</span>' in html
        assert '<span class="line diff-add">+new</span>' in html
        assert '<span class="line diff-blank-remove">~</span>' in html

    def test_stat_indicators(self):
        """Test aggregate and per-file +/- indicators."""
        html = _render({"/a.html": "1\n2\n"}, {"/a.html": "1\n3\n4\n"})
        assert '<span class="stat-added">+2</span> <span class="stat-removed">-1</span>' in html

    def test_content_is_escaped(self):
        """Test that file content cannot inject markup."""
        html = _render({"/a.html": "<p>old</p>\n"}, {"/a.html": "<script>alert(1)</script>\n"})
        assert "<script>alert(1)</script>" not in html
        assert "+&lt;script&gt;alert(1)&lt;/script&gt;" in html
        assert "-&lt;p&gt;old&lt;/p&gt;" in html

    def test_paths_are_escaped(self):
        """Test that paths are escaped in listings."""
        html = _render({}, {"/<b>.html": "x"})
        assert "<li>/&lt;b&gt;.html</li>" in html

    def test_title_is_escaped(self):
        """Test that the title is escaped."""
        document = build_document(analyze_comparison(compare({}, {})), title="A & B")
        html = HtmlReportRenderer().render(document)
        assert "<title>A &amp; B</title>" in html

    def test_collapse_identical(self):
        """Test that the identical listing can be collapsed."""
        html = _render({"/a.html": "x"}, {"/a.html": "x"}, collapse_identical=True)
        assert '<details class="identical-collapsed">' in html
        assert "<summary>Identical files (1)</summary>" in html

    def test_not_collapsed_by_default(self):
        """Test that the identical listing is expanded by default."""
        html = _render({"/a.html": "x"}, {"/a.html": "x"})
        assert "<details" not in html

    def test_rendering_is_deterministic(self, before_files, after_files):
        """Test that rendering the same input twice gives the same output."""
        assert _render(before_files, after_files) == _render(dict(before_files), dict(after_files))

    def test_template_failure_raises_rendering_error(self):
        """Test that template errors are surfaced as a single RenderingError."""
        document = build_document(analyze_comparison(compare({}, {})))
        renderer = HtmlReportRenderer()
        with patch("jinja2.Template.render", side_effect=TemplateError("boom")):
            with pytest.raises(RenderingError) as exc_info:
                renderer.render(document)
        assert str(exc_info.value) == "failed to render report"
        assert exc_info.value.rendering_stage == "html"
        assert isinstance(exc_info.value.original_error, TemplateError)
