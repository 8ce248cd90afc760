"""Integration tests running real build commands through the pipeline."""

import json
import sys

import pytest
from utils import write_site

from sitediff import (
    BuildOptions,
    JsonReportOptions,
    SiteDiffOptions,
    compare_directories,
    render_report,
    run_site_comparison,
)
from sitediff.exceptions import BuildError

# Writes a tiny site into argv[1]; argv[2] selects the variant
BUILD_SCRIPT = """
import pathlib, sys
out = pathlib.Path(sys.argv[1])
(out / "blog").mkdir(parents=True)
(out / "index.html").write_text("<h1>Home</h1>\\n", encoding="utf-8")
(out / "logo.png").write_bytes(b"\\x89PNG")
if sys.argv[2] == "before":
    (out / "blog" / "index.html").write_text("<p>one</p>\\n<p>two</p>\\n\\n", encoding="utf-8")
    (out / "old.html").write_text("old\\n", encoding="utf-8")
else:
    (out / "blog" / "index.html").write_text("<p>one</p>\\n<p>2</p>\\n", encoding="utf-8")
    (out / "new.html").write_text("new\\n", encoding="utf-8")
"""

FORMAT_SCRIPT = """
import pathlib, sys
for path in pathlib.Path(sys.argv[1]).rglob("*.html"):
    path.write_text(path.read_text(encoding="utf-8").rstrip("\\n") + "\\n", encoding="utf-8")
"""


def _command(script, *args):
    return (sys.executable, "-c", script, *args)


@pytest.mark.integration
class TestPipelineIntegration:
    """Run the pipeline with real subprocesses."""

    def test_build_format_compare(self, temp_dir):
        """Test a full run with build and format commands."""
        options = SiteDiffOptions(
            build=BuildOptions(
                before_command=_command(BUILD_SCRIPT, "{output_dir}", "before"),
                after_command=_command(BUILD_SCRIPT, "{output_dir}", "after"),
                format_command=_command(FORMAT_SCRIPT, "{output_dir}"),
            ),
            report_format="json",
            report=JsonReportOptions(),
        )
        result = run_site_comparison(options, cwd=temp_dir)

        data = json.loads(result.report_path.read_text(encoding="utf-8"))
        assert data["identical"] == ["/index.html"]
        assert data["added"] == ["/new.html"]
        assert data["removed"] == ["/old.html"]
        (changed,) = data["changed"]
        assert changed["path"] == "/blog/index.html"
        assert changed["lines_added"] == 1
        assert changed["lines_removed"] == 1
        assert data["summary"]["percent_similar"] == 25

    def test_failing_build(self, temp_dir):
        """Test that a real non-zero exit status stops the run."""
        options = SiteDiffOptions(
            build=BuildOptions(
                before_command=(sys.executable, "-c", "import sys; sys.exit(4)"),
                after_command=_command(BUILD_SCRIPT, "{output_dir}", "after"),
            )
        )
        with pytest.raises(BuildError) as exc_info:
            run_site_comparison(options, cwd=temp_dir)
        assert exc_info.value.returncode == 4


@pytest.mark.integration
class TestDirectoryComparison:
    """Compare directories on disk and render every format."""

    def test_whitespace_only_changes_are_identical(self, temp_dir):
        """Test that trailing blank-line churn does not show up as a change."""
        before = write_site(temp_dir / "before", {"/a.html": "text\n\n", "/b.html": "same\n"})
        after = write_site(temp_dir / "after", {"/a.html": "text\n", "/b.html": "same\n"})
        report, summary = compare_directories(before, after)
        assert report.identical == ("/a.html", "/b.html")
        assert summary.percent_similar == 100
        assert "Changed files (0)" in render_report(report, summary, format="text")

    def test_all_formats(self, site_dirs):
        """Test that every format renders the fixture site."""
        report, summary = compare_directories(*site_dirs)
        html = render_report(report, summary, format="html")
        assert "40% similar (2 of 5 files identical)" in html
        assert json.loads(render_report(report, summary, format="json"))["summary"]["changed_count"] == 1
        assert "--- /about/index.html +1 -1" in render_report(report, summary, format="text")
