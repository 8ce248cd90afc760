"""Unit tests for option dataclasses."""

import logging
from dataclasses import FrozenInstanceError, fields

import pytest

from sitediff.options import (
    BuildOptions,
    CollectOptions,
    HtmlReportOptions,
    JsonReportOptions,
    SiteDiffOptions,
    TextReportOptions,
)


@pytest.mark.unit
class TestOptionDefaults:
    """Tests for default values and validation."""

    def test_collect_defaults(self):
        """Test that images are excluded by default."""
        assert CollectOptions().exclude_patterns == ("*.png", "*.ico")

    def test_build_defaults(self):
        """Test the default work directory and empty commands."""
        options = BuildOptions()
        assert options.work_dir == ".compare"
        assert options.before_command == ()
        assert options.format_command == ()

    def test_site_defaults(self):
        """Test that HTML is the default report format."""
        options = SiteDiffOptions()
        assert options.report_format == "html"
        assert isinstance(options.report, HtmlReportOptions)
        assert options.report.title == "Site Comparison"
        assert not options.open_report

    def test_frozen(self):
        """Test that options cannot be mutated in place."""
        with pytest.raises(FrozenInstanceError):
            CollectOptions().exclude_patterns = ()  # type: ignore[misc]

    def test_every_field_has_help(self):
        """Test that field metadata carries help text."""
        for options_class in (CollectOptions, BuildOptions, HtmlReportOptions, JsonReportOptions, TextReportOptions):
            for f in fields(options_class):
                assert f.metadata.get("help"), f"{options_class.__name__}.{f.name} has no help"

    def test_invalid_values(self):
        """Test __post_init__ validation."""
        with pytest.raises(ValueError):
            CollectOptions(exclude_patterns=("",))
        with pytest.raises(ValueError):
            BuildOptions(work_dir="")
        with pytest.raises(ValueError):
            JsonReportOptions(indent=-1)
        with pytest.raises(ValueError, match="report_format"):
            SiteDiffOptions(report_format="pdf")

    def test_report_options_must_match_format(self):
        """Test that the report options class must fit the format."""
        with pytest.raises(ValueError, match="JsonReportOptions"):
            SiteDiffOptions(report_format="json", report=HtmlReportOptions())


@pytest.mark.unit
class TestCreateUpdated:
    """Tests for create_updated and with_format."""

    def test_create_updated(self):
        """Test cloning with changed fields."""
        original = BuildOptions(before_command=("a",))
        updated = original.create_updated(work_dir="out")
        assert updated.work_dir == "out"
        assert updated.before_command == ("a",)
        assert original.work_dir == ".compare"

    def test_with_format_keeps_title(self):
        """Test switching formats keeps the report title."""
        options = SiteDiffOptions(report=HtmlReportOptions(title="Mine"))
        switched = options.with_format("text")
        assert switched.report_format == "text"
        assert isinstance(switched.report, TextReportOptions)
        assert switched.report.title == "Mine"

    def test_with_same_format(self):
        """Test that the same format returns the same options."""
        options = SiteDiffOptions(report=HtmlReportOptions(collapse_identical=True))
        assert options.with_format("html") is options

    def test_with_unknown_format(self):
        """Test that an unknown format is rejected."""
        with pytest.raises(ValueError):
            SiteDiffOptions().with_format("pdf")


@pytest.mark.unit
class TestFromConfig:
    """Tests for SiteDiffOptions.from_config."""

    def test_full_config(self):
        """Test converting every supported section."""
        config = {
            "build": {
                "before": ["zola", "build", "--output-dir", "{output_dir}"],
                "after": ["site", "build", "{output_dir}"],
                "format": ["prettier", "{output_dir}", "--write"],
                "work_dir": "tmp/compare",
            },
            "collect": {"exclude": ["*.png", "*.woff2"]},
            "report": {"format": "html", "title": "Preview", "collapse_identical": True, "open": True},
        }
        options = SiteDiffOptions.from_config(config)
        assert options.build.before_command == ("zola", "build", "--output-dir", "{output_dir}")
        assert options.build.after_command == ("site", "build", "{output_dir}")
        assert options.build.format_command == ("prettier", "{output_dir}", "--write")
        assert options.build.work_dir == "tmp/compare"
        assert options.collect.exclude_patterns == ("*.png", "*.woff2")
        assert options.report == HtmlReportOptions(title="Preview", collapse_identical=True)
        assert options.open_report

    def test_empty_config(self):
        """Test that an empty config yields defaults."""
        assert SiteDiffOptions.from_config({}) == SiteDiffOptions()

    def test_text_format(self):
        """Test selecting the text report through config."""
        options = SiteDiffOptions.from_config({"report": {"format": "text", "show_diffs": False}})
        assert options.report == TextReportOptions(show_diffs=False)

    def test_unknown_keys_are_ignored(self, caplog):
        """Test that unknown sections and keys are logged and skipped."""
        with caplog.at_level(logging.WARNING, logger="sitediff.options"):
            options = SiteDiffOptions.from_config({"extra": {}, "build": {"before": ["x"], "colour": "red"}})
        assert options.build.before_command == ("x",)
        messages = " ".join(record.getMessage() for record in caplog.records)
        assert "extra" in messages
        assert "colour" in messages

    def test_invalid_format(self):
        """Test that an unknown report format is rejected."""
        with pytest.raises(ValueError):
            SiteDiffOptions.from_config({"report": {"format": "pdf"}})

    @pytest.mark.parametrize(
        "config,name",
        [
            ({"collect": {"exclude": "*.png"}}, "exclude_patterns"),
            ({"build": {"before": "zola build"}}, "before_command"),
            ({"build": {"after": "zola build"}}, "after_command"),
            ({"build": {"format": "prettier --write"}}, "format_command"),
        ],
    )
    def test_string_instead_of_list(self, config, name):
        """Test that a bare string where a list belongs is rejected, not split into characters."""
        with pytest.raises(ValueError, match=f"{name} must be a list of strings"):
            SiteDiffOptions.from_config(config)

    def test_non_string_items(self):
        """Test that list items must be strings."""
        with pytest.raises(ValueError, match="before_command must contain strings"):
            SiteDiffOptions.from_config({"build": {"before": ["zola", 3]}})
        with pytest.raises(ValueError, match="exclude_patterns must contain non-empty strings"):
            SiteDiffOptions.from_config({"collect": {"exclude": ["*.png", ""]}})
