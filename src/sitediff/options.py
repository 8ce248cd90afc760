#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Option dataclasses for collection, building, and report rendering.

All option classes are frozen dataclasses. Use ``create_updated`` to derive a
modified copy. Field metadata carries the help text surfaced by the CLI.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from sitediff.constants import (
    DEFAULT_EXCLUDE_PATTERNS,
    DEFAULT_JSON_INDENT,
    DEFAULT_REPORT_TITLE,
    DEFAULT_WORK_DIR,
    REPORT_FORMATS,
)

logger = logging.getLogger(__name__)


def _validate_string_tuple(name: str, value: Any, allow_empty_items: bool = True) -> None:
    """Raise ValueError unless ``value`` is a tuple of strings. A bare string is rejected."""
    if not isinstance(value, tuple):
        raise ValueError(f"{name} must be a list of strings, got {type(value).__name__} {value!r}")
    for item in value:
        if not isinstance(item, str) or (not allow_empty_items and not item):
            qualifier = "strings" if allow_empty_items else "non-empty strings"
            raise ValueError(f"{name} must contain {qualifier}, got {item!r}")


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], section: str = "") -> Self:
        """Build options from a config mapping, ignoring unknown keys.

        Parameters
        ----------
        data : mapping
            Field name to value mapping, typically one config file section
        section : str, default = ""
            Section name used in the warning for unknown keys

        Returns
        -------
        Self
            New options instance

        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown %s option(s): %s", section or cls.__name__, ", ".join(unknown))

        values = {}
        for key, value in data.items():
            if key not in known:
                continue
            # TOML/YAML/JSON produce lists; options hold tuples
            values[key] = tuple(value) if isinstance(value, list) else value
        return cls(**values)


@dataclass(frozen=True)
class CollectOptions(CloneFrozenMixin):
    """Options controlling how a built site directory becomes a snapshot.

    Parameters
    ----------
    exclude_patterns : tuple of str
        Filename globs to skip, such as binary image formats

    """

    exclude_patterns: tuple[str, ...] = field(
        default=DEFAULT_EXCLUDE_PATTERNS,
        metadata={"help": "Filename glob patterns to skip when collecting files (binary assets)"},
    )

    def __post_init__(self) -> None:
        """Validate pattern types.

        Raises
        ------
        ValueError
            If ``exclude_patterns`` is not a tuple of non-empty strings.

        """
        _validate_string_tuple("exclude_patterns", self.exclude_patterns, allow_empty_items=False)


@dataclass(frozen=True)
class BuildOptions(CloneFrozenMixin):
    """Options for building the two site variants.

    Commands are argument lists; ``{output_dir}`` in any argument is replaced
    with the directory the variant must be written to.

    Parameters
    ----------
    before_command : tuple of str
        Command that builds the "before" site
    after_command : tuple of str
        Command that builds the "after" site
    format_command : tuple of str
        Command run on each output directory to normalize formatting; empty
        to skip formatting
    work_dir : str
        Directory holding ``before/``, ``after/`` and the report

    """

    before_command: tuple[str, ...] = field(
        default=(),
        metadata={"help": "Command building the 'before' site, with {output_dir} placeholder"},
    )
    after_command: tuple[str, ...] = field(
        default=(),
        metadata={"help": "Command building the 'after' site, with {output_dir} placeholder"},
    )
    format_command: tuple[str, ...] = field(
        default=(),
        metadata={"help": "Formatter command run on each output directory (e.g. prettier)"},
    )
    work_dir: str = field(
        default=DEFAULT_WORK_DIR,
        metadata={"help": "Working directory for build outputs and the report"},
    )

    def __post_init__(self) -> None:
        """Validate commands and the work directory.

        Raises
        ------
        ValueError
            If a command is not a tuple of strings or ``work_dir`` is empty.

        """
        for name in ("before_command", "after_command", "format_command"):
            _validate_string_tuple(name, getattr(self, name))
        if not self.work_dir:
            raise ValueError("work_dir must not be empty")


@dataclass(frozen=True)
class BaseReportOptions(CloneFrozenMixin):
    """Options shared by every report renderer.

    Parameters
    ----------
    title : str
        Report title

    """

    title: str = field(
        default=DEFAULT_REPORT_TITLE,
        metadata={"help": "Title shown at the top of the report"},
    )


@dataclass(frozen=True)
class HtmlReportOptions(BaseReportOptions):
    """Options for the HTML report.

    Parameters
    ----------
    include_styles : bool
        Embed the stylesheet in the document
    collapse_identical : bool
        Wrap the identical-file listing in a collapsed ``<details>`` element

    """

    include_styles: bool = field(
        default=True,
        metadata={"help": "Embed CSS styles in the HTML report"},
    )
    collapse_identical: bool = field(
        default=False,
        metadata={"help": "Collapse the identical files listing"},
    )


@dataclass(frozen=True)
class JsonReportOptions(BaseReportOptions):
    """Options for the JSON report.

    Parameters
    ----------
    pretty_print : bool
        Indent the JSON output
    indent : int
        Indentation width when pretty printing
    include_lines : bool
        Include every diff line of changed files

    """

    pretty_print: bool = field(default=True, metadata={"help": "Format JSON with indentation"})
    indent: int = field(default=DEFAULT_JSON_INDENT, metadata={"help": "Indent width for pretty-printed JSON"})
    include_lines: bool = field(default=True, metadata={"help": "Include line-level diffs for changed files"})

    def __post_init__(self) -> None:
        """Validate indentation.

        Raises
        ------
        ValueError
            If ``indent`` is negative.

        """
        if self.indent < 0:
            raise ValueError(f"indent must be non-negative, got {self.indent}")


@dataclass(frozen=True)
class TextReportOptions(BaseReportOptions):
    """Options for the plain-text terminal report.

    Parameters
    ----------
    use_color : bool
        Add ANSI color codes
    show_diffs : bool
        Include line-level diffs after the file listings

    """

    use_color: bool = field(default=False, metadata={"help": "Colorize output with ANSI escape codes"})
    show_diffs: bool = field(default=True, metadata={"help": "Include line-level diffs of changed files"})


ReportOptions = HtmlReportOptions | JsonReportOptions | TextReportOptions

REPORT_OPTIONS_CLASSES: dict[str, type[BaseReportOptions]] = {
    "html": HtmlReportOptions,
    "json": JsonReportOptions,
    "text": TextReportOptions,
}


@dataclass(frozen=True)
class SiteDiffOptions(CloneFrozenMixin):
    """Complete configuration of a pipeline run.

    Parameters
    ----------
    build : BuildOptions
        Build commands and work directory
    collect : CollectOptions
        File collection settings
    report_format : str
        One of ``"html"``, ``"json"``, ``"text"``
    report : BaseReportOptions
        Options for the selected report format
    open_report : bool
        Open the written report in a web browser

    """

    build: BuildOptions = field(default_factory=BuildOptions)
    collect: CollectOptions = field(default_factory=CollectOptions)
    report_format: str = field(default="html", metadata={"help": "Report format: html, json, or text"})
    report: BaseReportOptions = field(default_factory=HtmlReportOptions)
    open_report: bool = field(default=False, metadata={"help": "Open the report in a browser when done"})

    def __post_init__(self) -> None:
        """Validate the report format.

        Raises
        ------
        ValueError
            If ``report_format`` is unknown.

        """
        if self.report_format not in REPORT_FORMATS:
            raise ValueError(f"report_format must be one of {', '.join(REPORT_FORMATS)}, got {self.report_format!r}")
        expected = REPORT_OPTIONS_CLASSES[self.report_format]
        if not isinstance(self.report, expected):
            raise ValueError(
                f"report options for format {self.report_format!r} must be {expected.__name__}, "
                f"got {type(self.report).__name__}"
            )

    def with_format(self, report_format: str) -> SiteDiffOptions:
        """Switch the report format, keeping the title of the current report options.

        Options specific to the previous format are dropped when the format
        actually changes.
        """
        if report_format == self.report_format:
            return self
        if report_format not in REPORT_OPTIONS_CLASSES:
            raise ValueError(f"report_format must be one of {', '.join(REPORT_FORMATS)}, got {report_format!r}")
        report = REPORT_OPTIONS_CLASSES[report_format](title=self.report.title)
        return self.create_updated(report_format=report_format, report=report)

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> SiteDiffOptions:
        """Build options from a loaded configuration dictionary.

        Recognized sections are ``build`` (``before``, ``after``, ``format``,
        ``work_dir``), ``collect`` (``exclude``) and ``report`` (``format``,
        ``open`` plus the fields of the format's options class).

        Parameters
        ----------
        config : mapping
            Configuration as returned by the config loader

        Returns
        -------
        SiteDiffOptions
            Options for a pipeline run

        """
        unknown = sorted(set(config) - {"build", "collect", "report"})
        if unknown:
            logger.warning("Ignoring unknown config section(s): %s", ", ".join(unknown))

        build_section = dict(config.get("build", {}))
        renames = {"before": "before_command", "after": "after_command", "format": "format_command"}
        for old, new in renames.items():
            if old in build_section:
                build_section[new] = build_section.pop(old)
        build = BuildOptions.from_dict(build_section, section="build")

        collect_section = dict(config.get("collect", {}))
        if "exclude" in collect_section:
            collect_section["exclude_patterns"] = collect_section.pop("exclude")
        collect = CollectOptions.from_dict(collect_section, section="collect")

        report_section = dict(config.get("report", {}))
        report_format = report_section.pop("format", "html")
        open_report = bool(report_section.pop("open", False))
        options_class = REPORT_OPTIONS_CLASSES.get(report_format, HtmlReportOptions)
        report = options_class.from_dict(report_section, section="report")

        return cls(
            build=build,
            collect=collect,
            report_format=report_format,
            report=report,
            open_report=open_report,
        )
