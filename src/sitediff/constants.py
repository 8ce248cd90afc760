#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the sitediff library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Comparison - Similarity and classification settings
3. Collection - Site tree collection defaults
4. Build Pipeline - Work directory layout and command placeholders
5. Report Rendering - Titles, CSS classes, and line prefixes
6. Configuration - Config file discovery
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

ReportFormat = Literal["html", "json", "text"]
ColorMode = Literal["auto", "always", "never"]

REPORT_FORMATS: tuple[str, ...] = ("html", "json", "text")

REPORT_FILE_EXTENSIONS: dict[str, str] = {
    "html": ".html",
    "json": ".json",
    "text": ".txt",
}

# =============================================================================
# Comparison
# =============================================================================

# Similarity reported when neither snapshot contains any file
EMPTY_COMPARISON_SIMILARITY = 100

# =============================================================================
# Collection
# =============================================================================

DEFAULT_EXCLUDE_PATTERNS: tuple[str, ...] = ("*.png", "*.ico")

# =============================================================================
# Build Pipeline
# =============================================================================

DEFAULT_WORK_DIR = ".compare"
BEFORE_DIR_NAME = "before"
AFTER_DIR_NAME = "after"
REPORT_BASENAME = "report"

# Placeholder substituted into build and format command arguments
OUTPUT_DIR_PLACEHOLDER = "{output_dir}"

# =============================================================================
# Report Rendering
# =============================================================================

DEFAULT_REPORT_TITLE = "Site Comparison"
DEFAULT_JSON_INDENT = 2

CSS_CLASS_ADDED = "diff-add"
CSS_CLASS_REMOVED = "diff-remove"
CSS_CLASS_BLANK_REMOVED = "diff-blank-remove"

PREFIX_ADDED = "+"
PREFIX_REMOVED = "-"
PREFIX_BLANK_REMOVED = "~"
PREFIX_EQUAL = " "

ANCHOR_PREFIX = "diff"
ANCHOR_HASH_LENGTH = 8

# =============================================================================
# Configuration
# =============================================================================

CONFIG_ENV_VAR = "SITEDIFF_CONFIG"
CONFIG_FILENAMES: tuple[str, ...] = (".sitediff.toml", ".sitediff.yaml", ".sitediff.yml", ".sitediff.json")
PYPROJECT_TOOL_SECTION = "sitediff"
