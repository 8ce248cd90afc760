"""Test utilities for sitediff test suite.

This module provides helpers for laying out built site trees on disk and
for creating throwaway directories.
"""

import shutil
import tempfile
from pathlib import Path
from typing import Mapping


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def write_site(root: Path, files: Mapping[str, str | bytes]) -> Path:
    """Write a site tree under ``root``.

    Keys are site paths such as ``"/blog/index.html"``; ``str`` values are
    written as UTF-8 text and ``bytes`` values verbatim.
    """
    root.mkdir(parents=True, exist_ok=True)
    for site_path, content in files.items():
        target = root / site_path.lstrip("/")
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(content, encoding="utf-8")
    return root
