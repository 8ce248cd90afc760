"""Pytest configuration and shared fixtures for sitediff test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os
from pathlib import Path
from typing import Generator

import pytest
from utils import cleanup_test_dir, create_test_temp_dir, write_site

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files.

    Yields
    ------
    Path
        Temporary directory path that will be cleaned up after test.

    """
    temp_path = create_test_temp_dir()
    try:
        yield temp_path
    finally:
        cleanup_test_dir(temp_path)


@pytest.fixture
def before_files() -> dict:
    """Provide the "before" variant of a small site.

    Returns
    -------
    dict
        Site path to content mapping.

    """
    return {
        "/index.html": "<h1>Home</h1>\n<p>Welcome</p>\n",
        "/about/index.html": "<h1>About</h1>\n<p>Old text</p>\n",
        "/old.html": "<p>Gone soon</p>\n",
        "/feed.xml": "<rss>\n\n</rss>\n",
    }


@pytest.fixture
def after_files() -> dict:
    """Provide the "after" variant of the same site.

    Returns
    -------
    dict
        Site path to content mapping.

    """
    return {
        "/index.html": "<h1>Home</h1>\n<p>Welcome</p>\n",
        "/about/index.html": "<h1>About</h1>\n<p>New text</p>\n",
        "/new.html": "<p>Fresh</p>\n",
        "/feed.xml": "<rss>\n</rss>\n",
    }


@pytest.fixture
def site_dirs(temp_dir: Path, before_files: dict, after_files: dict) -> tuple[Path, Path]:
    """Write the before and after sites to disk.

    Returns
    -------
    tuple of Path
        The before and after site directories.

    """
    before = write_site(temp_dir / "before", before_files)
    after = write_site(temp_dir / "after", after_files)
    return before, after
