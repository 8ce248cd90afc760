"""Fixtures for command line tests."""

import logging

import pytest

from sitediff.constants import CONFIG_ENV_VAR


@pytest.fixture(autouse=True)
def isolated_cli_env(tmp_path, monkeypatch):
    """Keep config discovery and logging changes inside the test.

    The working directory and home directory point at an empty temporary
    directory so no real configuration file is discovered.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.chdir(tmp_path)

    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield tmp_path
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
