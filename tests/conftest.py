"""
Pytest configuration and shared fixtures.

Provides isolated config directories, a project directory, and launcher
settings used across the test suite.
"""

import json
import os
from pathlib import Path

import pytest

from termlaunch.core.config import clear_cache
from termlaunch.core.launch import LauncherSettings

# ==============================================================================
# Isolation Fixtures
# ==============================================================================


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """
    Keep tests away from the real user config and TERMLAUNCH_* variables.

    Points XDG_CONFIG_HOME at a temp directory and clears the config cache
    before and after every test.
    """
    for key in list(os.environ):
        if key.startswith("TERMLAUNCH_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    clear_cache()
    yield
    clear_cache()


# ==============================================================================
# Directory Fixtures
# ==============================================================================


@pytest.fixture
def user_config_dir(tmp_path):
    """Provide the XDG_CONFIG_HOME/termlaunch directory."""
    config_dir = tmp_path / "xdg-config" / "termlaunch"
    config_dir.mkdir(parents=True)
    return config_dir


@pytest.fixture
def project_dir(tmp_path, monkeypatch):
    """
    Provide a temporary project directory and chdir into it.

    Creates:
    - notes/CLAUDE.md
    """
    project = tmp_path / "project"
    project.mkdir()
    notes = project / "notes"
    notes.mkdir()
    (notes / "CLAUDE.md").write_text("# Project notes\n")
    monkeypatch.chdir(project)
    return project


@pytest.fixture
def write_project_config(project_dir):
    """Return a helper that writes .termlaunch.json into the project."""

    def _write(data: dict) -> Path:
        path = project_dir / ".termlaunch.json"
        path.write_text(json.dumps(data, indent=2))
        return path

    return _write


# ==============================================================================
# Sample Data Fixtures
# ==============================================================================


@pytest.fixture
def echo_settings():
    """Settings whose template just echoes its substitutions."""
    return LauncherSettings(
        terminal_template="echo {DIR} {CMD}",
        invocation_command="run",
    )
