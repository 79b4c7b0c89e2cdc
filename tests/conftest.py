"""
Shared pytest fixtures for the Quill test suite.

Every test runs with an isolated user config location and without
QUILL_* environment overrides, so a developer's ~/.quill/config.yaml
never leaks into results.

Usage in tests:
    def test_something(project_dir):
        manager = ConfigManager(project_dir)
        ...

    def test_folding(small_table):
        highlight_keyword("Søren", "soren", table=small_table)
"""

import pytest

from quill.config import ConfigManager
from quill.core.accents import AccentTable, reset_accent_table


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the user config at a temp dir and clear env overrides."""
    user_file = tmp_path / "home" / ".quill" / "config.yaml"
    monkeypatch.setattr(ConfigManager, "USER_CONFIG_DIR", user_file.parent)
    monkeypatch.setattr(ConfigManager, "USER_CONFIG_FILE", user_file)
    for env_key in ConfigManager.ENV_OVERRIDES:
        monkeypatch.delenv(env_key, raising=False)
    monkeypatch.delenv("QUILL_PROJECT_PATH", raising=False)
    return user_file


@pytest.fixture
def project_dir(tmp_path):
    """Empty project directory."""
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def fresh_accent_table():
    """Reset the shared accent table before and after the test."""
    reset_accent_table()
    yield
    reset_accent_table()


@pytest.fixture
def small_table():
    """A tiny explicit table, independent of the bundled data."""
    return AccentTable({"ø": "o", "é": "e", "ß": "ss"})
