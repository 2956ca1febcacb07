"""Fixtures for F3 tests - interactive menu and CLI."""

from io import StringIO

import pytest
from rich.console import Console

from school.config import app_config
from school.core.registry import StudentRegistry
from school.db.database import Database


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Use built-in config defaults, never a config file from the working directory."""
    monkeypatch.setattr(app_config, "CONFIG_FILE", tmp_path / "no_config.yaml")
    monkeypatch.delenv("SCHOOL_DB_PATH", raising=False)
    app_config.clear_config_cache()
    yield
    app_config.clear_config_cache()


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "school.db"


@pytest.fixture
def registry(db_path):
    return StudentRegistry(Database(db_path))


@pytest.fixture
def console():
    """Plain-text console writing to a buffer (read it back via console.file)."""
    return Console(file=StringIO(), width=200, color_system=None, highlight=False)


@pytest.fixture
def scripted_input(monkeypatch):
    """Feed lines to input(); raises EOFError once the script runs out."""

    def _install(*lines: str) -> None:
        remaining = list(lines)

        def _fake_input(prompt: str = "") -> str:
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        monkeypatch.setattr("builtins.input", _fake_input)

    return _install
