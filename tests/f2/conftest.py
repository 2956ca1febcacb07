"""Fixtures for F2 tests - registry and configuration."""

import pytest

from school.config.app_config import clear_config_cache
from school.core.registry import StudentRegistry
from school.db.database import Database


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "school.db"


@pytest.fixture
def registry(db_path):
    """Registry on a fresh temp database (schema created, defaults seeded)."""
    return StudentRegistry(Database(db_path))


@pytest.fixture(autouse=True)
def fresh_config_cache():
    """Each test loads configuration from scratch."""
    clear_config_cache()
    yield
    clear_config_cache()
