"""Fixtures for F1 tests - storage layer."""

import pytest

from school.db.database import Database, init_db


@pytest.fixture
def db_path(tmp_path):
    """Path of a database file inside the test's temp directory."""
    return tmp_path / "db" / "school.db"


@pytest.fixture
def database(db_path):
    """Database handle on a temp file (schema not created)."""
    return Database(db_path)


@pytest.fixture
def seeded_db(database):
    """Database with schema and default rows."""
    init_db(database)
    return database
