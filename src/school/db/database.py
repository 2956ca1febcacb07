"""SQLite database connection and schema management.

Provides the database handle, schema initialization and the default
reference data loaded on every start.
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

import structlog

logger = structlog.get_logger(__name__)

# Default database location (working directory)
DEFAULT_DB_PATH = Path("school.db")

DEFAULT_COURSES: list[tuple[int, str]] = [
    (1, "Matte"),
    (2, "Engelska"),
    (3, "Svenska"),
    (4, "Programmering"),
]

DEFAULT_STUDENTS: list[tuple[str, int]] = [
    ("Alice Johansson", 19),
    ("Bob Karlsson", 20),
    ("Charlie Svensson", 18),
    ("Diana Lind", 22),
    ("Erik Bergström", 21),
]


class Database:
    """Handle to a single SQLite database file.

    Holds only the location and connection settings. A fresh connection is
    opened for every ``connect()`` block and closed when the block exits.

    Args:
        path: Path to database file. Defaults to ./school.db
        foreign_keys: Enable SQLite foreign key enforcement on each connection
    """

    def __init__(self, path: Path | None = None, foreign_keys: bool = False) -> None:
        self.path = Path(path) if path is not None else DEFAULT_DB_PATH
        self.foreign_keys = foreign_keys

    def __repr__(self) -> str:
        return f"Database(path={str(self.path)!r}, foreign_keys={self.foreign_keys})"

    @contextmanager
    def connect(self) -> Generator[sqlite3.Connection, None, None]:
        """Get database connection as context manager.

        Commits when the block exits cleanly, rolls back and re-raises
        otherwise.

        Yields:
            SQLite connection with row factory set to sqlite3.Row

        Example:
            with database.connect() as conn:
                rows = conn.execute("SELECT * FROM students").fetchall()
        """
        # Ensure directory exists
        self.path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        if self.foreign_keys:
            conn.execute("PRAGMA foreign_keys = ON")

        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()


def init_db(database: Database, reset_students: bool = True) -> None:
    """Initialize database with schema and default rows.

    Creates the tables if they don't exist, inserts the fixed course
    catalog (existing rows are left as they are) and, unless
    ``reset_students`` is False, replaces every student with the defaults.

    Args:
        database: Database handle to initialize
        reset_students: Wipe students and restart their id sequence at 1

    Raises:
        sqlite3.Error: If the engine rejects any statement
    """
    with database.connect() as conn:
        _create_schema(conn)
        _add_default_courses(conn)
        if reset_students:
            _reset_default_students(conn)

    logger.info(
        "database.initialized",
        path=str(database.path),
        reset_students=reset_students,
    )


def _create_schema(conn: sqlite3.Connection) -> None:
    """Create database schema.

    Uses IF NOT EXISTS for idempotency.
    """
    conn.executescript(
        """
        CREATE TABLE IF NOT EXISTS students (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT,
            age INT
        );

        CREATE TABLE IF NOT EXISTS courses (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT
        );

        -- One row per (student, course) pair
        CREATE TABLE IF NOT EXISTS student_courses (
            student_id INT,
            course_id INT,
            PRIMARY KEY (student_id, course_id),
            FOREIGN KEY (student_id) REFERENCES students(id),
            FOREIGN KEY (course_id) REFERENCES courses(id)
        );
        """
    )
    logger.debug("database.schema_ensured")


def _add_default_courses(conn: sqlite3.Connection) -> None:
    conn.executemany(
        "INSERT OR IGNORE INTO courses (id, name) VALUES (:id, :name)",
        [{"id": course_id, "name": name} for course_id, name in DEFAULT_COURSES],
    )
    logger.debug("database.default_courses_added", count=len(DEFAULT_COURSES))


def _reset_default_students(conn: sqlite3.Connection) -> None:
    """Replace all students with the default set, ids starting at 1."""
    conn.execute("DELETE FROM students")
    # sqlite_sequence exists once any AUTOINCREMENT table has been created
    conn.execute("DELETE FROM sqlite_sequence WHERE name = :table", {"table": "students"})
    conn.executemany(
        "INSERT INTO students (name, age) VALUES (:name, :age)",
        [{"name": name, "age": age} for name, age in DEFAULT_STUDENTS],
    )
    logger.debug("database.default_students_added", count=len(DEFAULT_STUDENTS))
