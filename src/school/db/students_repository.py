"""Repository functions for the students table.

Provides CRUD operations for the students table. Every statement binds
user-supplied values through named placeholders.
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

import structlog

from school.db.database import Database

logger = structlog.get_logger(__name__)


@dataclass
class StudentRecord:
    """Student record from database."""

    student_id: int
    name: str
    age: int


@dataclass
class MutationResult:
    """Outcome of a write that may match no row."""

    matched: bool


def insert_student(database: Database, name: str, age: int) -> StudentRecord:
    """Insert a new student.

    Args:
        database: Database handle
        name: Student name (any text)
        age: Student age

    Returns:
        StudentRecord carrying the id assigned by the engine
    """
    with database.connect() as conn:
        cursor = conn.execute(
            "INSERT INTO students (name, age) VALUES (:name, :age)",
            {"name": name, "age": age},
        )
        student_id = cursor.lastrowid

    logger.debug("students.inserted", student_id=student_id)
    return StudentRecord(student_id=student_id, name=name, age=age)


def get_all_students(database: Database) -> list[StudentRecord]:
    """Get all students.

    Returns:
        List of StudentRecord instances ordered by id
    """
    with database.connect() as conn:
        rows = conn.execute("SELECT id, name, age FROM students ORDER BY id").fetchall()

    return [_row_to_record(row) for row in rows]


def get_student_by_id(database: Database, student_id: int) -> StudentRecord | None:
    """Get student by ID.

    Returns:
        StudentRecord if found, None otherwise
    """
    with database.connect() as conn:
        row = conn.execute(
            "SELECT id, name, age FROM students WHERE id = :id", {"id": student_id}
        ).fetchone()

    if row is None:
        return None

    return _row_to_record(row)


def update_student(
    database: Database, student_id: int, name: str, age: int
) -> MutationResult:
    """Update name and age of a student.

    Returns:
        MutationResult with matched=False if no student has that id
    """
    with database.connect() as conn:
        cursor = conn.execute(
            "UPDATE students SET name = :name, age = :age WHERE id = :id",
            {"id": student_id, "name": name, "age": age},
        )

    matched = cursor.rowcount > 0
    if matched:
        logger.debug("students.updated", student_id=student_id)

    return MutationResult(matched=matched)


def delete_student(database: Database, student_id: int) -> MutationResult:
    """Delete student by ID.

    Enrollment rows for the student are left in place.

    Returns:
        MutationResult with matched=False if not found
    """
    with database.connect() as conn:
        cursor = conn.execute(
            "DELETE FROM students WHERE id = :id", {"id": student_id}
        )

    matched = cursor.rowcount > 0
    if matched:
        logger.debug("students.deleted", student_id=student_id)

    return MutationResult(matched=matched)


def _row_to_record(row: sqlite3.Row) -> StudentRecord:
    """Convert database row to StudentRecord."""
    return StudentRecord(
        student_id=row["id"],
        name=row["name"],
        age=row["age"],
    )
