"""Repository functions for courses and the student_courses association."""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from school.db.database import Database
from school.db.students_repository import MutationResult

logger = structlog.get_logger(__name__)


@dataclass
class CourseRecord:
    """Course record from database."""

    course_id: int
    name: str


def get_all_courses(database: Database) -> list[CourseRecord]:
    """Get the course catalog ordered by id."""
    with database.connect() as conn:
        rows = conn.execute("SELECT id, name FROM courses ORDER BY id").fetchall()

    return [CourseRecord(course_id=row["id"], name=row["name"]) for row in rows]


def assign_course(database: Database, student_id: int, course_id: int) -> MutationResult:
    """Link a student to a course.

    Uses INSERT OR IGNORE, so assigning the same pair twice keeps a single
    association row.

    Args:
        database: Database handle
        student_id: Student id (not checked against students)
        course_id: Course id (not checked against courses)

    Returns:
        MutationResult with matched=False if the pair already existed

    Raises:
        sqlite3.IntegrityError: If foreign keys are enforced and an id is unknown
    """
    with database.connect() as conn:
        cursor = conn.execute(
            """
            INSERT OR IGNORE INTO student_courses (student_id, course_id)
            VALUES (:student_id, :course_id)
            """,
            {"student_id": student_id, "course_id": course_id},
        )

    inserted = cursor.rowcount > 0
    if inserted:
        logger.debug(
            "enrollments.inserted", student_id=student_id, course_id=course_id
        )

    return MutationResult(matched=inserted)


def get_course_names_for_student(database: Database, student_id: int) -> list[str]:
    """Get the names of all courses a student is enrolled in.

    Returns:
        Course names ordered by course id; empty if the student has none
    """
    with database.connect() as conn:
        rows = conn.execute(
            """
            SELECT c.name FROM courses c
            INNER JOIN student_courses sc ON c.id = sc.course_id
            WHERE sc.student_id = :student_id
            ORDER BY c.id
            """,
            {"student_id": student_id},
        ).fetchall()

    return [row["name"] for row in rows]
