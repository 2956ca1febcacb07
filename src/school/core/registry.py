"""Data access handler for the school registry.

StudentRegistry owns the Database handle and exposes the operations the
menu drives. Constructing it initializes the schema and reseeds the
default rows, so a registry is always ready to use.

Write operations report whether they touched a row via MutationResult.
The menu still prints an unconditional confirmation; the flag exists so
callers and tests can tell a real change from a no-op.
"""

from __future__ import annotations

import structlog

from school.db import courses_repository, students_repository
from school.db.courses_repository import CourseRecord
from school.db.database import Database, init_db
from school.db.students_repository import MutationResult, StudentRecord

logger = structlog.get_logger(__name__)


class StudentRegistry:
    """Students, courses and enrollments stored in one SQLite file.

    Args:
        database: Database handle (one connection per operation)
        reset_students: Replace all students with the defaults on startup
    """

    def __init__(self, database: Database, reset_students: bool = True) -> None:
        self.database = database
        init_db(database, reset_students=reset_students)

    def add_student(self, name: str, age: int) -> StudentRecord:
        """Insert a student and return it with its new id."""
        record = students_repository.insert_student(self.database, name, age)
        logger.info("students.added", student_id=record.student_id)
        return record

    def view_all_students(self) -> list[StudentRecord]:
        return students_repository.get_all_students(self.database)

    def get_student(self, student_id: int) -> StudentRecord | None:
        return students_repository.get_student_by_id(self.database, student_id)

    def update_student(self, student_id: int, name: str, age: int) -> MutationResult:
        """Change name and age of an existing student.

        An unknown id is a silent no-op (matched=False).
        """
        result = students_repository.update_student(self.database, student_id, name, age)
        if not result.matched:
            logger.info("students.update_no_match", student_id=student_id)
        return result

    def delete_student(self, student_id: int) -> MutationResult:
        result = students_repository.delete_student(self.database, student_id)
        if not result.matched:
            logger.info("students.delete_no_match", student_id=student_id)
        return result

    def assign_course_to_student(self, student_id: int, course_id: int) -> MutationResult:
        """Enroll a student in a course; repeating a pair is a no-op."""
        result = courses_repository.assign_course(self.database, student_id, course_id)
        if not result.matched:
            logger.info(
                "enrollments.already_assigned",
                student_id=student_id,
                course_id=course_id,
            )
        return result

    def show_student_courses(self, student_id: int) -> list[str]:
        return courses_repository.get_course_names_for_student(self.database, student_id)

    def list_courses(self) -> list[CourseRecord]:
        return courses_repository.get_all_courses(self.database)
