"""Database module for SQLite persistence.

Provides:
- Database handle (one connection per operation)
- Schema initialization and default seed data
- Repository functions for students, courses and student_courses
"""

from school.db.database import Database, init_db

__all__ = ["Database", "init_db"]
