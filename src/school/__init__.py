"""School registry: students, courses and enrollments in a local SQLite file."""

__version__ = "0.1.0"
