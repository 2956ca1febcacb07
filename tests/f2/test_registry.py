"""Tests for StudentRegistry operations (F2).

Covers the observable behavior of the six menu operations plus the
catalog lookup, including the no-op paths reported via MutationResult.
"""

from school.core.registry import StudentRegistry
from school.db.courses_repository import CourseRecord
from school.db.database import Database
from school.db.students_repository import StudentRecord


DEFAULTS = [
    StudentRecord(1, "Alice Johansson", 19),
    StudentRecord(2, "Bob Karlsson", 20),
    StudentRecord(3, "Charlie Svensson", 18),
    StudentRecord(4, "Diana Lind", 22),
    StudentRecord(5, "Erik Bergström", 21),
]


class TestInitialization:
    """Tests for registry construction."""

    def test_fresh_database_has_defaults(self, registry):
        assert registry.view_all_students() == DEFAULTS

    def test_restart_restores_defaults(self, db_path):
        """Whatever happened in a previous run, a new registry starts from the defaults."""
        first = StudentRegistry(Database(db_path))
        first.add_student("Kim", 30)
        first.delete_student(1)
        first.update_student(2, "Changed", 99)

        second = StudentRegistry(Database(db_path))

        assert second.view_all_students() == DEFAULTS

    def test_restart_without_reset(self, db_path):
        first = StudentRegistry(Database(db_path))
        added = first.add_student("Kim", 30)

        second = StudentRegistry(Database(db_path), reset_students=False)

        assert second.get_student(added.student_id) == added

    def test_list_courses(self, registry):
        assert registry.list_courses() == [
            CourseRecord(1, "Matte"),
            CourseRecord(2, "Engelska"),
            CourseRecord(3, "Svenska"),
            CourseRecord(4, "Programmering"),
        ]


class TestAddStudent:
    def test_added_student_is_listed(self, registry):
        record = registry.add_student("Test", 30)

        assert record in registry.view_all_students()
        assert record.name == "Test"
        assert record.age == 30

    def test_ids_are_fresh(self, registry):
        ids = {registry.add_student(f"S{i}", 20 + i).student_id for i in range(3)}

        assert len(ids) == 3
        assert ids.isdisjoint({s.student_id for s in DEFAULTS})

    def test_any_text_accepted(self, registry):
        """No validation on name format or age range."""
        record = registry.add_student("", -5)
        assert registry.get_student(record.student_id) == StudentRecord(record.student_id, "", -5)


class TestUpdateStudent:
    def test_update_existing(self, registry):
        result = registry.update_student(3, "Charlie S", 19)

        assert result.matched is True
        assert registry.get_student(3) == StudentRecord(3, "Charlie S", 19)

    def test_update_missing_leaves_state_unchanged(self, registry):
        before = registry.view_all_students()

        result = registry.update_student(999, "X", 1)

        assert result.matched is False
        assert registry.view_all_students() == before


class TestDeleteStudent:
    def test_delete_existing(self, registry):
        result = registry.delete_student(2)

        assert result.matched is True
        assert registry.get_student(2) is None

    def test_delete_is_idempotent(self, registry):
        registry.delete_student(2)
        result = registry.delete_student(2)

        assert result.matched is False
        assert registry.get_student(2) is None
        assert len(registry.view_all_students()) == 4


class TestCourses:
    def test_assign_twice_keeps_one_row(self, registry):
        first = registry.assign_course_to_student(1, 2)
        second = registry.assign_course_to_student(1, 2)

        assert first.matched is True
        assert second.matched is False
        assert registry.show_student_courses(1) == ["Engelska"]

    def test_show_is_order_independent(self, registry):
        for course_id in (4, 1, 3):
            registry.assign_course_to_student(2, course_id)

        assert sorted(registry.show_student_courses(2)) == sorted(
            ["Programmering", "Matte", "Svenska"]
        )

    def test_show_empty(self, registry):
        assert registry.show_student_courses(3) == []

    def test_courses_belong_to_their_student(self, registry):
        registry.assign_course_to_student(1, 1)
        registry.assign_course_to_student(2, 2)

        assert registry.show_student_courses(1) == ["Matte"]
        assert registry.show_student_courses(2) == ["Engelska"]


class TestEndToEnd:
    def test_new_student_programming_course(self, registry):
        """Fresh db: add, assign course 4, list gives exactly Programmering."""
        student = registry.add_student("Test", 30)

        registry.assign_course_to_student(student.student_id, 4)

        assert registry.show_student_courses(student.student_id) == ["Programmering"]
