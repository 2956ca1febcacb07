"""Interactive text menu over a StudentRegistry.

The loop renders the menu, reads one line and maps it to a MenuCommand by
exact match. Each command except EXIT has an entry in _HANDLERS.
Integer prompts that fail to parse print a message and return to the menu.
End of input ends the loop the same way as "0".
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

import structlog
from rich.console import Console
from rich.text import Text

from school.core.registry import StudentRegistry

logger = structlog.get_logger(__name__)


class MenuCommand(Enum):
    """Menu entries, valued by the text the user types."""

    ADD = "1"
    VIEW = "2"
    UPDATE = "3"
    DELETE = "4"
    ASSIGN = "5"
    SHOW = "6"
    EXIT = "0"


MENU_LABELS = {
    MenuCommand.ADD: "Add a student",
    MenuCommand.VIEW: "View all students",
    MenuCommand.UPDATE: "Update a student",
    MenuCommand.DELETE: "Delete a student",
    MenuCommand.ASSIGN: "Assign a course to a student",
    MenuCommand.SHOW: "View student courses",
    MenuCommand.EXIT: "Exit",
}


def parse_choice(raw: str) -> MenuCommand | None:
    """Map an input line to a MenuCommand; None if it matches nothing.

    No trimming or case folding: " 1" and "1 " are invalid.
    """
    try:
        return MenuCommand(raw)
    except ValueError:
        return None


# SQLite INTEGER is a signed 64-bit value
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1


def _parse_int(raw: str) -> int | None:
    """Parse an id or age; None if not an integer or outside SQLite range."""
    try:
        value = int(raw)
    except ValueError:
        return None
    if not SQLITE_INT_MIN <= value <= SQLITE_INT_MAX:
        return None
    return value


def show_menu(console: Console) -> None:
    console.print("\n--- Menu ---")
    for command in MenuCommand:
        console.print(f"{command.value}. {MENU_LABELS[command]}")


def _invalid(console: Console, message: str) -> None:
    console.print(f"[yellow]{message}[/yellow]")


# =============================================================================
# Command handlers
# =============================================================================


def _add_student(registry: StudentRegistry, console: Console) -> None:
    name = console.input("Enter name: ")
    age = _parse_int(console.input("Enter age: "))
    if age is None:
        _invalid(console, "Invalid age. Try again.")
        return

    registry.add_student(name, age)
    console.print(Text(f"Student '{name}' added.\n"), soft_wrap=True)


def _view_all_students(registry: StudentRegistry, console: Console) -> None:
    console.print("All students:")
    for student in registry.view_all_students():
        console.print(
            Text(f"ID: {student.student_id}, Name: {student.name}, Age: {student.age}"),
            soft_wrap=True,
        )
    console.print()


def _update_student(registry: StudentRegistry, console: Console) -> None:
    student_id = _parse_int(console.input("Enter student ID to update: "))
    if student_id is None:
        _invalid(console, "Invalid ID. Try again.")
        return

    name = console.input("Enter new name: ")
    age = _parse_int(console.input("Enter new age: "))
    if age is None:
        _invalid(console, "Invalid age. Try again.")
        return

    registry.update_student(student_id, name, age)
    console.print(f"Student ID {student_id} updated.\n")


def _delete_student(registry: StudentRegistry, console: Console) -> None:
    student_id = _parse_int(console.input("Enter student ID to delete: "))
    if student_id is None:
        _invalid(console, "Invalid ID. Try again.")
        return

    registry.delete_student(student_id)
    console.print(f"Student ID {student_id} deleted.\n")


def _course_prompt(registry: StudentRegistry) -> Text:
    catalog = ", ".join(
        f"{course.course_id}: {course.name}" for course in registry.list_courses()
    )
    return Text(f"Enter course ID ({catalog}): ")


def _assign_course(registry: StudentRegistry, console: Console) -> None:
    student_id = _parse_int(console.input("Enter student ID: "))
    if student_id is None:
        _invalid(console, "Invalid student ID. Try again.")
        return

    course_id = _parse_int(console.input(_course_prompt(registry)))
    if course_id is None:
        _invalid(console, "Invalid course ID. Try again.")
        return

    registry.assign_course_to_student(student_id, course_id)
    console.print(f"Assigned course ID {course_id} to student ID {student_id}.\n")


def _show_student_courses(registry: StudentRegistry, console: Console) -> None:
    student_id = _parse_int(console.input("Enter student ID: "))
    if student_id is None:
        _invalid(console, "Invalid student ID. Try again.")
        return

    console.print(f"Courses for student ID {student_id}:")
    for name in registry.show_student_courses(student_id):
        console.print(Text(f"- {name}"), soft_wrap=True)
    console.print()


_HANDLERS: dict[MenuCommand, Callable[[StudentRegistry, Console], None]] = {
    MenuCommand.ADD: _add_student,
    MenuCommand.VIEW: _view_all_students,
    MenuCommand.UPDATE: _update_student,
    MenuCommand.DELETE: _delete_student,
    MenuCommand.ASSIGN: _assign_course,
    MenuCommand.SHOW: _show_student_courses,
}


def run_menu(registry: StudentRegistry, console: Console) -> None:
    """Run the menu loop until the user picks Exit or input ends.

    Storage errors are not caught here; they end the loop.
    """
    while True:
        show_menu(console)
        try:
            command = parse_choice(console.input("Select an option: "))
            if command is MenuCommand.EXIT:
                break
            if command is None:
                _invalid(console, "Invalid choice. Try again.")
                continue

            logger.debug("menu.dispatch", command=command.name)
            _HANDLERS[command](registry, console)
        except EOFError:
            console.print()
            logger.debug("menu.end_of_input")
            break
