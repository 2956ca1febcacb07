"""CLI commands for the school registry.

Commands:
- (none) / menu: Interactive student and course menu
- courses: Print the course catalog

Global options select the database file, skip the startup reseed of the
default students and set the log level.
"""

import os
import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

import structlog
import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from school.cli.menu import run_menu
from school.config.app_config import ConfigError, load_app_config
from school.core.registry import StudentRegistry
from school.db.database import Database
from school.logging_config import configure_logging

logger = structlog.get_logger(__name__)

app = typer.Typer(
    name="school",
    help="Manage students, courses and enrollments in a local SQLite file.",
    add_completion=False,
)

console = Console()


@dataclass
class CliOptions:
    """Global options shared by every command."""

    db: Path | None = None
    keep_students: bool = False
    log_level: str | None = None


def _open_registry(options: CliOptions) -> StudentRegistry:
    """Configure logging, load config and open the registry.

    Logging starts at the default level so the config loader never writes
    through an unconfigured logger, then switches to the configured level.

    Precedence for the database path: --db, then SCHOOL_DB_PATH, then config.
    """
    configure_logging()
    config = load_app_config()
    configure_logging(options.log_level or config.logging.level)

    db_path = options.db or Path(
        os.environ.get("SCHOOL_DB_PATH", config.database.path)
    )
    database = Database(db_path, foreign_keys=config.database.foreign_keys)
    reset_students = config.database.reset_students_on_start and not options.keep_students

    registry = StudentRegistry(database, reset_students=reset_students)
    console.print(
        Text.assemble(("Database:", "dim"), f" {database.path}"), soft_wrap=True
    )
    return registry


def _run_or_exit(
    options: CliOptions, action: Callable[[StudentRegistry], None]
) -> None:
    """Run action(registry), turning config and storage errors into exit code 1."""
    try:
        registry = _open_registry(options)
        action(registry)
    except ConfigError as e:
        console.print(Text(f"✗ {e}", style="red"))
        raise typer.Exit(code=1)
    except sqlite3.Error as e:
        logger.error("menu.storage_error", error=str(e))
        console.print(Text(f"✗ Database error: {e}", style="red"))
        raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    db: Path | None = typer.Option(
        None, "--db", help="Database file (overrides SCHOOL_DB_PATH and config)"
    ),
    keep_students: bool = typer.Option(
        False, "--keep-students", help="Keep existing students instead of reseeding"
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", "-l", help="DEBUG, INFO, WARNING, ERROR"
    ),
) -> None:
    """Manage students, courses and enrollments in a local SQLite file."""
    ctx.obj = CliOptions(db=db, keep_students=keep_students, log_level=log_level)

    if ctx.invoked_subcommand is None:
        _run_or_exit(ctx.obj, lambda registry: run_menu(registry, console))


@app.command()
def menu(ctx: typer.Context) -> None:
    """Start the interactive menu."""
    _run_or_exit(ctx.obj, lambda registry: run_menu(registry, console))


@app.command()
def courses(ctx: typer.Context) -> None:
    """List the course catalog."""

    def _print_catalog(registry: StudentRegistry) -> None:
        table = Table(show_header=True, header_style="bold")
        table.add_column("ID", style="cyan", justify="right")
        table.add_column("Course")
        for course in registry.list_courses():
            table.add_row(str(course.course_id), course.name)
        console.print(table)

    _run_or_exit(ctx.obj, _print_catalog)


if __name__ == "__main__":
    app()
