"""Command-line interface (Typer app and interactive menu)."""
