"""Entry point for ``python -m school``."""

from school.cli.commands import app

if __name__ == "__main__":
    app()
