"""Main entry point for the Typer-based CLI for docprep."""

from docprep.cli.main import app


def main() -> None:
    """Entry point for the CLI."""
    app()


__all__ = ["app", "main"]
