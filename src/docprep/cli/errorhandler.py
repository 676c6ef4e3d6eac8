"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer

from docprep.config.exceptions import ConfigError
from docprep.exceptions import (
    DocPrepError,
    DocumentReadError,
    DocumentWriteError,
    SourceDirectoryNotFoundError,
    TargetDirectoryError,
)
from docprep.logging_setup import console


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Context manager to handle CLI errors gracefully.

    Args:
        debug: If True, re-raise so the full traceback is shown.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit):
        raise
    except SourceDirectoryNotFoundError as e:
        if debug:
            raise
        console.print(f"[bold red]📂 Source Missing:[/bold red] {e}", highlight=False)
        console.print("Check [bold]--source[/bold] or the [bold]DOCPREP_SOURCE_DIR[/bold] environment variable.")
        raise typer.Exit(1) from e
    except TargetDirectoryError as e:
        if debug:
            raise
        console.print(f"[bold red]🗑️ Target Error:[/bold red] {e}", highlight=False)
        raise typer.Exit(1) from e
    except (DocumentReadError, DocumentWriteError) as e:
        if debug:
            raise
        console.print(f"[bold red]📄 Document Error:[/bold red] {e}", highlight=False)
        raise typer.Exit(1) from e
    except ConfigError as e:
        if debug:
            raise
        console.print(f"[bold red]⚙️ Configuration Error:[/bold red] {e}", highlight=False)
        raise typer.Exit(1) from e
    except DocPrepError as e:
        if debug:
            raise
        console.print(f"[bold red]💥 Error:[/bold red] {e}", highlight=False)
        raise typer.Exit(1) from e
    except Exception as e:
        if debug:
            console.print_exception(show_locals=False)
            raise typer.Exit(1) from e

        console.print(f"[bold red]💥 An unexpected error occurred:[/bold red] {e}", highlight=False)
        console.print("[dim]Run with [bold]--debug[/bold] for more details.[/dim]")
        raise typer.Exit(1) from e
