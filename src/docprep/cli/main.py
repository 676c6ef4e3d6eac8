"""Main Typer application for docprep."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from docprep.cli.errorhandler import handle_cli_errors
from docprep.config import load_settings
from docprep.logging_setup import configure_logging, console
from docprep.preparer import DocPreparer

app = typer.Typer(
    name="docprep",
    help="Prepare architecture markdown for a Docusaurus docs folder",
    add_completion=False,
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)

SourceOption = Annotated[
    Path | None,
    typer.Option("--source", "-s", help="Directory with the source markdown files"),
]
TargetOption = Annotated[
    Path | None,
    typer.Option("--target", "-t", help="Docs directory to (re)create"),
]
DebugOption = Annotated[bool, typer.Option("--debug", help="Show full tracebacks on errors")]


@app.callback()
def main() -> None:
    """Configure logging before any command runs."""
    configure_logging()


@app.command()
def prepare(
    source: SourceOption = None,
    target: TargetOption = None,
    *,
    debug: DebugOption = False,
) -> None:
    """Copy docs into the target folder with frontmatter and MDX escaping."""
    with handle_cli_errors(debug=debug):
        settings = load_settings(source_dir=source, target_dir=target)
        if settings.short_commit:
            logger.info("Commit: %s", settings.short_commit)

        result = DocPreparer(settings.source_dir, settings.target_dir).run()

    console.print(
        f"[green]Prepared {len(result.documents)} document(s)[/green]"
        f" ({len(result.copied_verbatim)} copied unchanged) into {result.target_dir}",
        highlight=False,
    )


@app.command(name="list")
def list_docs(
    source: SourceOption = None,
    *,
    debug: DebugOption = False,
) -> None:
    """Show the id, title and sidebar position each doc would get."""
    with handle_cli_errors(debug=debug):
        settings = load_settings(source_dir=source)
        documents = DocPreparer(settings.source_dir, settings.target_dir).plan()

    table = Table(title=f"📚 Docs in {settings.source_dir}")
    table.add_column("Position", style="cyan", justify="right")
    table.add_column("File", style="green")
    table.add_column("Id", style="magenta")
    table.add_column("Title")

    for document in sorted(documents, key=lambda doc: (doc.position, doc.filename)):
        table.add_row(str(document.position), document.filename, document.id, document.title)

    console.print(table)


@app.command()
def config(*, debug: DebugOption = False) -> None:
    """Print the resolved settings."""
    with handle_cli_errors(debug=debug):
        settings = load_settings()

    table = Table(title="⚙️ docprep settings", show_header=False)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    table.add_row("source_dir", str(settings.source_dir))
    table.add_row("target_dir", str(settings.target_dir))
    table.add_row("commit", settings.short_commit or "-")
    console.print(table)
