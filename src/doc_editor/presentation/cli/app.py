"""Thin CLI wrapper — Typer commands that delegate to the editor.

All wiring is accessed through the Container (bootstrap.py).
No direct imports from infrastructure/ here.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Optional

import typer
from rich.markup import escape

from doc_editor.config.models import StorageBackendChoice
from doc_editor.presentation.cli.formatters import (
    console,
    document_text,
    error_message,
    json_panel,
    success_panel,
    warning_message,
)

if TYPE_CHECKING:
    from doc_editor.bootstrap import Container
    from doc_editor.domain.models.document import Document
    from doc_editor.domain.models.results import SaveResult

app = typer.Typer(
    name="doc-editor",
    help="Compose documents from text, images, line breaks and tabs, then save them.",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for config commands
config_app = typer.Typer(
    name="config",
    help="Inspect or create the editor configuration.",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")
    ] = False,
) -> None:
    """Document editor command line."""
    ctx.obj = {"verbose": verbose}


def _configure_logging(ctx: typer.Context, level: str) -> None:
    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level),
        format=_LOG_FORMAT,
    )


def _container(
    ctx: typer.Context,
    config: Optional[str],
    backend: Optional[str] = None,
    output: Optional[str] = None,
) -> Container:
    from pydantic import ValidationError

    from doc_editor.bootstrap import Container
    from doc_editor.domain.errors import ConfigurationError

    try:
        container = Container(config_path=config, storage_backend=backend, output_path=output)
    except (FileNotFoundError, ValidationError, ConfigurationError) as exc:
        error_message(escape(str(exc)))
        raise typer.Exit(code=1)

    _configure_logging(ctx, container.config.logging.level)
    return container


def _load_document(source: str) -> Document:
    from doc_editor.domain.errors import DocumentFormatError
    from doc_editor.domain.models.document import Document

    source_path = Path(source)
    if not source_path.exists():
        error_message(f"File not found: {escape(source)}")
        raise typer.Exit(code=1)

    try:
        return Document.from_json(source_path.read_text(encoding="utf-8"))
    except DocumentFormatError as exc:
        error_message(escape(str(exc)))
        raise typer.Exit(code=1)


def _report_save(result: SaveResult) -> None:
    if result.saved:
        success_panel(f"Document saved to [bold green]{escape(result.destination)}[/]")
    elif result.error is None:
        warning_message(f"Nothing persisted to {escape(result.destination)}")
    else:
        error_message(f"Unable to save to {escape(result.destination)}: {escape(result.error)}")
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# doc-editor demo
# ---------------------------------------------------------------------------


@app.command()
def demo(
    ctx: typer.Context,
    output: Annotated[
        Optional[str], typer.Option("--output", "-o", help="Destination file (file backend)")
    ] = None,
    config: Annotated[
        Optional[str],
        typer.Option("--config", "-c", help="Path to a JSON configuration file"),
    ] = None,
) -> None:
    """Build the sample document, print it and save it."""
    from doc_editor.application.demo import PopulateDemoUseCase

    container = _container(ctx, config, output=output)
    editor = container.new_editor()
    PopulateDemoUseCase().execute(editor)

    document_text(editor.render_document())
    _report_save(editor.save_document())


# ---------------------------------------------------------------------------
# doc-editor render
# ---------------------------------------------------------------------------


@app.command()
def render(
    ctx: typer.Context,
    source: Annotated[str, typer.Argument(help="JSON document description")],
) -> None:
    """Print the rendering of a JSON document description."""
    _configure_logging(ctx, "WARNING")
    document = _load_document(source)
    document_text(document.render())


# ---------------------------------------------------------------------------
# doc-editor save
# ---------------------------------------------------------------------------


@app.command()
def save(
    ctx: typer.Context,
    source: Annotated[str, typer.Argument(help="JSON document description")],
    output: Annotated[
        Optional[str], typer.Option("--output", "-o", help="Destination file (file backend)")
    ] = None,
    backend: Annotated[
        Optional[StorageBackendChoice],
        typer.Option("--backend", "-b", help="Storage backend"),
    ] = None,
    config: Annotated[
        Optional[str],
        typer.Option("--config", "-c", help="Path to a JSON configuration file"),
    ] = None,
) -> None:
    """Render a JSON document description and save it through the storage backend."""
    container = _container(ctx, config, backend.value if backend else None, output)
    editor = container.new_editor(_load_document(source))
    _report_save(editor.save_document())


# ---------------------------------------------------------------------------
# doc-editor config show / init
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(
    ctx: typer.Context,
    config: Annotated[
        Optional[str],
        typer.Option("--config", "-c", help="Path to a JSON configuration file"),
    ] = None,
) -> None:
    """Show the active configuration."""
    container = _container(ctx, config)
    json_panel(container.config.model_dump_json(indent=2))


@config_app.command("init")
def config_init(
    output: Annotated[
        str, typer.Option("--output", "-o", help="Destination file name")
    ] = "doc_editor.json",
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Overwrite an existing file")
    ] = False,
) -> None:
    """Copy the default configuration to the current directory for customisation."""
    from doc_editor.config.loader import default_config_path

    dest = Path(output)
    if dest.exists() and not force:
        console.print(f"[bold yellow]File already exists:[/] {escape(str(dest))}")
        overwrite = typer.confirm("Overwrite it?")
        if not overwrite:
            raise typer.Abort()

    shutil.copy2(default_config_path(), dest)
    success_panel(
        f"Configuration copied to: [bold green]{escape(str(dest))}[/]\n\n"
        "Edit it and pass it with [bold]--config[/]:\n"
        f'  doc-editor demo --config "{escape(str(dest))}"',
        title="Config Init",
    )


if __name__ == "__main__":
    app()
