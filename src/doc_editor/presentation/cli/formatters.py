"""Rich formatting utilities for the CLI.

Holds all Rich rendering (panels, syntax) in a module that knows nothing
about domain logic.
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

console = Console()


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "Document Editor") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]Error:[/] {message}")


def warning_message(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]Warning:[/] {message}")


# ---------------------------------------------------------------------------
# Document / config rendering
# ---------------------------------------------------------------------------


def document_text(rendered: str) -> None:
    """Write rendered document text unchanged (Rich would expand tabs)."""
    typer.echo(rendered)


def json_panel(raw_json: str, title: str = "Active configuration") -> None:
    """Render JSON inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )
