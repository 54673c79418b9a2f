"""CLI utilities."""

from __future__ import annotations

import json
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from tutum._config import TutumConfig
from tutum.client import TutumClient
from tutum.exceptions import TutumError

console = Console()
error_console = Console(stderr=True)


def get_client() -> TutumClient:
    """Get an authenticated TutumClient from environment and config file."""
    try:
        TutumConfig.load()
    except ValueError as e:
        error_console.print(f"[red]Configuration error:[/red] {e}")
        error_console.print("\nCheck the TUTUM_* environment variables and ~/.tutum/config.toml")
        raise typer.Exit(1) from None

    try:
        return TutumClient()
    except ValueError as e:
        error_console.print(f"[red]Authentication error:[/red] {e}")
        error_console.print("\nTo authenticate, run:")
        error_console.print("  tutum config set token <your-token>")
        raise typer.Exit(1) from None


def output_json(data: Any) -> None:
    """Output data as JSON."""
    if hasattr(data, "model_dump"):
        data = data.model_dump(mode="json")
    elif isinstance(data, list) and data and hasattr(data[0], "model_dump"):
        data = [item.model_dump(mode="json") for item in data]

    console.print_json(json.dumps(data, default=str))


def output_table(
    data: list[Any],
    columns: list[tuple[str, str]],
    title: str | None = None,
) -> None:
    """Output data as a Rich table.

    Args:
        data: List of objects
        columns: List of (field_name, header) tuples
        title: Optional table title
    """
    table = Table(title=title, show_header=True, header_style="bold")

    for _, header in columns:
        table.add_column(header)

    for item in data:
        row = []
        for field, _ in columns:
            if hasattr(item, field):
                value = getattr(item, field)
            elif isinstance(item, dict):
                value = item.get(field, "")
            else:
                value = ""

            if value is None:
                value = "-"
            elif isinstance(value, bool):
                value = "Yes" if value else "No"
            elif hasattr(value, "isoformat"):
                value = value.strftime("%Y-%m-%d %H:%M:%S")
            elif isinstance(value, list):
                value = ", ".join(getattr(v, "name", str(v)) for v in value) or "-"

            row.append(str(value))

        table.add_row(*row)

    console.print(table)


def output_record(data: Any, fields: list[tuple[str, str]], title: str) -> None:
    """Print selected fields of a single record, one per line."""
    console.print(f"[bold]{title}[/bold]")
    for field, label in fields:
        value = getattr(data, field, None)
        if isinstance(value, list):
            value = ", ".join(getattr(v, "name", str(v)) for v in value)
        console.print(f"  {label}: {value if value not in (None, '') else '-'}")


def handle_error(e: Exception) -> None:
    """Handle and display an error."""
    if isinstance(e, typer.Exit):
        raise e
    if isinstance(e, TutumError):
        error_console.print(f"[red]Error:[/red] {e.message}")
    else:
        error_console.print(f"[red]Error:[/red] {e}")

    raise typer.Exit(1)


def confirm_action(message: str, default: bool = False) -> bool:
    """Prompt user for confirmation."""
    return typer.confirm(message, default=default)


def get_json_flag(ctx: typer.Context) -> bool:
    """Get JSON output flag from context."""
    return ctx.obj.get("json", False) if ctx.obj else False
