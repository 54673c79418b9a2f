"""Action CLI commands."""

from __future__ import annotations

import typer
from rich.console import Console

from tutum.cli._utils import (
    get_client,
    get_json_flag,
    handle_error,
    output_json,
    output_record,
    output_table,
)

app = typer.Typer(help="Action commands.")
console = Console()


@app.command("list")
def list_actions(
    ctx: typer.Context,
    page: int | None = typer.Option(None, "--page", "-p", help="Page number"),
) -> None:
    """List actions in chronological order."""
    try:
        with get_client() as client:
            actions = client.actions.list(page=page)

        if get_json_flag(ctx):
            output_json(actions)
        else:
            if not actions.objects:
                console.print("[dim]No actions found.[/dim]")
                return

            output_table(
                actions.objects,
                columns=[
                    ("uuid", "UUID"),
                    ("action", "Action"),
                    ("state", "State"),
                    ("start_date", "Started"),
                    ("end_date", "Ended"),
                ],
                title="Actions",
            )

    except Exception as e:
        handle_error(e)


@app.command("inspect")
def inspect(
    ctx: typer.Context,
    uuid: str = typer.Argument(..., help="Action UUID"),
) -> None:
    """Show action details."""
    try:
        with get_client() as client:
            action = client.actions.get(uuid)

        if get_json_flag(ctx):
            output_json(action)
        else:
            output_record(
                action,
                [
                    ("uuid", "UUID"),
                    ("action", "Action"),
                    ("method", "Method"),
                    ("path", "Path"),
                    ("state", "State"),
                    ("user", "User"),
                    ("ip", "IP"),
                    ("start_date", "Started"),
                    ("end_date", "Ended"),
                ],
                title=f"Action: {action.action or action.uuid}",
            )
            if action.logs:
                console.print("\n[bold]Logs:[/bold]")
                console.print(action.logs)

    except Exception as e:
        handle_error(e)
