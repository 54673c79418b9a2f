"""Provider, region and node type CLI commands."""

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

provider_app = typer.Typer(help="Cloud provider commands.")
region_app = typer.Typer(help="Region commands.")
nodetype_app = typer.Typer(help="Node type commands.")
console = Console()

CATALOG_COLUMNS = [
    ("name", "Name"),
    ("label", "Label"),
    ("available", "Available"),
]


def _list(ctx: typer.Context, resource: str, page: int | None, title: str) -> None:
    try:
        with get_client() as client:
            result = getattr(client, resource).list(page=page)

        if get_json_flag(ctx):
            output_json(result)
        elif not result.objects:
            console.print(f"[dim]No {title.lower()} found.[/dim]")
        else:
            output_table(result.objects, columns=CATALOG_COLUMNS, title=title)

    except Exception as e:
        handle_error(e)


def _inspect(ctx: typer.Context, resource: str, *key: str) -> None:
    try:
        with get_client() as client:
            record = getattr(client, resource).get(*key)

        if get_json_flag(ctx):
            output_json(record)
        else:
            output_record(
                record,
                [*CATALOG_COLUMNS, ("resource_uri", "URI")],
                title=record.label or record.name,
            )

    except Exception as e:
        handle_error(e)


@provider_app.command("list")
def list_providers(
    ctx: typer.Context,
    page: int | None = typer.Option(None, "--page", "-p", help="Page number"),
) -> None:
    """List supported cloud providers."""
    _list(ctx, "providers", page, "Providers")


@provider_app.command("inspect")
def inspect_provider(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Provider name"),
) -> None:
    """Show provider details."""
    _inspect(ctx, "providers", name)


@region_app.command("list")
def list_regions(
    ctx: typer.Context,
    page: int | None = typer.Option(None, "--page", "-p", help="Page number"),
) -> None:
    """List regions of all providers."""
    _list(ctx, "regions", page, "Regions")


@region_app.command("inspect")
def inspect_region(
    ctx: typer.Context,
    provider: str = typer.Argument(..., help="Provider name"),
    name: str = typer.Argument(..., help="Region name"),
) -> None:
    """Show region details."""
    _inspect(ctx, "regions", provider, name)


@nodetype_app.command("list")
def list_node_types(
    ctx: typer.Context,
    page: int | None = typer.Option(None, "--page", "-p", help="Page number"),
) -> None:
    """List node types of all providers."""
    _list(ctx, "node_types", page, "Node types")


@nodetype_app.command("inspect")
def inspect_node_type(
    ctx: typer.Context,
    provider: str = typer.Argument(..., help="Provider name"),
    name: str = typer.Argument(..., help="Node type name"),
) -> None:
    """Show node type details."""
    _inspect(ctx, "node_types", provider, name)
