"""Node CLI commands."""

from __future__ import annotations

import typer
from rich.console import Console

from tutum.cli._utils import (
    confirm_action,
    get_client,
    get_json_flag,
    handle_error,
    output_json,
    output_record,
    output_table,
)

app = typer.Typer(help="Node management commands.")
console = Console()

NODE_FIELDS = [
    ("uuid", "UUID"),
    ("external_fqdn", "FQDN"),
    ("state", "State"),
    ("public_ip", "Public IP"),
    ("node_cluster", "Node cluster"),
    ("docker_version", "Docker"),
    ("current_num_containers", "Containers"),
    ("tags", "Tags"),
    ("last_seen", "Last seen"),
]


def _print_node(ctx: typer.Context, node, verb: str) -> None:
    if get_json_flag(ctx):
        output_json(node)
    else:
        console.print(f"[green]{verb}:[/green] {node.uuid} ({node.state})")


@app.command("list")
def list_nodes(
    ctx: typer.Context,
    page: int | None = typer.Option(None, "--page", "-p", help="Page number"),
) -> None:
    """List current and recently terminated nodes."""
    try:
        with get_client() as client:
            nodes = client.nodes.list(page=page)

        if get_json_flag(ctx):
            output_json(nodes)
        else:
            if not nodes.objects:
                console.print("[dim]No nodes found.[/dim]")
                return

            output_table(
                nodes.objects,
                columns=[
                    ("uuid", "UUID"),
                    ("external_fqdn", "FQDN"),
                    ("state", "State"),
                    ("current_num_containers", "Containers"),
                    ("tags", "Tags"),
                ],
                title="Nodes",
            )

    except Exception as e:
        handle_error(e)


@app.command("inspect")
def inspect(
    ctx: typer.Context,
    uuid: str = typer.Argument(..., help="Node UUID"),
) -> None:
    """Show node details."""
    try:
        with get_client() as client:
            node = client.nodes.get(uuid)

        if get_json_flag(ctx):
            output_json(node)
        else:
            output_record(node, NODE_FIELDS, title=f"Node: {node.external_fqdn or node.uuid}")

    except Exception as e:
        handle_error(e)


@app.command("deploy")
def deploy(
    ctx: typer.Context,
    uuid: str = typer.Argument(..., help="Node UUID"),
) -> None:
    """Deploy a recently created node."""
    try:
        with get_client() as client:
            node = client.nodes.deploy(uuid)
        _print_node(ctx, node, "Deploying node")
    except Exception as e:
        handle_error(e)


@app.command("tag")
def tag(
    ctx: typer.Context,
    uuid: str = typer.Argument(..., help="Node UUID"),
    tags: list[str] = typer.Option([], "--tag", "-t", help="Tag (repeatable); replaces existing tags"),
) -> None:
    """Replace the tags of a node. Without --tag, all tags are removed."""
    try:
        with get_client() as client:
            node = client.nodes.update(uuid, tags=tags)
        _print_node(ctx, node, "Tagged node")
    except Exception as e:
        handle_error(e)


@app.command("upgrade")
def upgrade(
    ctx: typer.Context,
    uuid: str = typer.Argument(..., help="Node UUID"),
) -> None:
    """Upgrade the Docker daemon of a node. Its containers are restarted."""
    try:
        with get_client() as client:
            node = client.nodes.upgrade_docker(uuid)
        _print_node(ctx, node, "Upgrading node")
    except Exception as e:
        handle_error(e)


@app.command("terminate")
def terminate(
    ctx: typer.Context,
    uuid: str = typer.Argument(..., help="Node UUID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Terminate a node. Fails while containers are running on it."""
    try:
        if not yes and not confirm_action(f"Terminate node {uuid}?"):
            console.print("[dim]Aborted.[/dim]")
            raise typer.Exit(0)

        with get_client() as client:
            node = client.nodes.terminate(uuid)
        _print_node(ctx, node, "Terminating node")
    except Exception as e:
        handle_error(e)
