"""Node cluster CLI commands."""

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

app = typer.Typer(help="Node cluster management commands.")
console = Console()

CLUSTER_FIELDS = [
    ("uuid", "UUID"),
    ("name", "Name"),
    ("state", "State"),
    ("region", "Region"),
    ("node_type", "Node type"),
    ("current_num_nodes", "Nodes"),
    ("target_num_nodes", "Target nodes"),
    ("tags", "Tags"),
    ("deployed_datetime", "Deployed"),
]


def _print_cluster(ctx: typer.Context, cluster, verb: str) -> None:
    if get_json_flag(ctx):
        output_json(cluster)
    else:
        console.print(f"[green]{verb}:[/green] {cluster.uuid} ({cluster.name}, {cluster.state})")


@app.command("list")
def list_clusters(
    ctx: typer.Context,
    page: int | None = typer.Option(None, "--page", "-p", help="Page number"),
) -> None:
    """List current and recently terminated node clusters."""
    try:
        with get_client() as client:
            clusters = client.node_clusters.list(page=page)

        if get_json_flag(ctx):
            output_json(clusters)
        else:
            if not clusters.objects:
                console.print("[dim]No node clusters found.[/dim]")
                return

            output_table(
                clusters.objects,
                columns=[
                    ("uuid", "UUID"),
                    ("name", "Name"),
                    ("state", "State"),
                    ("current_num_nodes", "Nodes"),
                    ("deployed_datetime", "Deployed"),
                ],
                title="Node clusters",
            )

    except Exception as e:
        handle_error(e)


@app.command("inspect")
def inspect(
    ctx: typer.Context,
    uuid: str = typer.Argument(..., help="Node cluster UUID"),
) -> None:
    """Show node cluster details."""
    try:
        with get_client() as client:
            cluster = client.node_clusters.get(uuid)

        if get_json_flag(ctx):
            output_json(cluster)
        else:
            output_record(cluster, CLUSTER_FIELDS, title=f"Node cluster: {cluster.name}")

    except Exception as e:
        handle_error(e)


@app.command("create")
def create(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Node cluster name"),
    region: str = typer.Argument(..., help="Region as provider/name, e.g. digitalocean/lon1"),
    node_type: str = typer.Argument(..., help="Node type as provider/name, e.g. digitalocean/1gb"),
    nodes: int = typer.Option(1, "--nodes", "-n", help="Number of nodes"),
    tags: list[str] | None = typer.Option(None, "--tag", "-t", help="Tag to attach (repeatable)"),
    disk: int | None = typer.Option(None, "--disk", help="Disk size in GB"),
    deploy: bool = typer.Option(False, "--deploy", help="Deploy right after creation"),
) -> None:
    """Create a node cluster."""
    try:
        with get_client() as client:
            cluster = client.node_clusters.create(
                name,
                region,
                node_type,
                target_num_nodes=nodes,
                tags=tags or None,
                disk=disk,
            )
            if deploy:
                cluster = client.node_clusters.deploy(cluster.uuid)

        _print_cluster(ctx, cluster, "Created node cluster")

    except Exception as e:
        handle_error(e)


@app.command("deploy")
def deploy(
    ctx: typer.Context,
    uuid: str = typer.Argument(..., help="Node cluster UUID"),
) -> None:
    """Deploy a recently created node cluster."""
    try:
        with get_client() as client:
            cluster = client.node_clusters.deploy(uuid)
        _print_cluster(ctx, cluster, "Deploying node cluster")
    except Exception as e:
        handle_error(e)


@app.command("scale")
def scale(
    ctx: typer.Context,
    uuid: str = typer.Argument(..., help="Node cluster UUID"),
    target_num_nodes: int = typer.Argument(..., help="Target number of nodes"),
) -> None:
    """Change the number of nodes of a node cluster."""
    try:
        with get_client() as client:
            cluster = client.node_clusters.update(uuid, target_num_nodes=target_num_nodes)
        _print_cluster(ctx, cluster, "Scaling node cluster")
    except Exception as e:
        handle_error(e)


@app.command("upgrade")
def upgrade(
    ctx: typer.Context,
    uuid: str = typer.Argument(..., help="Node cluster UUID"),
) -> None:
    """Upgrade the Docker daemon on every node of a node cluster."""
    try:
        with get_client() as client:
            cluster = client.node_clusters.upgrade_docker(uuid)
        _print_cluster(ctx, cluster, "Upgrading node cluster")
    except Exception as e:
        handle_error(e)


@app.command("terminate")
def terminate(
    ctx: typer.Context,
    uuid: str = typer.Argument(..., help="Node cluster UUID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Terminate a node cluster and all its nodes. Not reversible."""
    try:
        if not yes and not confirm_action(f"Terminate node cluster {uuid} and all its nodes?"):
            console.print("[dim]Aborted.[/dim]")
            raise typer.Exit(0)

        with get_client() as client:
            cluster = client.node_clusters.terminate(uuid)
        _print_cluster(ctx, cluster, "Terminating node cluster")
    except Exception as e:
        handle_error(e)
