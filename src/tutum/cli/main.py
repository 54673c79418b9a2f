"""Main CLI entry point."""

from __future__ import annotations

import typer
from rich.console import Console

from tutum._logging import setup_logging
from tutum._version import __version__
from tutum.cli import action, catalog, config, node, nodecluster

app = typer.Typer(
    name="tutum",
    help="Tutum CLI - manage node clusters and nodes across cloud providers.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

app.add_typer(action.app, name="action", help="Audit trail of the account")
app.add_typer(catalog.provider_app, name="provider", help="Supported cloud providers")
app.add_typer(catalog.region_app, name="region", help="Provider regions")
app.add_typer(catalog.nodetype_app, name="nodetype", help="Provider node types")
app.add_typer(nodecluster.app, name="nodecluster", help="Node cluster management")
app.add_typer(node.app, name="node", help="Node management")
app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"tutum-sdk version {__version__}")


@app.callback()
def main(
    ctx: typer.Context,
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output in JSON format",
        is_eager=True,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Log HTTP requests to stderr",
    ),
) -> None:
    """Tutum CLI - manage node clusters and nodes across cloud providers."""
    ctx.ensure_object(dict)
    ctx.obj["json"] = json_output
    if debug:
        setup_logging(debug=True)


if __name__ == "__main__":
    app()
