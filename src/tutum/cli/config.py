"""Configuration CLI commands."""

from __future__ import annotations

import typer
from rich.console import Console

from tutum._config import TutumConfig, get_config_value, set_config_value

app = typer.Typer(help="Configuration management.")
console = Console()

SECRET_KEYS = ("token", "apikey")
# Always stored as strings, even when they look like numbers.
STRING_KEYS = (*SECRET_KEYS, "user", "api_url", "api_version")


def _mask(value: object) -> str:
    text = str(value)
    return text[:8] + "..." + text[-4:] if len(text) > 12 else "***"


@app.command("get")
def get(
    key: str = typer.Argument(..., help="Configuration key"),
) -> None:
    """Get a configuration value.

    Example:
        tutum config get api_url
    """
    value = get_config_value(key)

    if value is None:
        console.print(f"[dim]No value set for '{key}'[/dim]")
    else:
        if key in SECRET_KEYS and value:
            value = _mask(value)
        console.print(value)


@app.command("set")
def set_value(
    key: str = typer.Argument(..., help="Configuration key"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value.

    Example:
        tutum config set token 3f9a...
        tutum config set api_version v2
        tutum config set timeout 120
    """
    typed_value: str | bool | int | float
    if key in STRING_KEYS:
        typed_value = value
    elif value.lower() in ("true", "false"):
        typed_value = value.lower() == "true"
    elif value.isdigit():
        typed_value = int(value)
    elif value.replace(".", "", 1).isdigit():
        typed_value = float(value)
    else:
        typed_value = value

    set_config_value(key, typed_value)
    shown = _mask(value) if key in SECRET_KEYS else value
    console.print(f"[green]Set {key} = {shown}[/green]")


@app.command("list")
def list_config() -> None:
    """List all configuration values."""
    config = TutumConfig.load()

    console.print("[bold]Current Configuration[/bold]\n")

    console.print("  token:", end=" ")
    if config.token:
        console.print(_mask(config.token))
    else:
        console.print("[dim]not set[/dim]")

    console.print(f"  user: {config.auth.user or '-'}")
    console.print(f"  apikey: {_mask(config.auth.apikey) if config.auth.apikey else '-'}")
    console.print(f"  api_url: {config.base_url}")
    console.print(f"  api_version: {config.api_version}")
    console.print(f"  timeout: {config.timeout}")
    console.print(f"  max_retries: {config.max_retries}")
    console.print(f"  debug: {config.debug}")
    console.print(f"  verify_ssl: {config.verify_ssl}")
