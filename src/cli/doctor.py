"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from core.config import AppSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


@app.command()
def run() -> None:
    """Show the effective settings and where they are read from."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    env_file = get_user_env_file()

    table = Table(title="courier-track Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Log level", "OK", settings.log_level)
    table.add_row("JSON indent", "OK", str(settings.json_indent))
    if env_file.exists():
        table.add_row("User .env", "OK", str(env_file))
    else:
        table.add_row("User .env", "OPTIONAL", f"{env_file} (not created)")

    _console.print(table)


@app.command()
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    log_level = typer.prompt("Log level", default="WARNING", show_default=True).strip().upper()
    json_indent = typer.prompt("JSON indent", default=2, type=int, show_default=True)

    if log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise typer.BadParameter(f"unknown log level: {log_level}")

    env_path = write_user_env_vars(
        {
            "COURIER_TRACK_LOG_LEVEL": log_level,
            "COURIER_TRACK_JSON_INDENT": str(json_indent),
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
