"""CLI de courier-track (Typer).

Todos los comandos trabajan sobre JSON local (respuestas guardadas del API o
requests a enviar); el transporte HTTP queda fuera de la CLI.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from adapters.json_exporter import export_json
from adapters.wire_codec import dump_detect_request, load_courier_list, load_detect_list, to_json
from cli import doctor
from cli.ui_components import build_couriers_table, build_tracking_panel, print_banner
from core.config import AppSettings
from core.domain.couriers import CourierDetectRequest, CourierDetectTracking
from core.domain.errors import InvalidPayloadError, InvalidTrackingNumberError
from core.logging_setup import configure_logging

app = typer.Typer(no_args_is_help=True, help="Courier listings and detect requests.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


@app.callback()
def _main(
    ctx: typer.Context,
    banner: bool = typer.Option(False, "--banner", help="Show the banner before running."),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        # `doctor` reports the broken setting itself.
        if ctx.invoked_subcommand != "doctor":
            _err_console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
            raise typer.Exit(code=1) from exc
        settings = AppSettings.model_construct()
    configure_logging(settings, console=_err_console)
    if banner:
        print_banner(_console)


def _print_json(text: str) -> None:
    _console.print_json(text, indent=AppSettings().json_indent or None)


def _fail_payload(exc: InvalidPayloadError) -> NoReturn:
    _err_console.print(f"[red]{escape(str(exc))}[/red]")
    raise typer.Exit(code=1) from exc


@app.command()
def couriers(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Saved /couriers response."),
    as_json: bool = typer.Option(False, "--json", help="Print normalized JSON instead of a table."),
) -> None:
    """Show a saved courier list response."""

    try:
        result = load_courier_list(path)
    except InvalidPayloadError as exc:
        _fail_payload(exc)

    if as_json:
        _print_json(to_json(result))
        return
    _console.print(build_couriers_table(result.couriers, title=f"Couriers ({result.total})"))


@app.command()
def detect(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Saved /couriers/detect response."),
    as_json: bool = typer.Option(False, "--json", help="Print normalized JSON instead of tables."),
) -> None:
    """Show a saved detect response: echoed tracking and ranked candidates."""

    try:
        result = load_detect_list(path)
    except InvalidPayloadError as exc:
        _fail_payload(exc)

    if as_json:
        _print_json(to_json(result))
        return
    for tracking in result.tracking:
        _console.print(build_tracking_panel(tracking))
    _console.print(build_couriers_table(result.couriers, title=f"Matched couriers ({result.total})"))


@app.command(name="detect-request")
def detect_request(
    tracking_number: str = typer.Argument(..., help="Tracking number to detect."),
    slug: Optional[List[str]] = typer.Option(None, "--slug", "-s", help="Restrict detection to these couriers."),
    postal_code: Optional[str] = typer.Option(None, "--postal-code"),
    ship_date: Optional[str] = typer.Option(None, "--ship-date", help="YYYYMMDD"),
    key: Optional[str] = typer.Option(None, "--key"),
    destination_country: Optional[str] = typer.Option(None, "--destination-country"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the body to a file."),
) -> None:
    """Build and validate a detect request body."""

    tracking = CourierDetectTracking(
        tracking_number=tracking_number,
        tracking_postal_code=postal_code,
        tracking_ship_date=ship_date,
        tracking_key=key,
        tracking_destination_country=destination_country,
        slug=slug or None,
    )
    try:
        request = CourierDetectRequest(tracking)
    except InvalidTrackingNumberError as exc:
        _err_console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=2) from exc

    if output is not None:
        written = export_json(model=request, output_path=output)
        logger.info("Detect request written to %s", written)
        _console.print(f"[green]Saved request to:[/green] {written}")
        return
    _print_json(json.dumps(dump_detect_request(request)))


def run() -> None:
    app()
