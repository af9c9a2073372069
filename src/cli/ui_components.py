"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en varios comandos.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.couriers import Courier, CourierTracking


def print_banner(console: Console) -> None:
    """Cabecera de una línea (`--banner`)."""

    console.rule(Text.assemble(("courier-track", "bold cyan"), (" · couriers / detect", "dim")), style="cyan")


def _join(values: Iterable[str]) -> str:
    return ", ".join(values) or "-"


def build_couriers_table(couriers: Iterable[Courier], *, title: str = "Couriers") -> Table:
    """Tabla de couriers en el orden recibido (ranking del servidor en detect)."""

    table = Table(title=title)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Slug", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Required fields", style="yellow")
    table.add_column("Optional fields", style="dim")
    table.add_column("Countries", style="magenta")
    for position, courier in enumerate(couriers, start=1):
        table.add_row(
            str(position),
            courier.slug,
            courier.name or "-",
            _join(courier.required_fields),
            _join(courier.optional_fields),
            _join(courier.service_from_country_iso3),
        )
    return table


def build_tracking_panel(tracking: CourierTracking) -> Panel:
    """Panel con los campos no vacíos del tracking devuelto por detect."""

    body = Text()
    for key, value in tracking.model_dump(exclude_none=True).items():
        body.append(f"{key}: ", style="bold")
        body.append(f"{value}\n")
    return Panel(body, title=Text("Tracking", style="bold yellow"), border_style="yellow")
