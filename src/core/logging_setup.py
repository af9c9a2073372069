"""Logging de la aplicación.

Los módulos usan `logging.getLogger(__name__)`; solo la CLI llama a
`configure_logging`, una vez, con el nivel de `AppSettings`.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from core.config import AppSettings


def configure_logging(settings: AppSettings | None = None, *, console: Console | None = None) -> None:
    settings = settings or AppSettings()
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
