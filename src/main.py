"""Script de ejecución.

Permite lanzar la CLI con `python -m main` desde `src/` durante desarrollo,
además del script `courier-track` instalado.
"""

from __future__ import annotations

import sys

# Terminales Windows en cp1252 rompen las tablas de Rich.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run  # noqa: E402


def main() -> None:
    run()


if __name__ == "__main__":
    main()
