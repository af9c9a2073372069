"""Exportación JSON de modelos.

Por qué JSON:
- Es el formato del wire: lo exportado se puede reenviar tal cual al API.
- Formato estable (claves ordenadas) para poder versionar fixtures.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel

from adapters.wire_codec import dump_model


def export_json(*, model: BaseModel, output_path: Path) -> Path:
    """Exporta `model` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = dump_model(model)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
