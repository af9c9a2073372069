"""Codec JSON del recurso `couriers`.

Por qué un módulo aparte:
- El dominio define las formas; aquí se decide cómo entran y salen del wire
  (claves snake_case, sobre `{"meta": ..., "data": ...}` del API, `null`
  omitidos al serializar).
- El transporte HTTP (externo) y la CLI usan las mismas funciones.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from core.config import AppSettings
from core.domain.couriers import CourierDetectList, CourierDetectRequest, CourierList
from core.domain.errors import InvalidPayloadError

logger = logging.getLogger(__name__)

Payload = str | bytes | Mapping[str, Any]
ModelT = TypeVar("ModelT", bound=BaseModel)


def _decode_body(payload: Payload) -> Mapping[str, Any]:
    if isinstance(payload, (str, bytes, bytearray)):
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise InvalidPayloadError(payload, message=f"Invalid JSON: {exc.msg}") from exc
    else:
        data = payload

    if not isinstance(data, Mapping):
        raise InvalidPayloadError(payload, message="Expected a JSON object")

    # Respuestas del API: {"meta": {"code": 200}, "data": {...}}
    inner = data.get("data")
    if isinstance(inner, Mapping):
        logger.debug("Unwrapping response envelope (meta=%s)", data.get("meta"))
        return inner
    return data


def _parse(model: type[ModelT], payload: Payload) -> ModelT:
    body = _decode_body(payload)
    try:
        return model.model_validate(body)
    except ValidationError as exc:
        raise InvalidPayloadError(
            payload,
            message=f"Body does not match {model.__name__} ({exc.error_count()} error(s))",
        ) from exc


def parse_courier_list(payload: Payload) -> CourierList:
    """Respuesta de `/couriers` o `/couriers/all` -> `CourierList`."""

    result = _parse(CourierList, payload)
    logger.debug("Parsed courier list: total=%d, couriers=%d", result.total, len(result.couriers))
    return result


def parse_detect_list(payload: Payload) -> CourierDetectList:
    """Respuesta de `/couriers/detect` -> `CourierDetectList`."""

    result = _parse(CourierDetectList, payload)
    logger.debug("Parsed detect list: total=%d, couriers=%d", result.total, len(result.couriers))
    return result


def dump_model(model: BaseModel) -> dict[str, Any]:
    """Modelo -> dict JSON-compatible con las claves del wire (sin `None`)."""

    return model.model_dump(mode="json", exclude_none=True)


def dump_detect_request(request: CourierDetectRequest) -> dict[str, Any]:
    """Cuerpo de `POST /couriers/detect`: `{"tracking": {...}}`."""

    return dump_model(request)


def to_json(model: BaseModel, *, settings: AppSettings | None = None) -> str:
    settings = settings or AppSettings()
    return json.dumps(
        dump_model(model),
        ensure_ascii=False,
        indent=settings.json_indent or None,
    )


def load_courier_list(path: Path) -> CourierList:
    return parse_courier_list(path.read_text(encoding="utf-8"))


def load_detect_list(path: Path) -> CourierDetectList:
    return parse_detect_list(path.read_text(encoding="utf-8"))
