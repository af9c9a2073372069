"""Errores del SDK.

Por qué un catálogo:
- Cada error lleva un `kind` estable (útil para tests y para mapear a exit
  codes en la CLI) además del mensaje legible.
- `data` conserva el valor que provocó el fallo para diagnóstico.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Tipos de error conocidos por la capa de modelos."""

    CONSTRUCTOR_INVALID_TRACKING_NUMBER = "constructor_invalid_tracking_number"
    PAYLOAD_INVALID_BODY = "payload_invalid_body"

    @property
    def error_type(self) -> str:
        return _ERROR_TYPES[self]

    @property
    def default_message(self) -> str:
        return _ERROR_MESSAGES[self]


_ERROR_TYPES: dict[ErrorKind, str] = {
    ErrorKind.CONSTRUCTOR_INVALID_TRACKING_NUMBER: "ConstructorError",
    ErrorKind.PAYLOAD_INVALID_BODY: "PayloadError",
}

_ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.CONSTRUCTOR_INVALID_TRACKING_NUMBER: "Invalid Tracking Number",
    ErrorKind.PAYLOAD_INVALID_BODY: "Invalid response body",
}


class SdkError(Exception):
    """Error base del SDK."""

    def __init__(self, kind: ErrorKind, *, data: Any = None, message: str | None = None) -> None:
        self.kind = kind
        self.type = kind.error_type
        self.message = message or kind.default_message
        self.data = data
        super().__init__(f"{self.type}: {self.message}")

    def __reduce__(self) -> tuple[Any, ...]:
        # Las subclases cambian la firma de __init__; se reconstruye sin pasar por ella.
        return _rebuild_error, (type(self), self.kind, self.message, self.data)


def _rebuild_error(cls: type[SdkError], kind: ErrorKind, message: str, data: Any) -> SdkError:
    error = cls.__new__(cls)
    SdkError.__init__(error, kind, data=data, message=message)
    return error


class InvalidTrackingNumberError(SdkError):
    """Se lanza al construir un `CourierDetectRequest` sin `tracking_number`."""

    def __init__(self, data: Any = None) -> None:
        super().__init__(ErrorKind.CONSTRUCTOR_INVALID_TRACKING_NUMBER, data=data)


class InvalidPayloadError(SdkError):
    """Cuerpo JSON que no encaja con el contrato esperado."""

    def __init__(self, data: Any = None, *, message: str | None = None) -> None:
        super().__init__(ErrorKind.PAYLOAD_INVALID_BODY, data=data, message=message)
