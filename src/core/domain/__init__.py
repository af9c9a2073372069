"""Modelos y entidades del dominio.

Por qué:
- Aquí viven los contratos de datos del recurso `couriers` (Pydantic v2) y
  los errores que puede lanzar su construcción.
- El dominio no conoce HTTP, CLI ni ficheros: solo las formas de los datos.
"""

from core.domain.couriers import (
    Courier,
    CourierDetectList,
    CourierDetectRequest,
    CourierDetectTracking,
    CourierList,
    CourierTracking,
)
from core.domain.errors import (
    ErrorKind,
    InvalidPayloadError,
    InvalidTrackingNumberError,
    SdkError,
)

__all__ = [
    "Courier",
    "CourierDetectList",
    "CourierDetectRequest",
    "CourierDetectTracking",
    "CourierList",
    "CourierTracking",
    "ErrorKind",
    "InvalidPayloadError",
    "InvalidTrackingNumberError",
    "SdkError",
]
