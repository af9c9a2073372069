"""Modelos del recurso `couriers` (Pydantic v2).

Por qué Pydantic aquí:
- Los nombres de campo son las claves literales del wire (snake_case), así
  que el mismo modelo sirve para leer respuestas y para construir requests.
- Todos los modelos son inmutables (`frozen`): describen datos recibidos o a
  enviar, no estado.

Nota:
- La única regla de negocio local es que un `CourierDetectRequest` exige un
  `tracking_number` no vacío. El resto (qué courier encaja) lo decide el
  servidor.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field, field_validator, model_validator
from pydantic.config import ConfigDict

from core.domain.errors import InvalidTrackingNumberError


def _none_as_empty(value: Any) -> Any:
    # El API a veces manda `null` en lugar de lista vacía.
    return [] if value is None else value


NullableStrList = Annotated[list[str], BeforeValidator(_none_as_empty)]


class Courier(BaseModel):
    """Un courier (transportista) soportado por el servicio remoto."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    slug: str = Field(
        ...,
        min_length=1,
        description="Código único del courier.",
    )
    name: str | None = Field(
        default=None,
        description="Nombre del courier.",
    )
    phone: str | None = Field(
        default=None,
        description="Teléfono de contacto del courier.",
    )
    other_name: str | None = Field(
        default=None,
        description="Nombre alternativo del courier.",
    )
    web_url: str | None = Field(
        default=None,
        description="Web del courier.",
    )
    required_fields: NullableStrList = Field(
        default_factory=list,
        description=(
            "Campos extra necesarios para hacer tracking, p.ej. "
            "`tracking_account_number`, `tracking_postal_code`, `tracking_ship_date`."
        ),
    )
    optional_fields: NullableStrList = Field(
        default_factory=list,
        description=(
            "Como `required_fields`, pero solo algunos números de tracking del "
            "courier los necesitan."
        ),
    )
    default_language: str | None = Field(
        default=None,
        description="Idioma por defecto de los resultados de tracking.",
    )
    support_languages: NullableStrList = Field(
        default_factory=list,
        description="Otros idiomas soportados.",
    )
    service_from_country_iso3: NullableStrList = Field(
        default_factory=list,
        description="Países (ISO 3166 alpha-3) donde el courier da servicio.",
    )


NullableCourierList = Annotated[list[Courier], BeforeValidator(_none_as_empty)]


class CourierTracking(BaseModel):
    """Tracking anotado con los campos auxiliares que piden algunos couriers."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str | None = Field(
        default=None,
        description="Identificador único asignado por el servidor.",
    )
    tracking_number: str | None = Field(
        default=None,
        description="Número de tracking.",
    )
    tracking_postal_code: str | None = Field(
        default=None,
        description="Código postal del destinatario. Lo pide p.ej. deutsch-post.",
    )
    tracking_ship_date: str | None = Field(
        default=None,
        description="Fecha de envío en formato YYYYMMDD. Lo pide p.ej. deutsch-post.",
    )
    tracking_key: str | None = Field(
        default=None,
        description="Clave del envío. Lo pide p.ej. sic-teliway.",
    )
    tracking_origin_country: str | None = Field(
        default=None,
        description="País de origen del envío. Lo pide p.ej. dhl.",
    )
    tracking_destination_country: str | None = Field(
        default=None,
        description="País de destino del envío. Lo pide p.ej. postnl-3s.",
    )
    tracking_state: str | None = Field(
        default=None,
        description="Estado/provincia del envío. Lo pide p.ej. star-track-courier.",
    )
    tracking_account_number: str | None = Field(
        default=None,
        description="Número de cuenta del remitente. Lo pide p.ej. dynamic-logistics.",
    )
    slug: str | None = Field(
        default=None,
        description="Slug del courier (referencia débil a `Courier.slug`).",
    )


class CourierList(BaseModel):
    """Respuesta del listado de couriers."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    total: int = Field(
        ...,
        ge=0,
        description="Número total de couriers.",
    )
    couriers: NullableCourierList = Field(
        ...,
        description="Couriers en el orden devuelto por el servidor.",
    )


class CourierDetectTracking(BaseModel):
    """Datos de entrada para detectar el courier de un número de tracking.

    `tracking_number` es obligatorio en la práctica, pero la regla la aplica
    `CourierDetectRequest`, no este modelo.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    tracking_number: str | None = Field(
        default=None,
        description="Número de tracking (obligatorio para detectar).",
    )
    tracking_postal_code: str | None = Field(
        default=None,
        description="Código postal del destinatario. Lo pide p.ej. deutsch-post.",
    )
    tracking_ship_date: str | None = Field(
        default=None,
        description="Fecha de envío en formato YYYYMMDD. Lo pide p.ej. deutsch-post.",
    )
    tracking_key: str | None = Field(
        default=None,
        description="Clave del envío. Lo pide p.ej. sic-teliway.",
    )
    tracking_destination_country: str | None = Field(
        default=None,
        description="País de destino del envío. Lo pide p.ej. postnl-3s.",
    )
    slug: str | list[str] | None = Field(
        default=None,
        description=(
            "Filtro opcional de couriers: lista o string separado por comas. "
            "Sin él, el servidor detecta según el formato del número."
        ),
    )

    def slugs(self) -> list[str]:
        """Devuelve `slug` normalizado a lista (sin espacios ni vacíos)."""

        if self.slug is None:
            return []
        raw = self.slug.split(",") if isinstance(self.slug, str) else self.slug
        return [item.strip() for item in raw if item.strip()]


class CourierDetectRequest(BaseModel):
    """Request de detección de courier.

    Se construye con el tracking como argumento posicional o por keyword:

        CourierDetectRequest({"tracking_number": "1234567890"})

    Si falta el tracking o su `tracking_number` no es un string no vacío, se lanza
    `InvalidTrackingNumberError` en la propia construcción.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    tracking: CourierDetectTracking = Field(
        ...,
        description="Tracking a detectar.",
    )

    def __init__(
        self,
        tracking: CourierDetectTracking | Mapping[str, Any] | None = None,
        /,
        **data: Any,
    ) -> None:
        data.setdefault("tracking", tracking)
        super().__init__(**data)

    @model_validator(mode="before")
    @classmethod
    def _require_tracking_number(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            tracking = data.get("tracking")
        else:
            tracking = getattr(data, "tracking", None)

        if tracking is None:
            raise InvalidTrackingNumberError(tracking)

        if isinstance(tracking, Mapping):
            tracking_number = tracking.get("tracking_number")
        else:
            tracking_number = getattr(tracking, "tracking_number", None)

        if not isinstance(tracking_number, str) or tracking_number == "":
            raise InvalidTrackingNumberError(tracking)
        return data


class CourierDetectList(BaseModel):
    """Respuesta de la detección de courier."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    total: int = Field(
        ...,
        ge=0,
        description="Número de couriers que encajan.",
    )
    tracking: list[CourierTracking] = Field(
        ...,
        description="Tracking devuelto por el servidor (normalmente uno solo).",
    )
    couriers: NullableCourierList = Field(
        ...,
        description="Couriers candidatos, en el orden de confianza del servidor.",
    )

    @field_validator("tracking", mode="before")
    @classmethod
    def _tracking_as_list(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, Mapping):
            return [value]
        return value
