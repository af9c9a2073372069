"""Contrato del transporte HTTP del recurso `couriers`.

Por qué Protocol:
- El cliente HTTP (auth, retries, paginación) es un colaborador externo.
- El Core solo necesita saber qué llamadas existen y qué modelos devuelven,
  así que cualquier implementación (real o stub de tests) encaja.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.couriers import CourierDetectList, CourierDetectRequest, CourierList


@runtime_checkable
class CourierTransport(Protocol):
    """Llamadas que el transporte expone sobre `/couriers`."""

    def list_couriers(self) -> CourierList:
        """Couriers activados en la cuenta (`GET /couriers`)."""

        ...

    def list_all_couriers(self) -> CourierList:
        """Todos los couriers soportados (`GET /couriers/all`)."""

        ...

    def detect(self, request: CourierDetectRequest) -> CourierDetectList:
        """Detecta couriers candidatos (`POST /couriers/detect`)."""

        ...
