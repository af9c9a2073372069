"""Courier lookups on top of an injected transport.

The service owns the one local rule of the couriers resource: a detect
request is only built (and sent) when its tracking number is present. Any
network concern stays in the transport implementation.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from core.domain.couriers import (
    Courier,
    CourierDetectList,
    CourierDetectRequest,
    CourierDetectTracking,
    CourierList,
)
from core.interfaces.transport import CourierTransport

logger = logging.getLogger(__name__)


class CourierService:
    """Thin facade over a `CourierTransport`."""

    def __init__(self, transport: CourierTransport) -> None:
        self._transport = transport

    def list_couriers(self, *, include_all: bool = False) -> CourierList:
        """Return the activated couriers, or every supported one with `include_all`."""

        if include_all:
            result = self._transport.list_all_couriers()
        else:
            result = self._transport.list_couriers()
        logger.debug("Listed %d couriers (include_all=%s)", result.total, include_all)
        return result

    def detect(
        self,
        tracking: CourierDetectTracking | Mapping[str, Any] | None,
    ) -> CourierDetectList:
        """Build a detect request and send it through the transport.

        `InvalidTrackingNumberError` propagates before the transport is touched.
        """

        request = CourierDetectRequest(tracking)
        logger.debug(
            "Detecting courier for %s (slugs=%s)",
            request.tracking.tracking_number,
            request.tracking.slugs(),
        )
        result = self._transport.detect(request)
        logger.debug("Detect returned %d candidate(s)", result.total)
        return result

    def find_courier(self, slug: str, *, include_all: bool = True) -> Courier | None:
        """Look up a courier by slug in the listing."""

        wanted = slug.strip().lower()
        for courier in self.list_couriers(include_all=include_all).couriers:
            if courier.slug.lower() == wanted:
                return courier
        return None
