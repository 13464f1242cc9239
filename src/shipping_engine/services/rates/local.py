"""Flat-rate domestic shipping."""

from __future__ import annotations

from typing import Optional

from ...models.domain import LocalShippingCalculationResult, LocalZone
from ..zones import get_local_zone_rate, resolve_local_zone
from .delivery import format_day_range

HOME_COUNTRY_CODE = "KE"


def calculate_local_shipping(
    country_code: str = HOME_COUNTRY_CODE,
    city: Optional[str] = None,
    zone: Optional[LocalZone] = None,
) -> LocalShippingCalculationResult:
    """Flat rate for a domestic delivery.

    An explicit ``zone`` wins over the city classification. Weight and order
    value play no part and the result is never free.
    """
    local_zone = zone if zone is not None else resolve_local_zone(city)
    rate = get_local_zone_rate(local_zone)
    return LocalShippingCalculationResult(
        zone=local_zone,
        flat_rate=rate.flat_rate,
        currency=rate.currency,
        estimated_days=format_day_range(rate.estimated_days_min, rate.estimated_days_max),
        courier=rate.courier,
        is_free_shipping=False,
    )


def get_local_shipping_options(
    country_code: str = HOME_COUNTRY_CODE,
    city: Optional[str] = None,
) -> list[LocalShippingCalculationResult]:
    return [calculate_local_shipping(country_code, city=city)]
