"""Destination summaries shown before a cart is priced."""

from __future__ import annotations

from typing import Any, Optional

from ..zones import (
    get_country_name,
    get_free_shipping_threshold,
    get_local_zone_rate,
    get_zone_name,
    get_zone_rate,
    resolve_international_zone,
    resolve_local_zone,
)
from .delivery import format_day_range, format_delivery_estimate


def get_shipping_info(country_code: str) -> dict[str, Any]:
    zone = resolve_international_zone(country_code)
    rate = get_zone_rate(zone)
    return {
        "zone": zone.value,
        "zone_name": get_zone_name(zone),
        "country_name": get_country_name(country_code),
        "courier": rate.courier,
        "estimated_delivery": format_delivery_estimate(zone),
        "free_shipping_threshold": get_free_shipping_threshold(zone),
        "currency": "USD",
    }


def get_local_shipping_info(country_code: str, city: Optional[str] = None) -> dict[str, Any]:
    local_zone = resolve_local_zone(city)
    rate = get_local_zone_rate(local_zone)
    return {
        "zone": local_zone.value,
        "courier": rate.courier,
        "estimated_delivery": format_day_range(
            rate.estimated_days_min, rate.estimated_days_max, unit="business days"
        ),
        "flat_rate": rate.flat_rate,
        "currency": rate.currency,
    }
