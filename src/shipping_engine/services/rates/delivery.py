"""Delivery windows per zone and service level."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from ...models.domain import ServiceLevel, ShippingZone
from ..zones import get_zone_rate

PROCESSING_DAYS = 1


def delivery_window(zone: ShippingZone, service: ServiceLevel = ServiceLevel.STANDARD) -> tuple[int, int]:
    """Return the (min, max) transit days for a zone at the given service level."""

    rate = get_zone_rate(zone)
    match service:
        case ServiceLevel.ECONOMY:
            return rate.estimated_days_max + 3, rate.estimated_days_max + 7
        case ServiceLevel.PRIORITY:
            return max(1, rate.estimated_days_min - 1), max(2, rate.estimated_days_max - 2)
        case _:
            return rate.estimated_days_min, rate.estimated_days_max


def format_day_range(days_min: int, days_max: int, *, unit: str = "days") -> str:
    return f"{days_min}-{days_max} {unit}"


def format_delivery_estimate(zone: ShippingZone, service: ServiceLevel = ServiceLevel.STANDARD) -> str:
    days_min, days_max = delivery_window(zone, service)
    return format_day_range(days_min, days_max, unit="business days")


def get_estimated_delivery_date(
    zone: ShippingZone,
    service: ServiceLevel = ServiceLevel.STANDARD,
    today: Optional[date] = None,
) -> date:
    """Latest expected delivery date, including one day of order processing."""

    rate = get_zone_rate(zone)
    match service:
        case ServiceLevel.PRIORITY:
            days = max(2, rate.estimated_days_max - 2)
        case ServiceLevel.ECONOMY:
            days = rate.estimated_days_max + 5
        case _:
            days = rate.estimated_days_max
    start = today or date.today()
    return start + timedelta(days=days + PROCESSING_DAYS)
