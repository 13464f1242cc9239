"""Display strings and JSON/CSV serialisation for shipping results."""

from __future__ import annotations

import csv
import io
from dataclasses import asdict
from enum import Enum
from typing import Any, Union

from ...models.domain import LocalShippingCalculationResult, ShippingCalculationResult
from ..rates.calculator import round_half_up
from ..zones import get_countries_in_zone, get_free_shipping_threshold, get_zone_name
from ..zones.tables import SHIPPING_ZONES

RATE_CARD_FIELDS = [
    "zone",
    "zone_name",
    "currency",
    "base_rate",
    "rate_per_kg",
    "estimated_days_min",
    "estimated_days_max",
    "courier",
    "free_shipping_threshold",
    "countries",
]


def format_amount(amount: float, currency: str) -> str:
    if currency.upper() == "USD":
        return f"${amount:,.2f}"
    return f"{currency.upper()} {int(round_half_up(amount)):,}"


def format_shipping_cost(result: ShippingCalculationResult) -> str:
    if result.is_free_shipping or result.total_kes == 0:
        return "FREE"
    if result.currency == "USD":
        return format_amount(result.total_usd, "USD")
    return format_amount(result.total_kes, result.currency)


def format_local_shipping_cost(result: LocalShippingCalculationResult) -> str:
    if result.is_free_shipping or result.flat_rate == 0:
        return "FREE"
    return format_amount(result.flat_rate, result.currency)


def format_cost(result: Union[ShippingCalculationResult, LocalShippingCalculationResult]) -> str:
    if isinstance(result, LocalShippingCalculationResult):
        return format_local_shipping_cost(result)
    return format_shipping_cost(result)


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def result_to_json(result: Union[ShippingCalculationResult, LocalShippingCalculationResult]) -> dict:
    payload = {key: _plain(value) for key, value in asdict(result).items()}
    payload["kind"] = "local" if isinstance(result, LocalShippingCalculationResult) else "international"
    payload["display"] = format_cost(result)
    return payload


def rate_card_to_csv() -> str:
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=RATE_CARD_FIELDS)
    writer.writeheader()
    for zone, rate in SHIPPING_ZONES.items():
        threshold = get_free_shipping_threshold(zone)
        writer.writerow(
            {
                "zone": zone.value,
                "zone_name": get_zone_name(zone),
                "currency": rate.currency,
                "base_rate": rate.base_rate,
                "rate_per_kg": rate.rate_per_kg,
                "estimated_days_min": rate.estimated_days_min,
                "estimated_days_max": rate.estimated_days_max,
                "courier": rate.courier,
                "free_shipping_threshold": "" if threshold is None else threshold,
                "countries": " ".join(get_countries_in_zone(zone)),
            }
        )
    return buffer.getvalue()
