"""International rate calculation and service tiers."""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Optional, Union

from ...models.domain import (
    LocalShippingCalculationResult,
    ServiceLevel,
    ShippingCalculationResult,
    ShippingZone,
)
from ..zones import get_free_shipping_threshold, get_zone_rate, resolve_international_zone
from ..zones.tables import USD_TO_KES
from .delivery import delivery_window, format_day_range
from .local import calculate_local_shipping

BASE_WEIGHT_KG = 0.5
FUEL_SURCHARGE_RATE = 0.20
INSURANCE_RATE = 0.01
INTERNATIONAL_MIN_INSURANCE = 5 * USD_TO_KES
LOCAL_MIN_INSURANCE = 50
ECONOMY_MULTIPLIER = 0.8
PRIORITY_MULTIPLIER = 1.5
DEFAULT_OPTIONS_WEIGHT_KG = 1.0

ECONOMY_COURIER = "EMS (Economy)"
PRIORITY_COURIER = "DHL Express (Priority)"

ShippingOption = Union[ShippingCalculationResult, LocalShippingCalculationResult]


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves away from zero for non-negative amounts."""

    factor = 10**digits
    scaled = value * factor + 0.5
    if not math.isfinite(scaled):
        raise ValueError(f"Cannot round non-finite amount {value!r}.")
    return math.floor(scaled) / factor


def _check_non_negative(**values: float) -> None:
    for name, value in values.items():
        if not math.isfinite(value) or value < 0:
            raise ValueError(f"{name} must be a finite number >= 0")


def is_eligible_for_free_shipping(subtotal: float, zone: ShippingZone) -> bool:
    threshold = get_free_shipping_threshold(zone)
    return threshold is not None and subtotal >= threshold


def get_amount_needed_for_free_shipping(subtotal: float, zone: ShippingZone) -> float:
    threshold = get_free_shipping_threshold(zone)
    if threshold is None:
        return 0.0
    return max(0.0, threshold - subtotal)


def calculate_shipping(weight: float, country_code: str, subtotal: float) -> ShippingCalculationResult:
    """Compute the standard weight-based cost breakdown for a destination.

    The first 0.5 kg is covered by the zone base rate. International amounts
    are converted to KES before the fuel surcharge is applied; the ``local``
    zone is already priced in KES. When the subtotal reaches the zone's
    free-shipping threshold both totals are zero and ``savings`` carries the
    waived amount.
    """
    _check_non_negative(weight=weight, subtotal=subtotal)

    zone = resolve_international_zone(country_code)
    rate = get_zone_rate(zone)
    is_local = zone is ShippingZone.LOCAL
    is_free = is_eligible_for_free_shipping(subtotal, zone)

    additional_weight = max(0.0, weight - BASE_WEIGHT_KG)
    weight_charge = additional_weight * rate.rate_per_kg
    base_charge = rate.base_rate + weight_charge

    factor = 1 if is_local else USD_TO_KES
    converted = base_charge * factor
    fuel_surcharge = converted * FUEL_SURCHARGE_RATE

    minimum_insurance = LOCAL_MIN_INSURANCE if is_local else INTERNATIONAL_MIN_INSURANCE
    insurance = max(minimum_insurance, subtotal * INSURANCE_RATE)

    gross = converted + fuel_surcharge + insurance
    if not math.isfinite(gross):
        raise ValueError("Shipping cost is out of range for the given weight and subtotal.")
    days_min, days_max = delivery_window(zone, ServiceLevel.STANDARD)

    return ShippingCalculationResult(
        zone=zone,
        base_rate=rate.base_rate,
        weight_charge=round_half_up(weight_charge, 2),
        fuel_surcharge=round_half_up(fuel_surcharge, 2),
        insurance=round_half_up(insurance, 2),
        total_usd=0.0 if is_free else round_half_up(gross / USD_TO_KES, 2),
        total_kes=0 if is_free else int(round_half_up(gross)),
        currency=rate.currency,
        estimated_days=format_day_range(days_min, days_max),
        courier=rate.courier,
        is_free_shipping=is_free,
        savings=int(round_half_up(gross)) if is_free else None,
        service=ServiceLevel.STANDARD,
    )


def _scaled_tier(
    standard: ShippingCalculationResult,
    service: ServiceLevel,
    multiplier: float,
    courier: str,
) -> ShippingCalculationResult:
    days_min, days_max = delivery_window(standard.zone, service)
    return replace(
        standard,
        service=service,
        courier=courier,
        estimated_days=format_day_range(days_min, days_max),
        total_usd=round_half_up(standard.total_usd * multiplier, 2),
        total_kes=int(round_half_up(standard.total_kes * multiplier)),
    )


def get_shipping_options(
    country_code: str,
    subtotal: float,
    weight: float = DEFAULT_OPTIONS_WEIGHT_KG,
    city: Optional[str] = None,
) -> list[ShippingOption]:
    """Return economy/standard/priority quotes, or the flat local rate for the home country."""

    zone = resolve_international_zone(country_code)
    if zone is ShippingZone.LOCAL:
        return [calculate_local_shipping(country_code, city=city)]

    standard = calculate_shipping(weight, country_code, subtotal)
    return [
        _scaled_tier(standard, ServiceLevel.ECONOMY, ECONOMY_MULTIPLIER, ECONOMY_COURIER),
        standard,
        _scaled_tier(standard, ServiceLevel.PRIORITY, PRIORITY_MULTIPLIER, PRIORITY_COURIER),
    ]
