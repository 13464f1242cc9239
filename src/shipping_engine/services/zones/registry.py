"""Destination lookups against the static zone tables.

Every resolver fails open: unknown country codes route to the rest-of-Africa
zone and unknown cities route to the rural local zone.
"""

from __future__ import annotations

from typing import Optional

from ...models.domain import CountryMapping, LocalZone, LocalZoneRate, ShippingZone, ZoneRate
from .tables import (
    COUNTRIES_BY_CODE,
    COUNTRY_ZONE_MAPPING,
    FALLBACK_ZONE,
    FREE_SHIPPING_THRESHOLDS,
    LOCAL_ZONES,
    MAJOR_CITIES,
    SHIPPING_ZONES,
    ZONE_COURIERS,
    ZONE_NAMES,
)


def _normalise_code(country_code: Optional[str]) -> str:
    return (country_code or "").strip().upper()


def get_country(country_code: Optional[str]) -> Optional[CountryMapping]:
    return COUNTRIES_BY_CODE.get(_normalise_code(country_code))


def resolve_international_zone(country_code: Optional[str]) -> ShippingZone:
    """Map a country code to its shipping zone, defaulting to ``zone_b``."""

    country = get_country(country_code)
    return country.zone if country else FALLBACK_ZONE


def resolve_local_zone(city: Optional[str]) -> LocalZone:
    """Classify a domestic city by exact (case-insensitive, trimmed) name."""

    name = (city or "").strip().lower()
    if name == "nairobi":
        return LocalZone.NAIROBI
    if name in MAJOR_CITIES:
        return LocalZone.MAJOR_CITIES
    return LocalZone.RURAL


def is_serviceable(country_code: Optional[str]) -> bool:
    # The zone_b fallback covers every input, so no destination is rejected.
    return True


def is_local_destination(country_code: Optional[str]) -> bool:
    return resolve_international_zone(country_code) is ShippingZone.LOCAL


def get_zone_rate(zone: ShippingZone) -> ZoneRate:
    return SHIPPING_ZONES[zone]


def get_local_zone_rate(zone: LocalZone) -> LocalZoneRate:
    return LOCAL_ZONES[zone]


def get_free_shipping_threshold(zone: ShippingZone) -> Optional[float]:
    return FREE_SHIPPING_THRESHOLDS[zone]


def get_country_name(country_code: Optional[str]) -> str:
    country = get_country(country_code)
    return country.name if country else "Unknown"


def get_zone_name(zone: ShippingZone) -> str:
    return ZONE_NAMES[zone]


def get_countries_in_zone(zone: ShippingZone) -> list[str]:
    return [country.code for country in COUNTRY_ZONE_MAPPING if country.zone is zone]


def get_available_couriers(zone: ShippingZone) -> list[str]:
    return list(ZONE_COURIERS[zone])


def get_major_cities() -> list[str]:
    return sorted(MAJOR_CITIES)
