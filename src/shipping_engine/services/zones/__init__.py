"""Zone registry: static tables and destination resolvers."""

from .registry import (
    get_available_couriers,
    get_countries_in_zone,
    get_country,
    get_country_name,
    get_free_shipping_threshold,
    get_local_zone_rate,
    get_major_cities,
    get_zone_name,
    get_zone_rate,
    is_local_destination,
    is_serviceable,
    resolve_international_zone,
    resolve_local_zone,
)

__all__ = [
    "get_available_couriers",
    "get_countries_in_zone",
    "get_country",
    "get_country_name",
    "get_free_shipping_threshold",
    "get_local_zone_rate",
    "get_major_cities",
    "get_zone_name",
    "get_zone_rate",
    "is_local_destination",
    "is_serviceable",
    "resolve_international_zone",
    "resolve_local_zone",
]
