"""Static rate tables for international and domestic shipping."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from ...models.domain import CountryMapping, LocalZone, LocalZoneRate, ShippingZone, ZoneRate

USD_TO_KES = 150

SHIPPING_ZONES: Mapping[ShippingZone, ZoneRate] = MappingProxyType(
    {
        ShippingZone.LOCAL: ZoneRate(5, 2, "KES", 1, 3, "Local Courier"),
        ShippingZone.ZONE_A: ZoneRate(25, 12, "USD", 3, 5, "EMS/DHL"),
        ShippingZone.ZONE_B: ZoneRate(40, 18, "USD", 5, 10, "DHL/FedEx"),
        ShippingZone.ZONE_C: ZoneRate(38, 15, "USD", 5, 8, "DHL/FedEx"),
        ShippingZone.ZONE_D: ZoneRate(45, 18, "USD", 5, 8, "DHL/FedEx/UPS"),
        ShippingZone.ZONE_E: ZoneRate(50, 22, "USD", 6, 10, "FedEx/UPS"),
        ShippingZone.ZONE_F: ZoneRate(50, 22, "USD", 7, 12, "DHL/FedEx"),
    }
)

# Order subtotal (USD) at which international shipping is waived.
FREE_SHIPPING_THRESHOLDS: Mapping[ShippingZone, Optional[float]] = MappingProxyType(
    {
        ShippingZone.LOCAL: None,
        ShippingZone.ZONE_A: 150,
        ShippingZone.ZONE_B: 200,
        ShippingZone.ZONE_C: 250,
        ShippingZone.ZONE_D: 300,
        ShippingZone.ZONE_E: 350,
        ShippingZone.ZONE_F: 350,
    }
)

ZONE_NAMES: Mapping[ShippingZone, str] = MappingProxyType(
    {
        ShippingZone.LOCAL: "Kenya (Local)",
        ShippingZone.ZONE_A: "East Africa",
        ShippingZone.ZONE_B: "Rest of Africa",
        ShippingZone.ZONE_C: "Asia & Middle East",
        ShippingZone.ZONE_D: "Europe",
        ShippingZone.ZONE_E: "Americas",
        ShippingZone.ZONE_F: "Oceania",
    }
)

ZONE_COURIERS: Mapping[ShippingZone, tuple[str, ...]] = MappingProxyType(
    {
        ShippingZone.LOCAL: ("G4S", "Fastway", "Private Courier"),
        ShippingZone.ZONE_A: ("EMS", "DHL"),
        ShippingZone.ZONE_B: ("DHL", "FedEx"),
        ShippingZone.ZONE_C: ("DHL", "FedEx", "Aramex"),
        ShippingZone.ZONE_D: ("DHL", "FedEx", "UPS"),
        ShippingZone.ZONE_E: ("FedEx", "UPS", "DHL"),
        ShippingZone.ZONE_F: ("DHL", "FedEx"),
    }
)

COUNTRY_ZONE_MAPPING: tuple[CountryMapping, ...] = (
    CountryMapping("KE", "Kenya", ShippingZone.LOCAL),
    CountryMapping("TZ", "Tanzania", ShippingZone.ZONE_A),
    CountryMapping("UG", "Uganda", ShippingZone.ZONE_A),
    CountryMapping("RW", "Rwanda", ShippingZone.ZONE_A),
    CountryMapping("BI", "Burundi", ShippingZone.ZONE_A),
    CountryMapping("SS", "South Sudan", ShippingZone.ZONE_A),
    CountryMapping("ET", "Ethiopia", ShippingZone.ZONE_A),
    CountryMapping("ZA", "South Africa", ShippingZone.ZONE_B),
    CountryMapping("NG", "Nigeria", ShippingZone.ZONE_B),
    CountryMapping("GH", "Ghana", ShippingZone.ZONE_B),
    CountryMapping("EG", "Egypt", ShippingZone.ZONE_B),
    CountryMapping("MA", "Morocco", ShippingZone.ZONE_B),
    CountryMapping("AE", "United Arab Emirates", ShippingZone.ZONE_C),
    CountryMapping("SA", "Saudi Arabia", ShippingZone.ZONE_C),
    CountryMapping("IN", "India", ShippingZone.ZONE_C),
    CountryMapping("CN", "China", ShippingZone.ZONE_C),
    CountryMapping("JP", "Japan", ShippingZone.ZONE_C),
    CountryMapping("SG", "Singapore", ShippingZone.ZONE_C),
    CountryMapping("MY", "Malaysia", ShippingZone.ZONE_C),
    CountryMapping("TH", "Thailand", ShippingZone.ZONE_C),
    CountryMapping("KR", "South Korea", ShippingZone.ZONE_C),
    CountryMapping("GB", "United Kingdom", ShippingZone.ZONE_D),
    CountryMapping("DE", "Germany", ShippingZone.ZONE_D),
    CountryMapping("FR", "France", ShippingZone.ZONE_D),
    CountryMapping("NL", "Netherlands", ShippingZone.ZONE_D),
    CountryMapping("BE", "Belgium", ShippingZone.ZONE_D),
    CountryMapping("IT", "Italy", ShippingZone.ZONE_D),
    CountryMapping("ES", "Spain", ShippingZone.ZONE_D),
    CountryMapping("US", "United States", ShippingZone.ZONE_E),
    CountryMapping("CA", "Canada", ShippingZone.ZONE_E),
    CountryMapping("BR", "Brazil", ShippingZone.ZONE_E),
    CountryMapping("MX", "Mexico", ShippingZone.ZONE_E),
    CountryMapping("AU", "Australia", ShippingZone.ZONE_F),
    CountryMapping("NZ", "New Zealand", ShippingZone.ZONE_F),
)

COUNTRIES_BY_CODE: Mapping[str, CountryMapping] = MappingProxyType(
    {country.code: country for country in COUNTRY_ZONE_MAPPING}
)

FALLBACK_ZONE = ShippingZone.ZONE_B

LOCAL_ZONES: Mapping[LocalZone, LocalZoneRate] = MappingProxyType(
    {
        LocalZone.NAIROBI: LocalZoneRate(250, "KES", 1, 2, "Nairobi Rider"),
        LocalZone.MAJOR_CITIES: LocalZoneRate(450, "KES", 2, 4, "G4S Courier"),
        LocalZone.RURAL: LocalZoneRate(650, "KES", 3, 7, "Posta Kenya"),
    }
)

MAJOR_CITIES: frozenset[str] = frozenset(
    {
        "mombasa",
        "kisumu",
        "nakuru",
        "eldoret",
        "thika",
        "malindi",
        "kitale",
        "nyeri",
        "machakos",
        "meru",
        "kericho",
        "naivasha",
        "kakamega",
        "garissa",
        "nanyuki",
    }
)
