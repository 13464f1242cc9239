"""Domain models for shipping zones, cart items and rate calculations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ShippingZone(str, Enum):
    """International rate buckets; ``local`` is the home country."""

    LOCAL = "local"
    ZONE_A = "zone_a"  # East Africa
    ZONE_B = "zone_b"  # Rest of Africa
    ZONE_C = "zone_c"  # Asia & Middle East
    ZONE_D = "zone_d"  # Europe
    ZONE_E = "zone_e"  # Americas
    ZONE_F = "zone_f"  # Oceania


class LocalZone(str, Enum):
    """Domestic flat-rate buckets classified by destination city."""

    NAIROBI = "nairobi"
    MAJOR_CITIES = "major_cities"
    RURAL = "rural"


class ServiceLevel(str, Enum):
    ECONOMY = "economy"
    STANDARD = "standard"
    PRIORITY = "priority"


@dataclass(frozen=True, slots=True)
class ZoneRate:
    """Rate parameters for an international zone."""

    base_rate: float
    rate_per_kg: float
    currency: str
    estimated_days_min: int
    estimated_days_max: int
    courier: str


@dataclass(frozen=True, slots=True)
class LocalZoneRate:
    """Flat-rate parameters for a domestic zone."""

    flat_rate: int
    currency: str
    estimated_days_min: int
    estimated_days_max: int
    courier: str


@dataclass(frozen=True, slots=True)
class CountryMapping:
    code: str
    name: str
    zone: ShippingZone


@dataclass(slots=True)
class CartItemWithWeight:
    """Cart line used for weight and subtotal aggregation."""

    id: str
    quantity: int
    price: float
    weight: Optional[float] = None


@dataclass(frozen=True, slots=True)
class Dimensions:
    """Parcel dimensions in centimetres."""

    length: float
    width: float
    height: float


@dataclass(slots=True)
class ShippingCalculationResult:
    """Cost breakdown for an international (weight-based) shipment."""

    zone: ShippingZone
    base_rate: float
    weight_charge: float
    fuel_surcharge: float
    insurance: float
    total_usd: float
    total_kes: int
    currency: str
    estimated_days: str
    courier: str
    is_free_shipping: bool
    savings: Optional[int] = None
    service: ServiceLevel = ServiceLevel.STANDARD


@dataclass(slots=True)
class LocalShippingCalculationResult:
    """Flat-rate result for a domestic shipment. Local shipping is never free."""

    zone: LocalZone
    flat_rate: int
    currency: str
    estimated_days: str
    courier: str
    is_free_shipping: bool = False
    service: ServiceLevel = ServiceLevel.STANDARD


@dataclass(slots=True)
class RuleConditions:
    min_subtotal: Optional[float] = None
    max_subtotal: Optional[float] = None
    min_weight: Optional[float] = None
    max_weight: Optional[float] = None
    zones: Optional[tuple[ShippingZone, ...]] = None


@dataclass(slots=True)
class RuleAction:
    type: str  # "free" | "discount" | "fixed"
    value: float = 0.0


@dataclass(slots=True)
class ShippingRule:
    """Promotional shipping rule evaluated by priority."""

    name: str
    priority: int
    action: RuleAction
    conditions: RuleConditions = field(default_factory=RuleConditions)
    is_active: bool = True


@dataclass(slots=True)
class RuleOutcome:
    discount: float
    free_shipping: bool
    rule_name: Optional[str] = None
