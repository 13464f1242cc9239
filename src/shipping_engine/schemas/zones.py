"""Zone registry API schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel


class CountryModel(BaseModel):
    code: str
    name: str


class ZoneModel(BaseModel):
    zone: str
    name: str
    base_rate: float
    rate_per_kg: float
    currency: str
    estimated_days_min: int
    estimated_days_max: int
    courier: str
    couriers: List[str]
    free_shipping_threshold: Optional[float] = None
    countries: List[CountryModel]


class LocalZoneModel(BaseModel):
    zone: str
    flat_rate: int
    currency: str
    estimated_days_min: int
    estimated_days_max: int
    courier: str


class LocalZonesResponse(BaseModel):
    zones: List[LocalZoneModel]
    major_cities: List[str]


class ZoneResolution(BaseModel):
    country_code: str
    country_name: str
    zone: str
    zone_name: str
    serviceable: bool
    local_zone: Optional[str] = None
