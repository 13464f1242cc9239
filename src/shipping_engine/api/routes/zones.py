"""Zone registry endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, Response, status

from ...schemas.zones import CountryModel, LocalZoneModel, LocalZonesResponse, ZoneModel, ZoneResolution
from ...services.outputs.formatter import rate_card_to_csv
from ...services.zones import (
    get_available_couriers,
    get_country,
    get_country_name,
    get_free_shipping_threshold,
    get_major_cities,
    get_zone_name,
    is_local_destination,
    is_serviceable,
    resolve_international_zone,
    resolve_local_zone,
)
from ...services.zones.tables import COUNTRY_ZONE_MAPPING, LOCAL_ZONES, SHIPPING_ZONES

router = APIRouter(prefix="/zones", tags=["zones"])


@router.get("", response_model=List[ZoneModel], status_code=status.HTTP_200_OK)
def list_zones() -> List[ZoneModel]:
    zones: List[ZoneModel] = []
    for zone, rate in SHIPPING_ZONES.items():
        zones.append(
            ZoneModel(
                zone=zone.value,
                name=get_zone_name(zone),
                base_rate=rate.base_rate,
                rate_per_kg=rate.rate_per_kg,
                currency=rate.currency,
                estimated_days_min=rate.estimated_days_min,
                estimated_days_max=rate.estimated_days_max,
                courier=rate.courier,
                couriers=get_available_couriers(zone),
                free_shipping_threshold=get_free_shipping_threshold(zone),
                countries=[
                    CountryModel(code=country.code, name=country.name)
                    for country in COUNTRY_ZONE_MAPPING
                    if country.zone is zone
                ],
            )
        )
    return zones


@router.get("/resolve", response_model=ZoneResolution, status_code=status.HTTP_200_OK)
def resolve(
    country: str = Query(default="", description="Destination country code."),
    city: Optional[str] = Query(default=None),
) -> ZoneResolution:
    if not country.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Country code is required")
    zone = resolve_international_zone(country)
    mapped = get_country(country)
    return ZoneResolution(
        country_code=mapped.code if mapped else country.strip().upper(),
        country_name=get_country_name(country),
        zone=zone.value,
        zone_name=get_zone_name(zone),
        serviceable=is_serviceable(country),
        local_zone=resolve_local_zone(city).value if is_local_destination(country) else None,
    )


@router.get("/local", response_model=LocalZonesResponse, status_code=status.HTTP_200_OK)
def local_zones() -> LocalZonesResponse:
    return LocalZonesResponse(
        zones=[
            LocalZoneModel(
                zone=zone.value,
                flat_rate=rate.flat_rate,
                currency=rate.currency,
                estimated_days_min=rate.estimated_days_min,
                estimated_days_max=rate.estimated_days_max,
                courier=rate.courier,
            )
            for zone, rate in LOCAL_ZONES.items()
        ],
        major_cities=get_major_cities(),
    )


@router.get("/rate-card.csv", status_code=status.HTTP_200_OK)
def rate_card() -> Response:
    return Response(
        content=rate_card_to_csv(),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="rate-card.csv"'},
    )
