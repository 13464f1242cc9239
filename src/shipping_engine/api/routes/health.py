"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...services.zones.tables import COUNTRY_ZONE_MAPPING, LOCAL_ZONES, SHIPPING_ZONES

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/rates", status_code=status.HTTP_200_OK)
def health_rates() -> dict:
    """Report the size of the loaded rate tables."""
    return {
        "status": "ok",
        "zones": len(SHIPPING_ZONES),
        "countries": len(COUNTRY_ZONE_MAPPING),
        "local_zones": len(LOCAL_ZONES),
    }
