"""Shipping quote endpoints."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from ...schemas.shipping import (
    ShippingCalculationModel,
    ShippingInfoResponse,
    ShippingOptionModel,
    ShippingQuoteResponse,
    ShippingRequest,
)
from ...services.outputs.formatter import result_to_json
from ...services.quotes.service import build_quote, require_country_code
from ...services.rates import (
    calculate_shipping,
    get_local_shipping_info,
    get_shipping_info,
    get_shipping_options,
)
from ...services.zones import is_local_destination

router = APIRouter(prefix="/shipping", tags=["shipping"])


def _bad_request(exc: ValueError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.post("/calculate", response_model=ShippingQuoteResponse, status_code=status.HTTP_200_OK)
def calculate(payload: ShippingRequest) -> ShippingQuoteResponse:
    """Quote a cart: main shipping cost plus the available service tiers."""
    try:
        return build_quote(payload)
    except ValueError as exc:
        raise _bad_request(exc) from exc
    except Exception as exc:
        logging.exception(f"Shipping calculation error: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to calculate shipping",
        ) from exc


@router.get("/calculate", response_model=ShippingCalculationModel, status_code=status.HTTP_200_OK)
def calculate_by_query(
    country: str = Query(default="", description="Destination country code."),
    subtotal: float = Query(default=0.0, ge=0.0, allow_inf_nan=False),
    weight: float = Query(default=0.5, ge=0.0, allow_inf_nan=False),
) -> dict:
    try:
        country_code = require_country_code(country)
        return result_to_json(calculate_shipping(weight, country_code, subtotal))
    except ValueError as exc:
        raise _bad_request(exc) from exc


@router.get("/options", response_model=list[ShippingOptionModel], status_code=status.HTTP_200_OK)
def options(
    country: str = Query(default="", description="Destination country code."),
    subtotal: float = Query(default=0.0, ge=0.0, allow_inf_nan=False),
    weight: float = Query(default=1.0, ge=0.0, allow_inf_nan=False),
    city: Optional[str] = Query(default=None, description="Destination city for domestic deliveries."),
) -> list[dict]:
    try:
        country_code = require_country_code(country)
        return [result_to_json(option) for option in get_shipping_options(country_code, subtotal, weight, city)]
    except ValueError as exc:
        raise _bad_request(exc) from exc


@router.get("/info", response_model=ShippingInfoResponse, status_code=status.HTTP_200_OK)
def info(
    country: str = Query(default="", description="Destination country code."),
    city: Optional[str] = Query(default=None),
) -> dict:
    try:
        country_code = require_country_code(country)
    except ValueError as exc:
        raise _bad_request(exc) from exc
    if is_local_destination(country_code):
        return get_local_shipping_info(country_code, city)
    return get_shipping_info(country_code)
