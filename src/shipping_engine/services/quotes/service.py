"""High-level orchestration for checkout shipping quotes."""

from __future__ import annotations

import logging
from typing import Optional

from ...config import settings
from ...models.domain import CartItemWithWeight, ShippingZone
from ...schemas.shipping import ShippingQuoteResponse, ShippingRequest
from ..outputs.formatter import result_to_json
from ..rates import (
    calculate_local_shipping,
    calculate_shipping,
    calculate_subtotal,
    calculate_total_weight,
    get_amount_needed_for_free_shipping,
    get_local_shipping_options,
    get_shipping_options,
)
from ..rates.weight import DEFAULT_ITEM_WEIGHT_KG
from ..zones import get_country_name, resolve_international_zone

logger = logging.getLogger(__name__)


def require_country_code(country_code: Optional[str]) -> str:
    if not country_code or not country_code.strip():
        raise ValueError("Country code is required")
    return country_code.strip()


def _cart_items(payload: ShippingRequest) -> list[CartItemWithWeight]:
    return [
        CartItemWithWeight(id=item.id, quantity=item.quantity, price=item.price, weight=item.weight)
        for item in payload.items or []
    ]


def _resolve_weight(payload: ShippingRequest, items: list[CartItemWithWeight]) -> float:
    if payload.items is not None:
        return calculate_total_weight(items, settings.default_item_weight_kg)
    if payload.weight is not None:
        return payload.weight
    return DEFAULT_ITEM_WEIGHT_KG


def build_quote(payload: ShippingRequest) -> ShippingQuoteResponse:
    """Price a cart for a destination.

    Domestic destinations get the flat local rate for the city; every other
    country gets the weight-based standard quote plus economy and priority
    tiers computed for the cart weight.
    """
    country_code = require_country_code(payload.country_code)
    items = _cart_items(payload)
    weight = _resolve_weight(payload, items)
    subtotal = payload.subtotal if payload.subtotal is not None else calculate_subtotal(items)
    zone = resolve_international_zone(country_code)

    if zone is ShippingZone.LOCAL:
        main = calculate_local_shipping(country_code, city=payload.city)
        options = get_local_shipping_options(country_code, city=payload.city)
        currency = main.currency
        logger.info(
            "Local quote for %s (%s): %s KES flat",
            payload.city or "unspecified city",
            main.zone.value,
            main.flat_rate,
        )
    else:
        main = calculate_shipping(weight, country_code, subtotal)
        options = get_shipping_options(country_code, subtotal, weight=weight)
        currency = main.currency
        logger.info(
            "International quote for %s (%s): weight=%.2fkg subtotal=%.2f total_kes=%s free=%s",
            country_code.upper(),
            zone.value,
            weight,
            subtotal,
            main.total_kes,
            main.is_free_shipping,
        )

    return ShippingQuoteResponse(
        country_code=country_code.upper(),
        country_name=get_country_name(country_code),
        zone=zone.value,
        is_local=zone is ShippingZone.LOCAL,
        weight=weight,
        subtotal=subtotal,
        currency=currency,
        main_shipping=result_to_json(main),
        options=[result_to_json(option) for option in options],
        amount_needed_for_free_shipping=get_amount_needed_for_free_shipping(subtotal, zone),
    )
