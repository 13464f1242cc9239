"""Cart weight and subtotal aggregation."""

from __future__ import annotations

import math
from typing import Iterable, Optional

from ...models.domain import CartItemWithWeight, Dimensions

DEFAULT_ITEM_WEIGHT_KG = 0.5
VOLUMETRIC_DIVISOR = 5000


def _check_item(item: CartItemWithWeight) -> None:
    if item.quantity < 0:
        raise ValueError(f"quantity must be >= 0 for item '{item.id}'")
    if not math.isfinite(item.price) or item.price < 0:
        raise ValueError(f"price must be a finite number >= 0 for item '{item.id}'")
    if item.weight is not None and (not math.isfinite(item.weight) or item.weight < 0):
        raise ValueError(f"weight must be a finite number >= 0 for item '{item.id}'")


def calculate_total_weight(
    items: Iterable[CartItemWithWeight],
    default_weight: float = DEFAULT_ITEM_WEIGHT_KG,
) -> float:
    """Sum per-unit weights across the cart.

    Items without a declared weight count as ``default_weight`` kilograms per
    unit.
    """
    if not math.isfinite(default_weight) or default_weight < 0:
        raise ValueError("default_weight must be a finite number >= 0")

    total = 0.0
    for item in items:
        _check_item(item)
        weight = item.weight if item.weight is not None else default_weight
        total += weight * item.quantity
    return total


def calculate_subtotal(items: Iterable[CartItemWithWeight]) -> float:
    subtotal = 0.0
    for item in items:
        _check_item(item)
        subtotal += item.price * item.quantity
    return subtotal


def calculate_volumetric_weight(dimensions: Dimensions) -> float:
    """Dimensional weight in kilograms for a parcel measured in centimetres."""

    sides = (dimensions.length, dimensions.width, dimensions.height)
    if not all(math.isfinite(side) and side >= 0 for side in sides):
        raise ValueError("dimensions must be finite numbers >= 0")
    volume = dimensions.length * dimensions.width * dimensions.height
    return volume / VOLUMETRIC_DIVISOR


def get_billable_weight(actual_weight: float, dimensions: Optional[Dimensions] = None) -> float:
    if not math.isfinite(actual_weight) or actual_weight < 0:
        raise ValueError("actual_weight must be a finite number >= 0")
    if dimensions is None:
        return actual_weight
    return max(actual_weight, calculate_volumetric_weight(dimensions))
