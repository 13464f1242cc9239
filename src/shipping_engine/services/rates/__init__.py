"""Rate calculator: international, tiered and flat local pricing."""

from .calculator import (
    calculate_shipping,
    get_amount_needed_for_free_shipping,
    get_shipping_options,
    is_eligible_for_free_shipping,
)
from .delivery import delivery_window, format_delivery_estimate, get_estimated_delivery_date
from .info import get_local_shipping_info, get_shipping_info
from .local import calculate_local_shipping, get_local_shipping_options
from .rules import apply_shipping_rules
from .weight import (
    calculate_subtotal,
    calculate_total_weight,
    calculate_volumetric_weight,
    get_billable_weight,
)

__all__ = [
    "apply_shipping_rules",
    "calculate_local_shipping",
    "calculate_shipping",
    "calculate_subtotal",
    "calculate_total_weight",
    "calculate_volumetric_weight",
    "delivery_window",
    "format_delivery_estimate",
    "get_amount_needed_for_free_shipping",
    "get_billable_weight",
    "get_estimated_delivery_date",
    "get_local_shipping_info",
    "get_local_shipping_options",
    "get_shipping_info",
    "get_shipping_options",
    "is_eligible_for_free_shipping",
]
