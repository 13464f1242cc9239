from datetime import date

from shipping_engine.models.domain import ServiceLevel, ShippingZone
from shipping_engine.services.rates import (
    delivery_window,
    format_delivery_estimate,
    get_estimated_delivery_date,
    get_shipping_info,
)


def test_delivery_windows() -> None:
    assert delivery_window(ShippingZone.ZONE_D) == (5, 8)
    assert delivery_window(ShippingZone.ZONE_D, ServiceLevel.ECONOMY) == (11, 15)
    assert delivery_window(ShippingZone.ZONE_D, ServiceLevel.PRIORITY) == (4, 6)


def test_format_delivery_estimate() -> None:
    assert format_delivery_estimate(ShippingZone.ZONE_F) == "7-12 business days"


def test_estimated_delivery_date_adds_processing_day() -> None:
    today = date(2024, 1, 1)

    assert get_estimated_delivery_date(ShippingZone.ZONE_D, today=today) == date(2024, 1, 10)
    assert get_estimated_delivery_date(ShippingZone.ZONE_D, ServiceLevel.PRIORITY, today) == date(2024, 1, 8)
    assert get_estimated_delivery_date(ShippingZone.ZONE_D, ServiceLevel.ECONOMY, today) == date(2024, 1, 15)


def test_shipping_info() -> None:
    info = get_shipping_info("de")

    assert info["zone"] == "zone_d"
    assert info["zone_name"] == "Europe"
    assert info["country_name"] == "Germany"
    assert info["estimated_delivery"] == "5-8 business days"
    assert info["free_shipping_threshold"] == 300
    assert info["currency"] == "USD"
