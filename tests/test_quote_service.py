import logging

import pytest

from shipping_engine.schemas.shipping import CartItemModel, ShippingRequest
from shipping_engine.services.quotes import service as quote_service


def _items(*quantities: int, price: float = 12.5) -> list[CartItemModel]:
    return [CartItemModel(id=f"ITEM{index}", quantity=qty, price=price) for index, qty in enumerate(quantities, 1)]


def test_international_quote_from_cart(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger=quote_service.__name__)

    response = quote_service.build_quote(ShippingRequest(country_code="de", items=_items(4)))

    assert response.country_code == "DE"
    assert response.country_name == "Germany"
    assert response.zone == "zone_d"
    assert response.is_local is False
    assert response.weight == pytest.approx(2.0)
    assert response.subtotal == pytest.approx(50.0)
    assert response.main_shipping.total_kes == 13710
    assert response.main_shipping.display == "$91.40"
    assert [option.service for option in response.options] == ["economy", "standard", "priority"]
    assert response.options[1].total_kes == 13710
    assert response.amount_needed_for_free_shipping == pytest.approx(250.0)
    assert "zone_d" in caplog.text


def test_explicit_subtotal_overrides_cart_total() -> None:
    response = quote_service.build_quote(ShippingRequest(country_code="DE", items=_items(1), subtotal=400))

    assert response.main_shipping.is_free_shipping is True
    assert response.main_shipping.total_kes == 0


def test_weight_without_items() -> None:
    response = quote_service.build_quote(ShippingRequest(country_code="US", weight=1.5))

    assert response.weight == 1.5
    assert response.main_shipping.total_kes == 13710


def test_default_weight_without_items_or_weight() -> None:
    response = quote_service.build_quote(ShippingRequest(country_code="US"))

    assert response.weight == 0.5
    assert response.main_shipping.total_kes == 9750


def test_default_item_weight_comes_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(quote_service.settings, "default_item_weight_kg", 1.0)

    response = quote_service.build_quote(ShippingRequest(country_code="US", items=_items(2)))

    assert response.weight == pytest.approx(2.0)


def test_local_quote_uses_flat_rate() -> None:
    response = quote_service.build_quote(
        ShippingRequest(country_code="KE", city="Nairobi", items=_items(10), subtotal=1_000_000)
    )

    assert response.is_local is True
    assert response.currency == "KES"
    assert response.main_shipping.kind == "local"
    assert response.main_shipping.flat_rate == 250
    assert response.main_shipping.is_free_shipping is False
    assert len(response.options) == 1
    assert response.amount_needed_for_free_shipping == 0


def test_blank_country_is_rejected() -> None:
    with pytest.raises(ValueError, match="Country code is required"):
        quote_service.build_quote(ShippingRequest(country_code="  "))
