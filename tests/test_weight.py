import pytest

from shipping_engine.models.domain import CartItemWithWeight, Dimensions
from shipping_engine.services.rates import (
    calculate_subtotal,
    calculate_total_weight,
    calculate_volumetric_weight,
    get_billable_weight,
)


def _item(item_id: str, quantity: int, price: float = 10.0, weight: float | None = None) -> CartItemWithWeight:
    return CartItemWithWeight(id=item_id, quantity=quantity, price=price, weight=weight)


def test_default_weight_applies_per_unit() -> None:
    assert calculate_total_weight([_item("A", 2)], default_weight=0.5) == pytest.approx(1.0)


def test_declared_weights_and_defaults_combine() -> None:
    items = [_item("A", 3, weight=1.2), _item("B", 1)]

    assert calculate_total_weight(items) == pytest.approx(4.1)


def test_zero_weight_is_not_replaced_by_default() -> None:
    assert calculate_total_weight([_item("A", 4, weight=0.0)]) == 0


def test_custom_default_weight() -> None:
    assert calculate_total_weight([_item("A", 2), _item("B", 1)], default_weight=2.0) == pytest.approx(6.0)


def test_empty_cart_weighs_nothing() -> None:
    assert calculate_total_weight([]) == 0


def test_subtotal() -> None:
    assert calculate_subtotal([_item("A", 2, price=10), _item("B", 1, price=5.5)]) == pytest.approx(25.5)


@pytest.mark.parametrize(
    "item",
    [
        CartItemWithWeight(id="A", quantity=-1, price=1),
        CartItemWithWeight(id="A", quantity=1, price=-1),
        CartItemWithWeight(id="A", quantity=1, price=1, weight=-0.5),
        CartItemWithWeight(id="A", quantity=1, price=float("nan")),
        CartItemWithWeight(id="A", quantity=1, price=1, weight=float("inf")),
    ],
)
def test_negative_item_values_are_rejected(item: CartItemWithWeight) -> None:
    with pytest.raises(ValueError):
        calculate_total_weight([item])


def test_volumetric_and_billable_weight() -> None:
    parcel = Dimensions(length=50, width=40, height=30)

    assert calculate_volumetric_weight(parcel) == pytest.approx(12.0)
    assert get_billable_weight(2.0, parcel) == pytest.approx(12.0)
    assert get_billable_weight(15.0, parcel) == pytest.approx(15.0)
    assert get_billable_weight(2.0) == 2.0
