import pytest

from shipping_engine.models.domain import ServiceLevel, ShippingZone
from shipping_engine.services.rates import (
    calculate_shipping,
    get_amount_needed_for_free_shipping,
    is_eligible_for_free_shipping,
)
from shipping_engine.services.rates.calculator import round_half_up


def test_base_weight_is_included_in_base_rate() -> None:
    result = calculate_shipping(0.5, "US", 0)

    assert result.zone is ShippingZone.ZONE_E
    assert result.base_rate == 50
    assert result.weight_charge == 0
    # 50 USD -> 7500 KES, +20% fuel, +750 KES minimum insurance
    assert result.fuel_surcharge == pytest.approx(1500)
    assert result.insurance == pytest.approx(750)
    assert result.total_kes == 9750
    assert result.total_usd == pytest.approx(65.0)


def test_light_parcels_pay_only_the_base_rate() -> None:
    assert calculate_shipping(0.1, "US", 0).total_kes == calculate_shipping(0.5, "US", 0).total_kes
    assert calculate_shipping(0.0, "US", 0).weight_charge == 0


def test_weight_charge_covers_only_the_overage() -> None:
    result = calculate_shipping(1.5, "US", 0)

    assert result.weight_charge == pytest.approx(22.0)
    assert result.total_kes == 13710
    assert result.total_usd == pytest.approx(91.4)


def test_germany_end_to_end() -> None:
    result = calculate_shipping(2, "DE", 50)

    assert result.zone is ShippingZone.ZONE_D
    assert result.is_free_shipping is False
    assert result.savings is None
    assert result.base_rate == 45
    assert result.weight_charge == pytest.approx(27.0)
    assert result.fuel_surcharge == pytest.approx(2160.0)
    assert result.insurance == pytest.approx(750.0)
    assert result.total_kes == 13710
    assert result.total_usd == pytest.approx(91.4)
    assert result.currency == "USD"
    assert result.estimated_days == "5-8 days"
    assert result.courier == "DHL/FedEx/UPS"
    assert result.service is ServiceLevel.STANDARD


def test_free_shipping_clamps_totals_and_reports_savings() -> None:
    result = calculate_shipping(1, "DE", 300)

    assert result.is_free_shipping is True
    assert result.total_kes == 0
    assert result.total_usd == 0
    # 54 USD -> 8100 KES + 1620 fuel + 750 insurance
    assert result.savings == 10470


@pytest.mark.parametrize(
    ("code", "threshold"),
    [("TZ", 150), ("NG", 200), ("JP", 250), ("DE", 300), ("US", 350), ("AU", 350)],
)
def test_free_shipping_thresholds_per_zone(code: str, threshold: float) -> None:
    at_threshold = calculate_shipping(1, code, threshold)
    below = calculate_shipping(1, code, threshold - 0.01)

    assert at_threshold.is_free_shipping is True
    assert at_threshold.total_kes == 0
    assert at_threshold.savings == below.total_kes
    assert below.is_free_shipping is False


def test_african_and_asian_orders_below_threshold_pay_shipping() -> None:
    assert calculate_shipping(1, "TZ", 120).is_free_shipping is False
    assert calculate_shipping(1, "NG", 180).is_free_shipping is False
    assert calculate_shipping(1, "JP", 220).total_kes > 0
    assert get_amount_needed_for_free_shipping(120, ShippingZone.ZONE_A) == pytest.approx(30)
    assert get_amount_needed_for_free_shipping(220, ShippingZone.ZONE_C) == pytest.approx(30)


@pytest.mark.parametrize(
    ("weight", "subtotal"),
    [(float("inf"), 0), (float("nan"), 0), (1, float("inf")), (1, float("nan")), (1e308, 0)],
)
def test_non_finite_inputs_are_rejected(weight: float, subtotal: float) -> None:
    with pytest.raises(ValueError):
        calculate_shipping(weight, "US", subtotal)


def test_insurance_grows_with_large_orders() -> None:
    result = calculate_shipping(0.5, "US", 100_000)

    assert result.insurance == pytest.approx(1000)
    assert result.savings == 7500 + 1500 + 1000


def test_unknown_country_is_priced_as_rest_of_africa() -> None:
    result = calculate_shipping(0.5, "XX", 0)

    assert result.zone is ShippingZone.ZONE_B
    assert result.total_kes == 7950
    assert result.total_usd == pytest.approx(53.0)


def test_local_zone_is_not_converted_and_never_free() -> None:
    result = calculate_shipping(2, "KE", 0)

    assert result.zone is ShippingZone.LOCAL
    assert result.currency == "KES"
    # 5 + 1.5 * 2 = 8 KES, +1.6 fuel, +50 KES minimum insurance
    assert result.fuel_surcharge == pytest.approx(1.6)
    assert result.insurance == pytest.approx(50)
    assert result.total_kes == 60
    assert result.total_usd == pytest.approx(0.4)

    rich = calculate_shipping(2, "KE", 10_000_000)
    assert rich.is_free_shipping is False
    assert rich.savings is None
    assert rich.total_kes > 0


@pytest.mark.parametrize(("weight", "subtotal"), [(-0.1, 0), (1, -5)])
def test_negative_inputs_are_rejected(weight: float, subtotal: float) -> None:
    with pytest.raises(ValueError):
        calculate_shipping(weight, "US", subtotal)


def test_free_shipping_helpers() -> None:
    assert is_eligible_for_free_shipping(300, ShippingZone.ZONE_D) is True
    assert is_eligible_for_free_shipping(299.99, ShippingZone.ZONE_D) is False
    assert is_eligible_for_free_shipping(1_000_000, ShippingZone.LOCAL) is False
    assert get_amount_needed_for_free_shipping(50, ShippingZone.ZONE_D) == 250
    assert get_amount_needed_for_free_shipping(500, ShippingZone.ZONE_D) == 0
    assert get_amount_needed_for_free_shipping(50, ShippingZone.LOCAL) == 0


def test_round_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(0.125, 2) == pytest.approx(0.13)
