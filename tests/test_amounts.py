"""Tests for contract total, deposit and remaining balance."""

from decimal import Decimal

import pytest

from contracts.amounts import compute_amounts, services_subtotal, store_subtotal
from contracts.models import Contract


def _contract(**fields) -> dict:
    data = {"services": [], "store_items": [], "travel_fee": 0, "total_amount": None}
    data.update(fields)
    return data


class TestLineItems:
    def test_service_prices_are_digit_strings(self) -> None:
        items = [
            {"price": "R$ 1.200", "quantity": 1},
            {"price": "R$ 300", "quantity": 2},
        ]
        assert services_subtotal(items) == 1800

    def test_service_quantity_defaults_to_one(self) -> None:
        assert services_subtotal([{"price": "R$ 450"}]) == 450

    def test_malformed_service_price_is_zero(self) -> None:
        assert services_subtotal([{"price": "a combinar", "quantity": 3}]) == 0

    def test_store_quantity_zero_counts_as_one(self) -> None:
        assert store_subtotal([{"price": 80, "quantity": 0}]) == 80

    def test_store_prices_are_numeric(self) -> None:
        assert store_subtotal([{"price": 49.9, "quantity": 2}]) == Decimal("99.8")

    def test_negative_quantity_propagates(self) -> None:
        assert services_subtotal([{"price": "100", "quantity": -1}]) == -100


class TestComputeAmounts:
    def test_merchandise_only(self) -> None:
        result = compute_amounts(_contract(store_items=[{"price": 200, "quantity": 1}], travel_fee=50))

        assert result.services_total == 0
        assert result.store_total == 200
        assert result.travel == 50
        assert result.total_amount == 250
        assert result.deposit_amount == 125
        assert result.remaining_amount == 125

    def test_service_and_merchandise(self) -> None:
        result = compute_amounts(_contract(
            services=[{"price": "R$ 1.000", "quantity": 1}],
            store_items=[{"price": 100, "quantity": 1}],
            travel_fee=50,
        ))

        assert result.services_total == 1000
        assert result.total_amount == 1150
        # traslado fuera de la base de la seña
        assert result.deposit_amount == 250
        assert result.remaining_amount == 900

    def test_persisted_total_recovers_package_value(self) -> None:
        result = compute_amounts(_contract(total_amount=500))

        assert result.services_total == 500
        assert result.total_amount == 500
        assert result.deposit_amount == 100
        assert result.remaining_amount == 400

    def test_persisted_total_minus_store_and_travel(self) -> None:
        result = compute_amounts(_contract(
            total_amount=1000,
            store_items=[{"price": 150, "quantity": 2}],
            travel_fee=100,
        ))

        assert result.services_total == 600
        assert result.total_amount == 1000
        assert result.deposit_amount == 270
        assert result.remaining_amount == 730

    def test_persisted_total_never_gives_negative_services(self) -> None:
        result = compute_amounts(_contract(total_amount=100, store_items=[{"price": 200, "quantity": 1}]))

        assert result.services_total == 0
        assert result.total_amount == 200
        assert result.deposit_amount == 100

    def test_line_items_win_over_persisted_total(self) -> None:
        result = compute_amounts(_contract(
            services=[{"price": "300", "quantity": 2}],
            total_amount=9999,
        ))

        assert result.services_total == 600
        assert result.total_amount == 600
        assert result.deposit_amount == 120

    def test_form_snapshot_cart_is_used_when_services_missing(self) -> None:
        result = compute_amounts(_contract(form_snapshot={"cartItems": [{"price": "R$ 800", "quantity": 1}]}))

        assert result.services_total == 800
        assert result.deposit_amount == 160

    def test_empty_contract(self) -> None:
        result = compute_amounts({})

        assert result.total_amount == 0
        assert result.deposit_amount == 0
        assert result.remaining_amount == 0

    def test_travel_only_has_no_deposit(self) -> None:
        result = compute_amounts(_contract(travel_fee=80))

        assert result.total_amount == 80
        assert result.deposit_amount == 0
        assert result.remaining_amount == 80

    def test_total_rounds_half_to_even(self) -> None:
        result = compute_amounts(_contract(store_items=[{"price": 10.5, "quantity": 1}]))

        assert result.total_amount == 10
        assert result.deposit_amount == 6
        assert result.remaining_amount == 4

    def test_deposit_never_exceeds_total(self) -> None:
        result = compute_amounts(_contract(store_items=[{"price": 0.4, "quantity": 1}]))

        assert result.total_amount == 0
        assert result.deposit_amount == 0
        assert result.remaining_amount == 0

    def test_camel_case_document(self) -> None:
        result = compute_amounts({
            "services": [],
            "storeItems": [{"price": "200", "quantity": 1}],
            "travelFee": "50",
        })

        assert result.total_amount == 250
        assert result.deposit_amount == 125

    def test_model_instance(self) -> None:
        contract = Contract(
            client_name="Ana",
            services=[{"price": "R$ 2.000", "quantity": 1}],
            travel_fee=Decimal("120.00"),
        )
        result = compute_amounts(contract)

        assert result.total_amount == 2120
        assert result.deposit_amount == 400
        assert result.remaining_amount == 1720

    def test_as_dict(self) -> None:
        data = compute_amounts(_contract(total_amount=500)).as_dict()

        assert set(data) == {
            "services_total", "store_total", "travel",
            "total_amount", "deposit_amount", "remaining_amount",
        }


@pytest.mark.parametrize("services_price", [0, 1, 999, 1500])
@pytest.mark.parametrize("store_price", [0, 1, 75, 333])
@pytest.mark.parametrize("travel", [0, 1, 45])
def test_deposit_plus_remaining_is_total(services_price: int, store_price: int, travel: int) -> None:
    contract = _contract(
        services=[{"price": str(services_price), "quantity": 1}] if services_price else [],
        store_items=[{"price": store_price, "quantity": 1}] if store_price else [],
        travel_fee=travel,
    )
    result = compute_amounts(contract)

    assert result.deposit_amount + result.remaining_amount == result.total_amount
