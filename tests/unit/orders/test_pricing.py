"""Unit tests for the order pricing engine."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from modules.orders.pricing import LineRequest, calculate_order_totals, number_of_days
from modules.products.catalog import CatalogPrice

pytestmark = pytest.mark.unit

MILK = uuid4()
GHEE = uuid4()

CATALOG = {
    MILK: CatalogPrice(MILK, "A2 Gir Cow Milk", Decimal("8.00")),
    GHEE: CatalogPrice(GHEE, "Bilona Ghee", Decimal("25.50")),
}


class TestNumberOfDays:
    def test_single_day_window(self):
        assert number_of_days(date(2025, 1, 1), date(2025, 1, 1)) == 1

    def test_inclusive_range(self):
        assert number_of_days(date(2025, 1, 1), date(2025, 1, 3)) == 3

    def test_swapped_dates_clamp_to_one(self):
        assert number_of_days(date(2025, 1, 10), date(2025, 1, 1)) == 1

    def test_crosses_month_and_leap_day(self):
        assert number_of_days(date(2024, 2, 28), date(2024, 3, 1)) == 3


class TestCalculateOrderTotals:
    def test_three_day_milk_order(self):
        totals = calculate_order_totals(
            [LineRequest(MILK, 2)],
            CATALOG,
            date(2025, 1, 1),
            date(2025, 1, 3),
            delivery_charge=Decimal("5"),
            discount=Decimal("2"),
        )

        assert totals.number_of_days == 3
        assert totals.items[0].item_total == Decimal("48.00")
        assert totals.sub_total == Decimal("48.00")
        assert totals.grand_total == Decimal("51.00")

    def test_sub_total_is_sum_of_lines(self):
        totals = calculate_order_totals(
            [LineRequest(MILK, 1), LineRequest(GHEE, 3)],
            CATALOG,
            date(2025, 1, 1),
            date(2025, 1, 7),
        )

        assert [line.item_total for line in totals.items] == [
            Decimal("56.00"),
            Decimal("535.50"),
        ]
        assert totals.sub_total == Decimal("591.50")
        assert totals.grand_total == totals.sub_total

    def test_lines_keep_request_order_and_snapshot_price(self):
        totals = calculate_order_totals(
            [LineRequest(GHEE, 1), LineRequest(MILK, 1)],
            CATALOG,
            date(2025, 1, 1),
            date(2025, 1, 1),
        )

        assert [line.product_name for line in totals.items] == [
            "Bilona Ghee",
            "A2 Gir Cow Milk",
        ]
        assert totals.items[0].unit_price == Decimal("25.50")

    def test_missing_product_prices_at_zero(self):
        ghost = uuid4()
        totals = calculate_order_totals(
            [LineRequest(MILK, 1), LineRequest(ghost, 4)],
            CATALOG,
            date(2025, 1, 1),
            date(2025, 1, 2),
        )

        missing = totals.items[1]
        assert missing.product_id == ghost
        assert missing.product_name == "Unknown Product"
        assert missing.unit_price == Decimal("0")
        assert missing.item_total == Decimal("0")
        assert totals.sub_total == Decimal("16.00")

    def test_discount_larger_than_total_goes_negative(self):
        totals = calculate_order_totals(
            [LineRequest(MILK, 1)],
            CATALOG,
            date(2025, 1, 1),
            date(2025, 1, 1),
            delivery_charge=Decimal("0"),
            discount=Decimal("20"),
        )

        assert totals.grand_total == Decimal("-12.00")

    def test_same_inputs_give_same_totals(self):
        args = ([LineRequest(MILK, 2)], CATALOG, date(2025, 1, 1), date(2025, 1, 5))
        assert calculate_order_totals(*args) == calculate_order_totals(*args)
