"""Unit tests for the delivery window resolver."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

import pytest

from modules.orders.delivery import (
    is_active_on,
    parse_delivery_date,
    resolve_deliveries,
)

pytestmark = pytest.mark.unit

TARGET = date(2025, 3, 10)


@dataclass
class StubOrder:
    customer_name: str | None
    status: str = "Confirmed"
    delivery_start: date = date(2025, 3, 1)
    delivery_end: date = date(2025, 3, 31)


class TestParseDeliveryDate:
    def test_parses_iso_day(self):
        assert parse_delivery_date("2025-03-10") == TARGET

    @pytest.mark.parametrize("value", ["10/03/2025", "2025-13-01", "", "tomorrow"])
    def test_rejects_other_formats(self, value):
        with pytest.raises(ValueError):
            parse_delivery_date(value)


class TestIsActiveOn:
    @pytest.mark.parametrize("status", ["Confirmed", "Processing", "Out for Delivery"])
    def test_in_flight_statuses_are_active(self, status):
        assert is_active_on(StubOrder("A", status=status), TARGET)

    @pytest.mark.parametrize(
        "status", ["Pending", "Delivered", "Cancelled", "Delivery Attempted"]
    )
    def test_other_statuses_are_not_active(self, status):
        assert not is_active_on(StubOrder("A", status=status), TARGET)

    def test_window_bounds_are_inclusive(self):
        order = StubOrder("A", delivery_start=TARGET, delivery_end=TARGET)
        assert is_active_on(order, TARGET)

    def test_outside_window(self):
        ended = StubOrder("A", delivery_end=date(2025, 3, 9))
        not_started = StubOrder("A", delivery_start=date(2025, 3, 11))
        assert not is_active_on(ended, TARGET)
        assert not is_active_on(not_started, TARGET)


class TestResolveDeliveries:
    def test_filters_and_sorts_by_customer_name(self):
        zeel = StubOrder("Zeel")
        asha = StubOrder("asha")
        ended = StubOrder("Bharat", delivery_end=date(2025, 3, 5))
        delivered = StubOrder("Chetna", status="Delivered")

        result = resolve_deliveries([zeel, ended, asha, delivered], TARGET)

        assert result == [asha, zeel]

    def test_missing_names_sort_first(self):
        unnamed = StubOrder(None)
        named = StubOrder("Asha")
        assert resolve_deliveries([named, unnamed], TARGET) == [unnamed, named]

    def test_long_window_still_covers_target(self):
        year_long = StubOrder(
            "A", delivery_start=date(2024, 4, 1), delivery_end=date(2025, 3, 31)
        )
        assert resolve_deliveries([year_long], TARGET) == [year_long]

    def test_empty_result_is_valid(self):
        assert resolve_deliveries([], TARGET) == []
