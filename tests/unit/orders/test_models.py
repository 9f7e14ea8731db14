"""Unit tests for Order model behaviour."""

from __future__ import annotations

import re
from datetime import date
from uuid import uuid4

import pytest
from freezegun import freeze_time

from django.core.exceptions import ValidationError

from modules.orders.models import Order

pytestmark = pytest.mark.unit


def _order(**fields) -> Order:
    defaults = {
        "customer_id": uuid4(),
        "order_date": date(2025, 1, 1),
        "delivery_start": date(2025, 1, 1),
        "delivery_end": date(2025, 1, 3),
    }
    return Order(**{**defaults, **fields})


class TestOrderNumber:
    @freeze_time("2025-01-02 06:00:00")
    def test_generated_on_first_save(self):
        order = _order()
        order.save()
        assert re.fullmatch(r"ORD-20250102-[0-9A-F]{6}", order.order_number)

    def test_not_regenerated_on_later_saves(self):
        order = _order()
        order.save()
        number = order.order_number
        order.notes = "Leave at the gate"
        order.save()
        order.refresh_from_db()
        assert order.order_number == number


class TestNumberOfDays:
    def test_inclusive_window(self):
        assert _order().number_of_days == 3

    def test_inverted_window_is_one(self):
        order = _order(delivery_start=date(2025, 1, 5), delivery_end=date(2025, 1, 1))
        assert order.number_of_days == 1


class TestActualDeliveryDate:
    @freeze_time("2025-02-14 09:00:00")
    def test_entering_delivered_stamps_today(self):
        order = _order(status="Out for Delivery")
        assert order.actual_delivery_date_for("Delivered") == date(2025, 2, 14)

    def test_staying_delivered_keeps_stamp(self):
        stamped = date(2025, 2, 1)
        order = _order(status="Delivered", delivery_actual_date=stamped)
        assert order.actual_delivery_date_for("Delivered") == stamped

    @pytest.mark.parametrize("status", ["Processing", "Cancelled", "Delivery Attempted"])
    def test_leaving_delivered_clears_stamp(self, status):
        order = _order(status="Delivered", delivery_actual_date=date(2025, 2, 1))
        assert order.actual_delivery_date_for(status) is None


class TestClean:
    def test_end_before_start_is_rejected(self):
        order = _order(delivery_start=date(2025, 1, 5), delivery_end=date(2025, 1, 1))
        with pytest.raises(ValidationError):
            order.clean()
