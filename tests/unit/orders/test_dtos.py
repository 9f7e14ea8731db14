"""Unit tests for order DTO validation."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest
from pydantic import ValidationError

from modules.orders.dtos import CreateOrderDTO, OrderStatusEnum, UpdateOrderDTO

pytestmark = pytest.mark.unit


def _payload(**overrides):
    return {
        "customer_id": uuid4(),
        "items": [{"product_id": uuid4(), "quantity_per_day": 2}],
        "delivery_start": date(2025, 1, 1),
        "delivery_end": date(2025, 1, 3),
        **overrides,
    }


class TestCreateOrderDTO:
    def test_defaults(self):
        dto = CreateOrderDTO(**_payload(order_date=date(2025, 1, 1)))
        assert dto.status == OrderStatusEnum.PENDING
        assert dto.payment_status == "Pending"
        assert dto.delivery_charge == Decimal("0")
        assert dto.notes == ""

    def test_order_date_defaults_to_today(self):
        from django.utils import timezone

        assert CreateOrderDTO(**_payload()).order_date == timezone.localdate()

    def test_requires_at_least_one_item(self):
        with pytest.raises(ValidationError, match="at least one item"):
            CreateOrderDTO(**_payload(items=[]))

    def test_rejects_zero_quantity(self):
        items = [{"product_id": uuid4(), "quantity_per_day": 0}]
        with pytest.raises(ValidationError, match="at least 1"):
            CreateOrderDTO(**_payload(items=items))

    def test_rejects_repeated_product(self):
        pid = uuid4()
        items = [
            {"product_id": pid, "quantity_per_day": 1},
            {"product_id": pid, "quantity_per_day": 2},
        ]
        with pytest.raises(ValidationError, match="Duplicate product"):
            CreateOrderDTO(**_payload(items=items))

    def test_rejects_end_before_start(self):
        with pytest.raises(ValidationError, match="end date"):
            CreateOrderDTO(**_payload(delivery_end=date(2024, 12, 31)))

    def test_same_day_window_is_allowed(self):
        dto = CreateOrderDTO(**_payload(delivery_end=date(2025, 1, 1)))
        assert dto.delivery_end == dto.delivery_start

    @pytest.mark.parametrize("field", ["delivery_charge", "discount"])
    def test_rejects_negative_money(self, field):
        with pytest.raises(ValidationError):
            CreateOrderDTO(**_payload(**{field: Decimal("-1")}))

    def test_rejects_long_notes(self):
        with pytest.raises(ValidationError):
            CreateOrderDTO(**_payload(notes="x" * 501))

    def test_rejects_unknown_status(self):
        with pytest.raises(ValidationError):
            CreateOrderDTO(**_payload(status="Shipped"))

    def test_is_immutable(self):
        dto = CreateOrderDTO(**_payload())
        with pytest.raises(ValidationError):
            dto.notes = "changed"


class TestUpdateOrderDTO:
    def test_empty_patch_is_valid(self):
        assert UpdateOrderDTO().model_dump(exclude_unset=True) == {}

    def test_only_sent_fields_are_set(self):
        dto = UpdateOrderDTO(status="Delivered")
        assert dto.model_dump(exclude_unset=True) == {"status": OrderStatusEnum.DELIVERED}

    def test_empty_item_list_is_rejected(self):
        with pytest.raises(ValidationError):
            UpdateOrderDTO(items=[])

    def test_window_checked_when_both_bounds_sent(self):
        with pytest.raises(ValidationError):
            UpdateOrderDTO(delivery_start=date(2025, 1, 5), delivery_end=date(2025, 1, 1))

    def test_single_bound_is_left_to_the_service(self):
        # Checked against the stored window in OrderService.update_order.
        assert UpdateOrderDTO(delivery_end=date(2020, 1, 1)).delivery_end == date(2020, 1, 1)
