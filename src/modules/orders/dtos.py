"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

- ``OrderItemDTO``: one product and its per-day quantity.
- ``CreateOrderDTO``: a complete order draft.
- ``UpdateOrderDTO``: a partial patch; unset fields are left untouched.

Prices, totals and snapshots are never accepted from callers; the
service computes them.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import StrEnum
from typing import Annotated, List, Optional, Self
from uuid import UUID

from django.utils import timezone
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from modules.orders.constants import NOTES_MAX_LENGTH

Money = Annotated[Decimal, Field(ge=0, decimal_places=2)]

# ---------------------------------------------------------------------------
# Enums (framework-agnostic, NOT Django TextChoices)
# ---------------------------------------------------------------------------


class OrderStatusEnum(StrEnum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    PROCESSING = "Processing"
    OUT_FOR_DELIVERY = "Out for Delivery"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"
    DELIVERY_ATTEMPTED = "Delivery Attempted"


class PaymentStatusEnum(StrEnum):
    PENDING = "Pending"
    PAID = "Paid"
    FAILED = "Failed"


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class OrderItemDTO(BaseModel):
    """One order line as sent by the client.

    ``unit_price`` and ``item_total`` are resolved by the Service Layer
    from the product catalog.
    """

    model_config = ConfigDict(frozen=True)

    product_id: UUID
    quantity_per_day: int

    @field_validator("quantity_per_day")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantity per day must be at least 1.")
        return v


def _check_items(items: Optional[List[OrderItemDTO]]) -> Optional[List[OrderItemDTO]]:
    if items is None:
        return items
    if not items:
        raise ValueError("Order must have at least one item.")
    product_ids = [item.product_id for item in items]
    if len(product_ids) != len(set(product_ids)):
        raise ValueError("Duplicate product IDs are not allowed in the same order.")
    return items


class CreateOrderDTO(BaseModel):
    """Immutable DTO for order creation requests.

    Validates:
    - ``items`` holds at least one line and no product twice.
    - ``delivery_end`` is not before ``delivery_start``.
    - charges are non-negative and notes are at most 500 characters.
    """

    model_config = ConfigDict(frozen=True)

    customer_id: UUID
    items: List[OrderItemDTO]
    delivery_start: date
    delivery_end: date
    order_date: date = Field(default_factory=timezone.localdate)
    delivery_charge: Money = Decimal("0")
    discount: Money = Decimal("0")
    status: OrderStatusEnum = OrderStatusEnum.PENDING
    payment_status: PaymentStatusEnum = PaymentStatusEnum.PENDING
    notes: str = Field(default="", max_length=NOTES_MAX_LENGTH)

    @field_validator("items")
    @classmethod
    def items_are_valid(cls, v: List[OrderItemDTO]) -> List[OrderItemDTO]:
        return _check_items(v)

    @model_validator(mode="after")
    def window_is_ordered(self) -> Self:
        if self.delivery_end < self.delivery_start:
            raise ValueError("Delivery end date must not be before the start date.")
        return self


class UpdateOrderDTO(BaseModel):
    """Immutable DTO for order update requests.

    Every field is optional. ``items``, when present, replaces the whole
    item list. When both window bounds are sent they must be ordered.
    """

    model_config = ConfigDict(frozen=True)

    customer_id: Optional[UUID] = None
    items: Optional[List[OrderItemDTO]] = None
    order_date: Optional[date] = None
    delivery_start: Optional[date] = None
    delivery_end: Optional[date] = None
    delivery_charge: Optional[Money] = None
    discount: Optional[Money] = None
    status: Optional[OrderStatusEnum] = None
    payment_status: Optional[PaymentStatusEnum] = None
    notes: Optional[str] = Field(default=None, max_length=NOTES_MAX_LENGTH)

    @field_validator("items")
    @classmethod
    def items_are_valid(
        cls, v: Optional[List[OrderItemDTO]]
    ) -> Optional[List[OrderItemDTO]]:
        return _check_items(v)

    @model_validator(mode="after")
    def window_is_ordered(self) -> Self:
        if (
            self.delivery_start is not None
            and self.delivery_end is not None
            and self.delivery_end < self.delivery_start
        ):
            raise ValueError("Delivery end date must not be before the start date.")
        return self


class DeliveryStatusDTO(BaseModel):
    """Status change requested from the delivery list."""

    model_config = ConfigDict(frozen=True)

    status: OrderStatusEnum
