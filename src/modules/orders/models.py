"""Order and OrderItem models.

Business rules implemented:
- Order number auto-generated as a display identifier
  (``ORD-YYYYMMDD-XXXXXX``), never changed afterwards.
- ``customer_id`` is a plain reference, not a foreign key: the customer
  may be deleted while its orders remain viewable through the snapshot
  columns.
- ``sub_total`` and ``grand_total`` are written by the pricing engine on
  every save and never accepted from callers.
- Entering ``Delivered`` stamps ``delivery_actual_date``; leaving it clears
  the stamp.
- Soft delete via ``deleted_at`` (inherited from SoftDeleteModel).
"""

from __future__ import annotations

import secrets
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from modules.core.models import BaseModel, SoftDeleteModel
from modules.orders.constants import (
    NOTES_MAX_LENGTH,
    TERMINAL_STATES,
    OrderStatus,
    PaymentStatus,
)
from modules.orders.pricing import number_of_days


def _money(**kwargs: Any) -> models.DecimalField:
    return models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0.00"), **kwargs
    )


class Order(SoftDeleteModel):
    """Order aggregate root.

    The UUIDv7 ``id`` is used for all internal references and API
    look-ups; ``order_number`` is for people and is not guaranteed unique.
    """

    order_number = models.CharField(max_length=20, editable=False, db_index=True)
    customer_id = models.UUIDField(db_index=True)

    # Customer snapshot, refreshed only on create or when customer_id changes.
    customer_name = models.CharField(max_length=255, null=True, blank=True)  # noqa: DJ01
    customer_phone = models.CharField(max_length=20, null=True, blank=True)  # noqa: DJ01
    customer_address_line1 = models.CharField(  # noqa: DJ01
        max_length=255, null=True, blank=True
    )
    customer_address_line2 = models.CharField(  # noqa: DJ01
        max_length=255, null=True, blank=True
    )
    customer_city = models.CharField(max_length=100, null=True, blank=True)  # noqa: DJ01
    customer_postal_code = models.CharField(  # noqa: DJ01
        max_length=20, null=True, blank=True
    )
    customer_google_maps_pin_link = models.CharField(  # noqa: DJ01
        max_length=500, null=True, blank=True
    )

    order_date = models.DateField()
    delivery_start = models.DateField()
    delivery_end = models.DateField()
    delivery_actual_date = models.DateField(null=True, blank=True)

    delivery_charge = _money(validators=[MinValueValidator(Decimal("0"))])
    discount = _money(validators=[MinValueValidator(Decimal("0"))])
    sub_total = _money(editable=False)
    grand_total = _money(editable=False)

    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING,
    )
    payment_status = models.CharField(
        max_length=10,
        choices=PaymentStatus.choices,
        default=PaymentStatus.PENDING,
    )
    notes = models.TextField(blank=True, default="", max_length=NOTES_MAX_LENGTH)

    class Meta:
        db_table = "orders"
        ordering = ["-order_date", "-created_at"]
        indexes = [
            models.Index(fields=["status"], name="orders_status_idx"),
            models.Index(
                fields=["customer_id", "order_date"], name="orders_customer_day_idx"
            ),
            models.Index(
                fields=["delivery_start", "status"], name="orders_delivery_idx"
            ),
        ]

    @property
    def number_of_days(self) -> int:
        return number_of_days(self.delivery_start, self.delivery_end)

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATES

    def actual_delivery_date_for(self, new_status: str) -> Optional[date]:
        """Return the ``delivery_actual_date`` that goes with ``new_status``.

        Entering ``Delivered`` records today unless the order was already
        delivered; any other status clears the date.
        """
        if new_status != OrderStatus.DELIVERED:
            return None
        if self.status == OrderStatus.DELIVERED and self.delivery_actual_date:
            return self.delivery_actual_date
        return timezone.localdate()

    @staticmethod
    def generate_order_number() -> str:
        """Generate a display order number: ``ORD-YYYYMMDD-XXXXXX``."""
        suffix = secrets.token_hex(3).upper()
        return f"ORD-{timezone.localdate():%Y%m%d}-{suffix}"

    def clean(self) -> None:
        super().clean()
        if (
            self.delivery_start
            and self.delivery_end
            and self.delivery_end < self.delivery_start
        ):
            raise ValidationError(
                {"delivery_end": "Delivery end date must not be before the start date."}
            )

    def save(self, *args: Any, **kwargs: Any) -> None:
        if not self.order_number:
            self.order_number = self.generate_order_number()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.order_number} ({self.status})"


class OrderItem(BaseModel):
    """Line of an order, priced per day over the delivery window.

    ``product_name`` and ``unit_price`` are copied from the catalog each
    time the order is saved. The whole item set of an order is replaced
    on every save, so rows are never edited in place.
    """

    order = models.ForeignKey(
        "orders.Order",
        on_delete=models.CASCADE,
        related_name="items",
    )
    position = models.PositiveSmallIntegerField(default=0)
    product_id = models.UUIDField()
    product_name = models.CharField(max_length=255)
    quantity_per_day = models.PositiveIntegerField(
        default=1,
        validators=[MinValueValidator(1)],
    )
    unit_price = models.DecimalField(max_digits=10, decimal_places=2)
    item_total = models.DecimalField(max_digits=12, decimal_places=2)

    class Meta:
        db_table = "order_items"
        ordering = ["position"]

    def clean(self) -> None:
        super().clean()
        if self.quantity_per_day is not None and self.quantity_per_day < 1:
            raise ValidationError(
                {"quantity_per_day": "Quantity per day must be at least 1."}
            )

    def __str__(self) -> str:
        return f"{self.product_name} x{self.quantity_per_day}/day ({self.item_total})"
