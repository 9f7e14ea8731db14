"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses. Storage failures (``django.db.DatabaseError``)
are not wrapped and propagate unchanged.
"""

from __future__ import annotations

from datetime import date


class OrderNotFound(Exception):
    """The requested order does not exist or has been soft-deleted."""


class InvalidOrderStatus(Exception):
    """The status is not allowed for the operation that was attempted."""


class InvalidDeliveryWindow(Exception):
    """The delivery end date falls before the start date."""


class InvalidPhoneNumber(Exception):
    """A lookup phone number has fewer than ten digits."""


class DuplicateOrderItem(Exception):
    """A product is already on another order for the same customer and day."""

    def __init__(self, product_name: str, order_date: date) -> None:
        self.product_name = product_name
        self.order_date = order_date
        super().__init__(
            f'Item "{product_name}" is already included in an order for this '
            f"customer on {order_date:%B} {order_date.day}, {order_date.year}. "
            "Please edit the existing order or remove this item."
        )
