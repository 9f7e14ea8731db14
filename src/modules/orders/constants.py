"""Order domain constants.

Status values are stored exactly as they are displayed. Any status may
move to any other; only the delivery-worker endpoint restricts the
target set.
"""

from django.db import models


class OrderStatus(models.TextChoices):
    PENDING = "Pending", "Pending"
    CONFIRMED = "Confirmed", "Confirmed"
    PROCESSING = "Processing", "Processing"
    OUT_FOR_DELIVERY = "Out for Delivery", "Out for Delivery"
    DELIVERED = "Delivered", "Delivered"
    CANCELLED = "Cancelled", "Cancelled"
    DELIVERY_ATTEMPTED = "Delivery Attempted", "Delivery Attempted"


class PaymentStatus(models.TextChoices):
    PENDING = "Pending", "Pending"
    PAID = "Paid", "Paid"
    FAILED = "Failed", "Failed"


TERMINAL_STATES: frozenset[str] = frozenset(
    {OrderStatus.DELIVERED.value, OrderStatus.CANCELLED.value}
)

# Orders in these states show up on the daily delivery list.
ACTIVE_DELIVERY_STATUSES: tuple[str, ...] = (
    OrderStatus.CONFIRMED.value,
    OrderStatus.PROCESSING.value,
    OrderStatus.OUT_FOR_DELIVERY.value,
)

DELIVERY_WORKER_STATUSES: frozenset[str] = frozenset(
    {
        OrderStatus.OUT_FOR_DELIVERY.value,
        OrderStatus.DELIVERED.value,
        OrderStatus.DELIVERY_ATTEMPTED.value,
        OrderStatus.CANCELLED.value,
    }
)

UNKNOWN_CUSTOMER_NAME = "Unknown Customer"

MIN_LOOKUP_PHONE_DIGITS = 10

NOTES_MAX_LENGTH = 500
