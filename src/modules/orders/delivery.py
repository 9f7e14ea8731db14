"""Delivery window resolver.

An order is on the delivery list for a day when the day falls inside
``[delivery_start, delivery_end]`` and the order is still in flight
(Confirmed, Processing or Out for Delivery). Delivered and cancelled
orders drop out even when their window covers the day.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, Iterable, List

from modules.orders.constants import ACTIVE_DELIVERY_STATUSES

if TYPE_CHECKING:
    from modules.orders.models import Order

DELIVERY_DATE_FORMAT = "%Y-%m-%d"


def parse_delivery_date(value: str) -> date:
    """Parse a ``yyyy-MM-dd`` string; raises ``ValueError`` otherwise."""
    return datetime.strptime(value, DELIVERY_DATE_FORMAT).date()


def is_active_on(order: Order, target: date) -> bool:
    return (
        order.status in ACTIVE_DELIVERY_STATUSES
        and order.delivery_start <= target <= order.delivery_end
    )


def resolve_deliveries(candidates: Iterable[Order], target: date) -> List[Order]:
    """Keep the orders active on ``target``, sorted by customer name.

    ``candidates`` may be a superset (the store can only narrow on one
    date bound); the sort is stable so equal names keep their order.
    """
    active = [order for order in candidates if is_active_on(order, target)]
    return sorted(active, key=lambda order: (order.customer_name or "").casefold())
