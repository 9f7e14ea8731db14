"""Order pricing engine.

Pure functions: the caller passes the current catalog prices in, so the
same inputs always give the same totals. Lines whose product is missing
from the catalog are priced at zero instead of being dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import List, Mapping, Sequence
from uuid import UUID

from modules.products.catalog import CatalogPrice


@dataclass(frozen=True)
class LineRequest:
    product_id: UUID
    quantity_per_day: int


@dataclass(frozen=True)
class PricedLine:
    product_id: UUID
    product_name: str
    quantity_per_day: int
    unit_price: Decimal
    item_total: Decimal


@dataclass(frozen=True)
class OrderTotals:
    number_of_days: int
    items: List[PricedLine]
    sub_total: Decimal
    grand_total: Decimal


def number_of_days(start: date, end: date) -> int:
    """Inclusive length of the delivery window, never less than 1."""
    return max(1, (end - start).days + 1)


def price_line(line: LineRequest, price: CatalogPrice, days: int) -> PricedLine:
    return PricedLine(
        product_id=line.product_id,
        product_name=price.name,
        quantity_per_day=line.quantity_per_day,
        unit_price=price.unit_price,
        item_total=line.quantity_per_day * price.unit_price * days,
    )


def calculate_order_totals(
    lines: Sequence[LineRequest],
    catalog: Mapping[UUID, CatalogPrice],
    delivery_start: date,
    delivery_end: date,
    delivery_charge: Decimal = Decimal("0"),
    discount: Decimal = Decimal("0"),
) -> OrderTotals:
    """Price every line over the delivery window and total the order.

    ``grand_total`` is ``sub_total + delivery_charge - discount`` with no
    floor, so a large discount can make it negative.
    """
    days = number_of_days(delivery_start, delivery_end)
    items = [
        price_line(
            line,
            catalog.get(line.product_id) or CatalogPrice.missing(line.product_id),
            days,
        )
        for line in lines
    ]
    sub_total = sum((item.item_total for item in items), Decimal("0"))
    return OrderTotals(
        number_of_days=days,
        items=items,
        sub_total=sub_total,
        grand_total=sub_total + delivery_charge - discount,
    )
