"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.
Writes are wrapped in ``transaction.atomic()`` so the Order aggregate
(order row + item rows) is persisted all-or-nothing.

Updates do not lock the row: two concurrent edits of the same order
resolve as last-write-wins.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Sequence
from uuid import UUID

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.orders.models import Order, OrderItem
from modules.orders.pricing import PricedLine
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


def _alive_orders():
    return Order.objects.alive().prefetch_related("items")


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Create / Update (aggregate root + children)
    # ------------------------------------------------------------------

    @transaction.atomic
    def create(self, data: Dict[str, Any], items: Sequence[PricedLine]) -> Order:
        order = Order(**data)
        order.save()
        self._replace_items(order, items)

        logger.info(
            "order.persisted",
            order_id=str(order.id),
            order_number=order.order_number,
            item_count=len(items),
        )
        return self.get_by_id(str(order.id)) or order

    @transaction.atomic
    def update(
        self, id: UUID, data: Dict[str, Any], items: Sequence[PricedLine]
    ) -> Order:
        order = Order.objects.alive().filter(id=id).first()
        if not order:
            raise Order.DoesNotExist(f"Order {id} not found.")

        for field, value in data.items():
            setattr(order, field, value)
        order.save()
        self._replace_items(order, items)

        logger.info("order.updated", order_id=str(id), fields=sorted(data))
        return self.get_by_id(str(id)) or order

    def _replace_items(self, order: Order, items: Sequence[PricedLine]) -> None:
        OrderItem.objects.filter(order=order).delete()
        OrderItem.objects.bulk_create(
            OrderItem(
                order=order,
                position=position,
                product_id=line.product_id,
                product_name=line.product_name,
                quantity_per_day=line.quantity_per_day,
                unit_price=line.unit_price,
                item_total=line.item_total,
            )
            for position, line in enumerate(items)
        )

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, id: str) -> Optional[Order]:
        """Retrieve a live order with its items prefetched.

        Returns ``None`` for non-existent, deleted or invalid IDs.
        """
        try:
            return _alive_orders().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Order]:
        """List orders with optional filters.

        Supported filter keys include ``status``, ``customer_id`` and
        ``order_date__range``.
        """
        queryset = _alive_orders()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    def queryset(self):
        """Unevaluated live-order queryset for DRF filtering and pagination."""
        return _alive_orders()

    def list_for_customer(self, customer_id: UUID) -> List[Order]:
        return list(
            _alive_orders()
            .filter(customer_id=customer_id)
            .order_by("-order_date", "-created_at")
        )

    def list_for_customer_on_date(
        self, customer_id: UUID, order_date: date
    ) -> List[Order]:
        return list(
            _alive_orders().filter(customer_id=customer_id, order_date=order_date)
        )

    def delivery_candidates(
        self, target: date, statuses: Sequence[str]
    ) -> List[Order]:
        return list(
            _alive_orders().filter(delivery_start__lte=target, status__in=statuses)
        )

    # ------------------------------------------------------------------
    # Save / Delete (IRepository contract)
    # ------------------------------------------------------------------

    @transaction.atomic
    def save(self, entity: Order) -> Order:
        entity.save()
        logger.info("order.saved", order_id=str(entity.id))
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        """Soft-delete an order by ID."""
        order = self.get_by_id(id)
        if not order:
            return False
        order.delete()
        logger.info("order.soft_deleted", order_id=str(id))
        return True
