"""Order service layer (Use Cases).

Orchestrates order creation and update: every save re-prices the items
against the live catalog, refreshes the customer snapshot when it is
stale, and keeps ``delivery_actual_date`` in step with the status.

Business rules enforced:
- Totals are always recomputed; callers never supply prices or totals.
- The customer snapshot is taken on create and refreshed on update only
  when the customer changes or the stored name is missing.
- Entering ``Delivered`` stamps today; leaving it clears the stamp.
- A product may appear only once across a customer's orders for a given
  order date (checked by ``ensure_no_duplicate_items``).
- The delivery list holds in-flight orders whose window covers the day.

Storage errors (``django.db.DatabaseError``) propagate to the caller
unchanged.
"""

from __future__ import annotations

import re
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence, Tuple, Union
from uuid import UUID

import structlog
from django.db import transaction
from django.utils import timezone

from modules.customers.exceptions import CustomerNotFound
from modules.orders.constants import (
    ACTIVE_DELIVERY_STATUSES,
    DELIVERY_WORKER_STATUSES,
    MIN_LOOKUP_PHONE_DIGITS,
    OrderStatus,
)
from modules.orders.delivery import parse_delivery_date, resolve_deliveries
from modules.orders.dtos import UpdateOrderDTO
from modules.orders.exceptions import (
    DuplicateOrderItem,
    InvalidDeliveryWindow,
    InvalidOrderStatus,
    InvalidPhoneNumber,
    OrderNotFound,
)
from modules.orders.pricing import LineRequest, OrderTotals, calculate_order_totals
from modules.orders.snapshots import resolve_customer_snapshot, snapshot_is_stale
from modules.products.catalog import ProductCatalog

if TYPE_CHECKING:
    from modules.customers.models import Customer
    from modules.customers.repositories.interfaces import ICustomerRepository
    from modules.orders.dtos import CreateOrderDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

# Plain fields copied from a patch onto the order as they are.
_PATCHABLE_FIELDS = (
    "customer_id",
    "order_date",
    "delivery_start",
    "delivery_end",
    "delivery_charge",
    "discount",
    "status",
    "payment_status",
    "notes",
)


class OrderService:
    """Application service for Order use-cases.

    Receives repositories via constructor injection.
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        customer_repository: ICustomerRepository,
        product_repository: IProductRepository,
    ) -> None:
        self._order_repo = order_repository
        self._customer_repo = customer_repository
        self._catalog = ProductCatalog(product_repository)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_order(self, dto: CreateOrderDTO) -> Order:
        """Price, snapshot and persist a new order.

        The order number, creation and update timestamps are set here and
        never change afterwards (except ``updated_at``).
        """
        log = logger.bind(customer_id=str(dto.customer_id))

        lines = [LineRequest(i.product_id, i.quantity_per_day) for i in dto.items]
        totals = self._price(
            lines,
            dto.delivery_start,
            dto.delivery_end,
            dto.delivery_charge,
            dto.discount,
        )
        snapshot = resolve_customer_snapshot(self._customer_repo, dto.customer_id)

        data: Dict[str, Any] = {
            "customer_id": dto.customer_id,
            "order_date": dto.order_date,
            "delivery_start": dto.delivery_start,
            "delivery_end": dto.delivery_end,
            "delivery_charge": dto.delivery_charge,
            "discount": dto.discount,
            "status": str(dto.status),
            "payment_status": str(dto.payment_status),
            "notes": dto.notes,
            "sub_total": totals.sub_total,
            "grand_total": totals.grand_total,
            "delivery_actual_date": (
                timezone.localdate() if dto.status == OrderStatus.DELIVERED else None
            ),
            **snapshot.as_fields(),
        }
        order = self._order_repo.create(data, totals.items)

        log.info(
            "order.created",
            order_id=str(order.id),
            order_number=order.order_number,
            number_of_days=totals.number_of_days,
            grand_total=str(totals.grand_total),
        )
        return order

    def update_order(self, order_id: Union[str, UUID], dto: UpdateOrderDTO) -> Order:
        """Merge ``dto`` over the stored order and re-price it.

        Without ``items`` in the patch the stored lines are re-priced, so
        any save picks up current catalog prices. Fields that are unset
        or ``None`` in the patch are not written.

        Raises:
            OrderNotFound: if the order does not exist.
            InvalidDeliveryWindow: the merged window ends before it starts.
        """
        order = self._order_repo.get_by_id(str(order_id))
        if not order:
            raise OrderNotFound(f"Order {order_id} not found.")

        log = logger.bind(order_id=str(order.id))
        patch = dto.model_dump(exclude_unset=True, exclude_none=True)

        data: Dict[str, Any] = {
            field: patch[field] for field in _PATCHABLE_FIELDS if field in patch
        }
        for field in ("status", "payment_status"):
            if field in data:
                data[field] = str(data[field])
        if "status" in data:
            data["delivery_actual_date"] = order.actual_delivery_date_for(data["status"])

        if dto.items is not None:
            lines = [LineRequest(i.product_id, i.quantity_per_day) for i in dto.items]
        else:
            lines = [
                LineRequest(item.product_id, item.quantity_per_day)
                for item in order.items.all()
            ]

        start = data.get("delivery_start", order.delivery_start)
        end = data.get("delivery_end", order.delivery_end)
        if end < start:
            log.warning(
                "order.window_rejected",
                delivery_start=start.isoformat(),
                delivery_end=end.isoformat(),
            )
            raise InvalidDeliveryWindow(
                "Delivery end date must not be before the start date."
            )

        totals = self._price(
            lines,
            start,
            end,
            data.get("delivery_charge", order.delivery_charge),
            data.get("discount", order.discount),
        )
        data["sub_total"] = totals.sub_total
        data["grand_total"] = totals.grand_total

        if snapshot_is_stale(order, dto.customer_id):
            customer_id = data.get("customer_id", order.customer_id)
            data.update(
                resolve_customer_snapshot(self._customer_repo, customer_id).as_fields()
            )
            log.info("order.snapshot_refreshed", customer_id=str(customer_id))

        updated = self._order_repo.update(order.id, data, totals.items)
        log.info(
            "order.update_applied",
            status=updated.status,
            grand_total=str(totals.grand_total),
        )
        return updated

    def update_delivery_status(
        self, order_id: Union[str, UUID], new_status: str
    ) -> Order:
        """Status change from the delivery list.

        Raises:
            InvalidOrderStatus: status outside the delivery-worker set.
            OrderNotFound: if the order does not exist.
        """
        new_status = str(new_status)
        if new_status not in DELIVERY_WORKER_STATUSES:
            logger.warning(
                "order.delivery_status_rejected",
                order_id=str(order_id),
                status=new_status,
            )
            raise InvalidOrderStatus(
                f"Status '{new_status}' cannot be set from the delivery list."
            )
        return self.update_order(order_id, UpdateOrderDTO(status=new_status))

    @transaction.atomic
    def delete_order(self, order_id: Union[str, UUID]) -> bool:
        return self._order_repo.delete(str(order_id))

    def ensure_no_duplicate_items(self, dto: CreateOrderDTO) -> None:
        """Reject products already ordered by the customer on the same day.

        Compares product ids against every existing order of the customer
        with the same ``order_date``; delivery windows are not compared.

        Raises:
            DuplicateOrderItem: naming the first product found twice.
        """
        existing = self._order_repo.list_for_customer_on_date(
            dto.customer_id, dto.order_date
        )
        if not existing:
            return

        already_ordered = {
            str(item.product_id) for order in existing for item in order.items.all()
        }
        for item in dto.items:
            if str(item.product_id) in already_ordered:
                price = self._catalog.lookup(item.product_id)
                name = price.name if price.found else f"Product ID {item.product_id}"
                logger.warning(
                    "order.duplicate_item",
                    customer_id=str(dto.customer_id),
                    product_id=str(item.product_id),
                    order_date=dto.order_date.isoformat(),
                )
                raise DuplicateOrderItem(name, dto.order_date)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: Union[str, UUID]) -> Order:
        """Raises ``OrderNotFound`` if the order does not exist."""
        order = self._order_repo.get_by_id(str(order_id))
        if not order:
            raise OrderNotFound(f"Order {order_id} not found.")
        return order

    def list_orders(self, filters: Optional[Dict[str, Any]] = None) -> List[Order]:
        return self._order_repo.list(filters)

    def get_orders_for_customer(self, customer_id: UUID) -> List[Order]:
        return self._order_repo.list_for_customer(customer_id)

    def get_orders_for_delivery_date(self, target: Union[date, str]) -> List[Order]:
        """Orders to deliver on ``target``, sorted by customer name.

        ``target`` may be a date or a ``yyyy-MM-dd`` string; a malformed
        string raises ``ValueError``.
        """
        if isinstance(target, str):
            target = parse_delivery_date(target)
        candidates = self._order_repo.delivery_candidates(
            target, ACTIVE_DELIVERY_STATUSES
        )
        orders = resolve_deliveries(candidates, target)
        logger.info(
            "order.deliveries_resolved",
            date=target.isoformat(),
            candidates=len(candidates),
            count=len(orders),
        )
        return orders

    def get_orders_by_phone(self, phone: str) -> Tuple[Customer, List[Order]]:
        """Find a customer by phone number and return their orders.

        Raises:
            InvalidPhoneNumber: fewer than ten digits after stripping.
            CustomerNotFound: no customer has this phone number.
        """
        digits = re.sub(r"\D", "", phone or "")
        if len(digits) < MIN_LOOKUP_PHONE_DIGITS:
            raise InvalidPhoneNumber(
                f"Phone number must contain at least {MIN_LOOKUP_PHONE_DIGITS} digits."
            )
        customer = self._customer_repo.get_by_phone_digits(digits)
        if not customer:
            logger.info("order.lookup_no_customer", phone=digits)
            raise CustomerNotFound("No customer found with this phone number.")
        return customer, self.get_orders_for_customer(customer.id)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _price(
        self,
        lines: Sequence[LineRequest],
        start: date,
        end: date,
        delivery_charge: Decimal,
        discount: Decimal,
    ) -> OrderTotals:
        catalog = self._catalog.prices_for(line.product_id for line in lines)
        return calculate_order_totals(
            lines, catalog, start, end, delivery_charge, discount
        )


def build_order_service() -> OrderService:
    """``OrderService`` wired to the Django ORM repositories."""
    from modules.customers.repositories.django_repository import (
        CustomerDjangoRepository,
    )
    from modules.orders.repositories.django_repository import OrderDjangoRepository
    from modules.products.repositories.django_repository import (
        ProductDjangoRepository,
    )

    return OrderService(
        order_repository=OrderDjangoRepository(),
        customer_repository=CustomerDjangoRepository(),
        product_repository=ProductDjangoRepository(),
    )
