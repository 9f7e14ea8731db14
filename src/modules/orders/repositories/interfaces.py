"""Order repository interface.

Extends ``IRepository[Order]`` with the writes that persist an order
together with its priced item set, and the look-ups used by the delivery
list, the duplicate-item guard and the customer order history.

The Service Layer depends exclusively on this contract.
"""

from __future__ import annotations

from abc import abstractmethod
from datetime import date
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence
from uuid import UUID

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order
    from modules.orders.pricing import PricedLine


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root.

    The aggregate is the order row plus its item rows; both are written
    in one transaction.
    """

    @abstractmethod
    def create(self, data: Dict[str, Any], items: Sequence[PricedLine]) -> Order:
        """Insert an order and its items atomically."""

    @abstractmethod
    def update(
        self, id: UUID, data: Dict[str, Any], items: Sequence[PricedLine]
    ) -> Order:
        """Write ``data`` onto the order and replace its items atomically.

        Every key in ``data`` is written, including explicit ``None``.
        """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[Order]:
        """Retrieve a live order with prefetched items."""

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Order]:
        """List live orders, most recent order date first."""

    @abstractmethod
    def list_for_customer(self, customer_id: UUID) -> List[Order]:
        """Orders of one customer, most recent order date first."""

    @abstractmethod
    def list_for_customer_on_date(
        self, customer_id: UUID, order_date: date
    ) -> List[Order]:
        """Orders of one customer placed on ``order_date``."""

    @abstractmethod
    def delivery_candidates(
        self, target: date, statuses: Sequence[str]
    ) -> List[Order]:
        """Orders starting on or before ``target`` with a status in ``statuses``.

        The end bound is left to the caller.
        """
