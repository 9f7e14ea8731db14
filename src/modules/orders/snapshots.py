"""Customer snapshot resolver.

Orders carry a copy of the customer's contact and address fields so the
delivery list never needs a customer join. The copy is taken on create
and refreshed only when the order's customer changes, or when an older
order has a customer id but no name.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional
from uuid import UUID

import structlog

from modules.orders.constants import UNKNOWN_CUSTOMER_NAME

if TYPE_CHECKING:
    from modules.customers.models import Customer
    from modules.customers.repositories.interfaces import ICustomerRepository
    from modules.orders.models import Order

logger = structlog.get_logger(__name__)


def _or_none(value: Optional[str]) -> Optional[str]:
    return value or None


@dataclass(frozen=True)
class CustomerSnapshot:
    customer_name: str
    customer_phone: Optional[str] = None
    customer_address_line1: Optional[str] = None
    customer_address_line2: Optional[str] = None
    customer_city: Optional[str] = None
    customer_postal_code: Optional[str] = None
    customer_google_maps_pin_link: Optional[str] = None

    @classmethod
    def from_customer(cls, customer: Customer) -> CustomerSnapshot:
        return cls(
            customer_name=customer.name,
            customer_phone=_or_none(customer.phone),
            customer_address_line1=_or_none(customer.address_line1),
            customer_address_line2=_or_none(customer.address_line2),
            customer_city=_or_none(customer.city),
            customer_postal_code=_or_none(customer.postal_code),
            customer_google_maps_pin_link=_or_none(customer.google_maps_pin_link),
        )

    @classmethod
    def unknown(cls) -> CustomerSnapshot:
        return cls(customer_name=UNKNOWN_CUSTOMER_NAME)

    def as_fields(self) -> Dict[str, Any]:
        return asdict(self)


def resolve_customer_snapshot(
    customer_repository: ICustomerRepository, customer_id: UUID
) -> CustomerSnapshot:
    """Copy the customer's current fields, or the unknown-customer sentinel."""
    customer = customer_repository.get_by_id(str(customer_id))
    if customer is None:
        logger.warning("order.snapshot_customer_missing", customer_id=str(customer_id))
        return CustomerSnapshot.unknown()
    return CustomerSnapshot.from_customer(customer)


def snapshot_is_stale(order: Order, new_customer_id: Optional[UUID]) -> bool:
    if new_customer_id is not None and str(new_customer_id) != str(order.customer_id):
        return True
    return bool(order.customer_id) and not order.customer_name
