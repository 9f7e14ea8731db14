"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer aggregate, delegating
persistence to the injected ``ICustomerRepository``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog
from django.db import models, transaction

from modules.customers.exceptions import CustomerNotFound
from modules.customers.models import Customer

if TYPE_CHECKING:
    from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)

_REQUIRED_FIELDS = ("name", "phone", "address_line1", "city", "postal_code")
_CLEARABLE_FIELDS = (
    "email",
    "address_line2",
    "state_or_province",
    "google_maps_pin_link",
)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection.
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_customer(self, dto: CreateCustomerDTO) -> Customer:
        fields = dto.model_dump()
        customer = Customer(
            **{key: value for key, value in fields.items() if value is not None}
        )
        customer = self._repo.save(customer)
        logger.info("customer.created", customer_id=str(customer.id), city=dto.city)
        return customer

    @transaction.atomic
    def update_customer(self, id: str, dto: UpdateCustomerDTO) -> Customer:
        """Update an existing customer with the supplied fields.

        Optional fields sent empty are cleared; required fields are only
        overwritten by non-empty values.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._repo.get_by_id(id)
        if not customer:
            raise CustomerNotFound(f"Customer {id} not found.")

        patch = dto.model_dump(exclude_unset=True)
        for field in _REQUIRED_FIELDS:
            if patch.get(field) is not None:
                setattr(customer, field, patch[field])
        for field in _CLEARABLE_FIELDS:
            if field in patch:
                setattr(customer, field, patch[field] or "")

        customer = self._repo.save(customer)
        logger.info("customer.updated", customer_id=str(id))
        return customer

    @transaction.atomic
    def delete_customer(self, id: str) -> None:
        if not self._repo.delete(id):
            raise CustomerNotFound(f"Customer {id} not found.")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_customers(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[Customer]":
        return self._repo.list(filters)

    def get_customer(self, id: str) -> Customer:
        """Retrieve a single customer by ID.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._repo.get_by_id(id)
        if not customer:
            raise CustomerNotFound(f"Customer {id} not found.")
        return customer
