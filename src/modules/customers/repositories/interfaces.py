"""Customer repository interface.

Extends ``IRepository[Customer]`` with the phone look-up used by the
storefront order lookup.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from django.db import models

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[Customer]":
        """List customers with optional filters."""

    @abstractmethod
    def get_by_phone_digits(self, digits: str) -> Optional[Customer]:
        """Retrieve a customer whose phone, stripped to digits, equals ``digits``."""
