"""Product repository interface.

Extends ``IRepository[Product]`` with the bulk look-up the order pricing
engine needs to resolve a whole order's catalog prices in one query.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional

from django.db import models

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[Product]":
        """List live products with optional filters."""

    @abstractmethod
    def get_many(self, ids: Iterable[Any]) -> List["Product"]:
        """Retrieve every live product whose id is in ``ids``.

        Unknown or malformed ids are silently absent from the result.
        """
