"""Django ORM implementation of the Product repository.

Methods return ``None``/empty collections instead of raising for
missing rows; the Service Layer decides what a missing product means.
"""

from __future__ import annotations

import uuid
from typing import Any, Dict, Iterable, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import models, transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


def _valid_ids(ids: Iterable[Any]) -> List[uuid.UUID]:
    valid = []
    for raw in ids:
        try:
            valid.append(raw if isinstance(raw, uuid.UUID) else uuid.UUID(str(raw)))
        except ValueError:
            logger.warning("product.invalid_id", product_id=str(raw))
    return valid


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a live product by primary key.

        Returns ``None`` for non-existent, deleted or invalid IDs.
        """
        try:
            return Product.objects.alive().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_many(self, ids: Iterable[Any]) -> List[Product]:
        valid = _valid_ids(ids)
        if not valid:
            return []
        return list(Product.objects.alive().filter(id__in=valid))

    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[Product]":
        """List live products with optional Django ORM look-ups.

        Examples of valid filters::

            {"unit": "liter"}
            {"name__icontains": "ghee"}
        """
        queryset = Product.objects.alive()
        if filters:
            queryset = queryset.filter(**filters)
        return queryset

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info(
            "product.saved",
            product_id=str(entity.id),
            price_per_unit=str(entity.price_per_unit),
        )
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        """Soft-delete a product by ID.

        Returns ``False`` if no live product exists with the given ID.
        Orders that reference the product keep their stored line name and
        price; they price it as an unknown product on their next save.
        """
        product = self.get_by_id(id)
        if not product:
            return False
        product.delete()
        logger.info("product.soft_deleted", product_id=str(id))
        return True
