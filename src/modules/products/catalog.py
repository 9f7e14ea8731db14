"""Product catalog lookup used by the order pricing engine.

A lookup never fails for an unknown product: it returns a
``CatalogPrice`` flagged ``found=False`` with a zero price and the
placeholder name, so an order referencing a deleted product can still be
priced and saved.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, Iterable
from uuid import UUID

import structlog

if TYPE_CHECKING:
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

UNKNOWN_PRODUCT_NAME = "Unknown Product"


@dataclass(frozen=True)
class CatalogPrice:
    product_id: UUID
    name: str
    unit_price: Decimal
    found: bool = True

    @classmethod
    def from_product(cls, product: Product) -> CatalogPrice:
        return cls(
            product_id=product.id,
            name=product.name,
            unit_price=product.price_per_unit,
        )

    @classmethod
    def missing(cls, product_id: UUID) -> CatalogPrice:
        return cls(
            product_id=product_id,
            name=UNKNOWN_PRODUCT_NAME,
            unit_price=Decimal("0"),
            found=False,
        )


class ProductCatalog:
    """Read-only price lookup over the product repository."""

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    def lookup(self, product_id: UUID) -> CatalogPrice:
        product = self._repo.get_by_id(str(product_id))
        if product is None:
            logger.warning("catalog.product_missing", product_id=str(product_id))
            return CatalogPrice.missing(product_id)
        return CatalogPrice.from_product(product)

    def prices_for(self, product_ids: Iterable[Any]) -> Dict[UUID, CatalogPrice]:
        """Resolve current prices for every id in one repository call.

        Ids with no live product map to ``CatalogPrice.missing``.
        """
        wanted = {UUID(str(pid)) for pid in product_ids}
        prices = {
            product.id: CatalogPrice.from_product(product)
            for product in self._repo.get_many(wanted)
        }
        for pid in wanted - prices.keys():
            logger.warning("catalog.product_missing", product_id=str(pid))
            prices[pid] = CatalogPrice.missing(pid)
        return prices
