"""Product catalog model.

Business rules implemented:
- Price per unit must be greater than zero.
- Unit of sale is one of liter / kg / item.
- Soft delete via ``deleted_at`` (inherited from SoftDeleteModel).

Prices are live: orders never hold a reference to a price version, they
re-read ``price_per_unit`` every time they are saved.
"""

from __future__ import annotations

from decimal import Decimal

import structlog
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import SoftDeleteModel

logger = structlog.get_logger(__name__)


class ProductUnit(models.TextChoices):
    LITER = "liter", "Liter"
    KG = "kg", "Kilogram"
    ITEM = "item", "Item"


class Product(SoftDeleteModel):
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    price_per_unit = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    unit = models.CharField(
        max_length=10,
        choices=ProductUnit.choices,
        default=ProductUnit.LITER,
    )
    image_url = models.URLField(blank=True, default="")

    class Meta:
        db_table = "products"
        ordering = ["name"]

    def clean(self) -> None:
        super().clean()
        if self.price_per_unit is not None and self.price_per_unit <= 0:
            raise ValidationError(
                {"price_per_unit": "Price per unit must be greater than zero."}
            )

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        super().save(*args, **kwargs)
        if is_new:
            logger.info(
                "product.created",
                product_id=str(self.id),
                name=self.name,
                price_per_unit=str(self.price_per_unit),
            )

    def __str__(self) -> str:
        return f"{self.name} ({self.price_per_unit}/{self.unit})"
