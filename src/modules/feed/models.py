"""Daily feed log model.

One row per (cow, day, feed). The rows of a cow's day are always written
together: saving a day replaces every row it had before.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from modules.core.models import BaseModel
from modules.feed.constants import FOOD_ITEMS, MAX_QUANTITY_KG


class FeedLog(BaseModel):
    cow_id = models.UUIDField()
    date = models.DateField()
    food_name = models.CharField(
        max_length=50, choices=[(name, name) for name in FOOD_ITEMS]
    )
    quantity_kg = models.DecimalField(
        max_digits=6,
        decimal_places=2,
        validators=[
            MinValueValidator(Decimal("0")),
            MaxValueValidator(Decimal(MAX_QUANTITY_KG)),
        ],
    )
    # Same text on every row of the day.
    notes = models.TextField(blank=True, default="")

    class Meta:
        db_table = "feed_logs"
        ordering = ["-date", "food_name"]
        indexes = [
            models.Index(fields=["cow_id", "date"], name="feed_logs_cow_day_idx"),
        ]

    @property
    def category(self) -> str:
        return FOOD_ITEMS.get(self.food_name, "")

    def __str__(self) -> str:
        return f"{self.date} {self.food_name} {self.quantity_kg}kg"
