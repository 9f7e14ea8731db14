"""Customer model with phone sanitisation and soft delete.

Business rules implemented:
- ``phone_digits`` keeps the digits of ``phone`` (sanitised on save) so
  the storefront can look a customer up by any formatting of the number.
- Soft delete via ``deleted_at`` (inherited from SoftDeleteModel).
- Phone numbers are masked in ``__str__`` and logs.
"""

from __future__ import annotations

import re

import structlog
from django.db import models
from django.utils import timezone

from modules.core.models import SoftDeleteModel

logger = structlog.get_logger(__name__)


class Customer(SoftDeleteModel):
    """Customer aggregate root.

    Orders copy the name, phone and address fields at save time, so
    editing a customer does not rewrite existing orders.
    """

    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=254, blank=True, default="")
    phone = models.CharField(max_length=20)
    phone_digits = models.CharField(max_length=20, db_index=True, editable=False)
    address_line1 = models.CharField(max_length=255)
    address_line2 = models.CharField(max_length=255, blank=True, default="")
    city = models.CharField(max_length=100)
    state_or_province = models.CharField(max_length=100, blank=True, default="")
    postal_code = models.CharField(max_length=20)
    google_maps_pin_link = models.URLField(max_length=500, blank=True, default="")
    join_date = models.DateField(default=timezone.localdate)

    class Meta:
        db_table = "customers"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["-created_at"], name="customers_created_idx"),
        ]

    @staticmethod
    def sanitize_phone(value: str) -> str:
        """Strip all non-digit characters from a phone number."""
        return re.sub(r"\D", "", value or "")

    def save(self, *args, **kwargs) -> None:
        self.phone_digits = self.sanitize_phone(self.phone)
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "phone" in update_fields:
            kwargs["update_fields"] = {*update_fields, "phone_digits"}
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        suffix = self.phone_digits[-4:] if self.phone_digits else "????"
        return f"{self.name} (phone: ***{suffix})"
