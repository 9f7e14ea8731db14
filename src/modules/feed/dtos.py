"""Feed log DTOs (Pydantic v2, immutable)."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import List
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.feed.constants import FOOD_ITEMS, MAX_QUANTITY_KG, NOTES_MAX_LENGTH


class FeedItemDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    food_name: str
    quantity_kg: Decimal = Field(ge=0, le=MAX_QUANTITY_KG)

    @field_validator("food_name")
    @classmethod
    def food_must_be_known(cls, v: str) -> str:
        if v not in FOOD_ITEMS:
            raise ValueError(f"Unknown feed '{v}'.")
        return v


class DailyFeedLogDTO(BaseModel):
    """A cow's complete feed for one day.

    Items with a zero quantity are accepted and dropped when saving.
    """

    model_config = ConfigDict(frozen=True)

    cow_id: UUID
    date: date
    items: List[FeedItemDTO]
    notes: str = Field(default="", max_length=NOTES_MAX_LENGTH)
