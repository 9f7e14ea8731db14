"""Feed log repository interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, List, Sequence, Tuple
from uuid import UUID

from django.db import models

if TYPE_CHECKING:
    from modules.feed.models import FeedLog


class IFeedLogRepository(ABC):
    """Feed logs are written by (cow, day), never one row at a time."""

    @abstractmethod
    def list(self) -> "models.QuerySet[FeedLog]":
        """All feed logs, newest day first."""

    @abstractmethod
    def list_for_day(self, cow_id: UUID, day: date) -> List[FeedLog]:
        """Logs of one cow for one day."""

    @abstractmethod
    def replace_day(
        self,
        cow_id: UUID,
        day: date,
        entries: Sequence[Tuple[str, Decimal]],
        notes: str,
    ) -> List[FeedLog]:
        """Delete the day's logs and insert ``entries`` as one atomic write."""

    @abstractmethod
    def delete_day(self, cow_id: UUID, day: date) -> int:
        """Delete the day's logs atomically; returns how many rows went."""
