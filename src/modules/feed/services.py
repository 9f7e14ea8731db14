"""Feed log service layer."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, List
from uuid import UUID

import structlog

if TYPE_CHECKING:
    from modules.feed.dtos import DailyFeedLogDTO
    from modules.feed.models import FeedLog
    from modules.feed.repositories.interfaces import IFeedLogRepository

logger = structlog.get_logger(__name__)


class FeedLogService:
    def __init__(self, repository: IFeedLogRepository) -> None:
        self._repo = repository

    def save_daily_feed_logs(self, dto: DailyFeedLogDTO) -> List[FeedLog]:
        """Replace the cow's logs for the day with the non-zero items.

        Saving a day where every quantity is zero clears the day.
        """
        entries = [
            (item.food_name, item.quantity_kg)
            for item in dto.items
            if item.quantity_kg > 0
        ]
        return self._repo.replace_day(dto.cow_id, dto.date, entries, dto.notes)

    def delete_feed_logs_for_day(self, cow_id: UUID, day: date) -> bool:
        """Returns ``False`` when the day had no logs to delete."""
        return self._repo.delete_day(cow_id, day) > 0

    def list_feed_logs(self):
        return self._repo.list()

    def get_feed_logs_for_day(self, cow_id: UUID, day: date) -> List[FeedLog]:
        return self._repo.list_for_day(cow_id, day)
