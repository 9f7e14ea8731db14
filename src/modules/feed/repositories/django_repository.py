"""Django ORM implementation of the feed log repository.

Day replacement runs inside ``transaction.atomic()``: either every old
row is gone and every new row is in, or nothing changed.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import List, Sequence, Tuple
from uuid import UUID

import structlog
from django.db import models, transaction

from modules.feed.models import FeedLog
from modules.feed.repositories.interfaces import IFeedLogRepository

logger = structlog.get_logger(__name__)


class FeedLogDjangoRepository(IFeedLogRepository):
    def list(self) -> "models.QuerySet[FeedLog]":
        return FeedLog.objects.all()

    def list_for_day(self, cow_id: UUID, day: date) -> List[FeedLog]:
        return list(FeedLog.objects.filter(cow_id=cow_id, date=day))

    @transaction.atomic
    def replace_day(
        self,
        cow_id: UUID,
        day: date,
        entries: Sequence[Tuple[str, Decimal]],
        notes: str,
    ) -> List[FeedLog]:
        removed, _ = FeedLog.objects.filter(cow_id=cow_id, date=day).delete()
        logs = FeedLog.objects.bulk_create(
            FeedLog(
                cow_id=cow_id,
                date=day,
                food_name=food_name,
                quantity_kg=quantity,
                notes=notes,
            )
            for food_name, quantity in entries
        )
        logger.info(
            "feed.day_replaced",
            cow_id=str(cow_id),
            date=day.isoformat(),
            removed=removed,
            inserted=len(logs),
        )
        return logs

    @transaction.atomic
    def delete_day(self, cow_id: UUID, day: date) -> int:
        removed, _ = FeedLog.objects.filter(cow_id=cow_id, date=day).delete()
        logger.info(
            "feed.day_deleted", cow_id=str(cow_id), date=day.isoformat(), removed=removed
        )
        return removed
