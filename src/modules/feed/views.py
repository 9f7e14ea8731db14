"""Feed log API views.

A day's logs are written and deleted as a unit through ``daily/``; the
collection endpoint is read-only.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.mixins import ListModelMixin
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.feed.dtos import DailyFeedLogDTO
from modules.feed.filters import FeedLogFilter
from modules.feed.repositories.django_repository import FeedLogDjangoRepository
from modules.feed.serializers import FeedDayQuerySerializer, FeedLogSerializer
from modules.feed.services import FeedLogService


class FeedLogViewSet(ListModelMixin, GenericViewSet):
    filterset_class = FeedLogFilter
    filter_backends = [DjangoFilterBackend]
    serializer_class = FeedLogSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = FeedLogService(repository=FeedLogDjangoRepository())

    def get_queryset(self):
        return self._service.list_feed_logs()

    @action(detail=False, methods=["post", "delete"])
    def daily(self, request: Request) -> Response:
        """POST replaces a cow's day; DELETE ``?cow_id=&date=`` clears it."""
        if request.method == "DELETE":
            return self._delete_day(request)

        try:
            dto = DailyFeedLogDTO(**request.data)
        except (PydanticValidationError, TypeError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        logs = self._service.save_daily_feed_logs(dto)
        return Response(
            FeedLogSerializer(logs, many=True).data, status=status.HTTP_201_CREATED
        )

    def _delete_day(self, request: Request) -> Response:
        query = FeedDayQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        deleted = self._service.delete_feed_logs_for_day(
            query.validated_data["cow_id"], query.validated_data["date"]
        )
        if not deleted:
            return Response(
                {"detail": "No feed logs found for this cow and date."},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(status=status.HTTP_204_NO_CONTENT)
