"""Feed URL configuration."""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.feed.views import FeedLogViewSet

router = DefaultRouter(trailing_slash=True)
router.register("feed-logs", FeedLogViewSet, basename="feed-log")

urlpatterns = router.urls
