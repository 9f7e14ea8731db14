"""Feed log DRF serializers."""

from __future__ import annotations

from rest_framework import serializers

from modules.feed.models import FeedLog


class FeedLogSerializer(serializers.ModelSerializer):
    category = serializers.CharField(read_only=True)

    class Meta:
        model = FeedLog
        fields = [
            "id",
            "cow_id",
            "date",
            "food_name",
            "category",
            "quantity_kg",
            "notes",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class FeedDayQuerySerializer(serializers.Serializer):
    cow_id = serializers.UUIDField()
    date = serializers.DateField()
