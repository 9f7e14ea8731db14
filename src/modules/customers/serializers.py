"""Customer DRF serializers for API output."""

from __future__ import annotations

from rest_framework import serializers

from modules.customers.models import Customer


class CustomerSerializer(serializers.ModelSerializer):
    class Meta:
        model = Customer
        fields = [
            "id",
            "name",
            "email",
            "phone",
            "address_line1",
            "address_line2",
            "city",
            "state_or_province",
            "postal_code",
            "google_maps_pin_link",
            "join_date",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
