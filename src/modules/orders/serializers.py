"""Order DRF serializers for API input/output.

Input serializers validate the request shape; the Pydantic DTOs in
``dtos.py`` enforce the business rules the Service Layer relies on.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.constants import NOTES_MAX_LENGTH, OrderStatus, PaymentStatus
from modules.orders.models import Order, OrderItem

# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class OrderItemInputSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    quantity_per_day = serializers.IntegerField(min_value=1)


class CreateOrderSerializer(serializers.Serializer):
    """Validates the order creation request payload."""

    customer_id = serializers.UUIDField()
    items = OrderItemInputSerializer(many=True, allow_empty=False)
    order_date = serializers.DateField(required=False)
    delivery_start = serializers.DateField()
    delivery_end = serializers.DateField()
    delivery_charge = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0, required=False
    )
    discount = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0, required=False
    )
    status = serializers.ChoiceField(choices=OrderStatus.choices, required=False)
    payment_status = serializers.ChoiceField(
        choices=PaymentStatus.choices, required=False
    )
    notes = serializers.CharField(
        required=False, allow_blank=True, max_length=NOTES_MAX_LENGTH
    )


class UpdateOrderSerializer(CreateOrderSerializer):
    """Same fields as creation, all optional."""

    def __init__(self, *args, **kwargs) -> None:
        kwargs.setdefault("partial", True)
        super().__init__(*args, **kwargs)


class DeliveryStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=OrderStatus.choices)


# ---------------------------------------------------------------------------
# Output Serializers (Read)
# ---------------------------------------------------------------------------


class OrderItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = OrderItem
        fields = [
            "product_id",
            "product_name",
            "quantity_per_day",
            "unit_price",
            "item_total",
        ]
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """Read serializer for orders with nested items."""

    items = OrderItemSerializer(many=True, read_only=True)
    number_of_days = serializers.IntegerField(read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "order_number",
            "customer_id",
            "customer_name",
            "customer_phone",
            "customer_address_line1",
            "customer_address_line2",
            "customer_city",
            "customer_postal_code",
            "customer_google_maps_pin_link",
            "order_date",
            "delivery_start",
            "delivery_end",
            "delivery_actual_date",
            "number_of_days",
            "items",
            "delivery_charge",
            "discount",
            "sub_total",
            "grand_total",
            "status",
            "payment_status",
            "notes",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class OrderListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for order lists (no nested items)."""

    class Meta:
        model = Order
        fields = [
            "id",
            "order_number",
            "customer_id",
            "customer_name",
            "order_date",
            "delivery_start",
            "delivery_end",
            "grand_total",
            "status",
            "payment_status",
        ]
        read_only_fields = fields


class DeliveryOrderSerializer(serializers.ModelSerializer):
    """What a delivery worker needs to find the door and hand over the goods."""

    items = OrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "order_number",
            "customer_name",
            "customer_phone",
            "customer_address_line1",
            "customer_address_line2",
            "customer_city",
            "customer_postal_code",
            "customer_google_maps_pin_link",
            "delivery_start",
            "delivery_end",
            "items",
            "status",
            "notes",
        ]
        read_only_fields = fields
