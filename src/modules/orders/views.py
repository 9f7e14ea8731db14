"""Order API views.

Exposes the ``OrderService`` via HTTP using DRF ViewSets.
Domain exceptions are caught and translated into appropriate
HTTP status codes; storage errors are left to propagate.
"""

from __future__ import annotations

from django.utils import timezone
from django_filters.rest_framework import DjangoFilterBackend
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter, SearchFilter
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.throttling import BaseThrottle
from rest_framework.viewsets import GenericViewSet

from modules.core.pagination import StandardResultsSetPagination
from modules.customers.exceptions import CustomerNotFound
from modules.customers.serializers import CustomerSerializer
from modules.orders.dtos import CreateOrderDTO, UpdateOrderDTO
from modules.orders.exceptions import (
    DuplicateOrderItem,
    InvalidDeliveryWindow,
    InvalidOrderStatus,
    InvalidPhoneNumber,
    OrderNotFound,
)
from modules.orders.filters import OrderFilter
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import (
    CreateOrderSerializer,
    DeliveryOrderSerializer,
    DeliveryStatusSerializer,
    OrderListSerializer,
    OrderSerializer,
    UpdateOrderSerializer,
)
from modules.orders.services import build_order_service


def _not_found() -> Response:
    return Response(
        {"detail": "Order not found."},
        status=status.HTTP_404_NOT_FOUND,
    )


class OrderViewSet(GenericViewSet):
    """ViewSet for Order operations.

    Uses ``OrderService`` with injected repositories. Does **not** extend
    ``ModelViewSet``; all ORM access goes through the service/repository
    layer.
    """

    filterset_class = OrderFilter
    search_fields = ["order_number", "customer_name", "customer_phone"]
    ordering_fields = ["order_date", "delivery_start", "grand_total", "status"]
    ordering = ["-order_date", "-created_at"]
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    serializer_class = OrderSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = build_order_service()

    def get_throttles(self) -> list[BaseThrottle]:
        if self.action == "create":
            self.throttle_scope = "order_creation"
        elif self.action == "lookup":
            self.throttle_scope = "order_lookup"
        else:
            self.throttle_scope = None
        return super().get_throttles()

    def get_queryset(self):
        return OrderDjangoRepository().queryset()

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/orders/

        Runs the duplicate-item guard first; a product the customer
        already ordered for the same day returns 409.
        """
        serializer = CreateOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            dto = CreateOrderDTO(**serializer.validated_data)
        except PydanticValidationError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            self._service.ensure_no_duplicate_items(dto)
        except DuplicateOrderItem as exc:
            return Response(
                {"detail": str(exc), "product_name": exc.product_name},
                status=status.HTTP_409_CONFLICT,
            )

        order = self._service.create_order(dto)
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/orders/

        Filtering is handled by ``OrderFilter``; results are paginated.
        """
        queryset = self.filter_queryset(self.get_queryset())

        paginator = StandardResultsSetPagination()
        page = paginator.paginate_queryset(queryset, request)
        serializer = OrderListSerializer(page, many=True)
        return paginator.get_paginated_response(serializer.data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/orders/{pk}/"""
        try:
            order = self._service.get_order(pk)
        except OrderNotFound:
            return _not_found()
        return Response(OrderSerializer(order).data)

    # ------------------------------------------------------------------
    # Update / Destroy
    # ------------------------------------------------------------------

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/orders/{pk}/

        An empty body still re-prices the order against the catalog.
        """
        serializer = UpdateOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            dto = UpdateOrderDTO(**serializer.validated_data)
        except PydanticValidationError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            order = self._service.update_order(pk, dto)
        except InvalidDeliveryWindow as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except OrderNotFound:
            return _not_found()
        return Response(OrderSerializer(order).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/orders/{pk}/"""
        if not self._service.delete_order(pk):
            return _not_found()
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Delivery list
    # ------------------------------------------------------------------

    @action(detail=False, methods=["get"])
    def deliveries(self, request: Request) -> Response:
        """GET /api/v1/orders/deliveries/?date=yyyy-MM-dd (defaults to today)"""
        target = request.query_params.get("date") or timezone.localdate()
        try:
            orders = self._service.get_orders_for_delivery_date(target)
        except ValueError:
            return Response(
                {"detail": "Invalid date, expected yyyy-MM-dd."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return Response(DeliveryOrderSerializer(orders, many=True).data)

    @action(detail=True, methods=["post"], url_path="delivery-status")
    def delivery_status(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/orders/{pk}/delivery-status/"""
        serializer = DeliveryStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            order = self._service.update_delivery_status(
                pk, serializer.validated_data["status"]
            )
        except InvalidOrderStatus as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except OrderNotFound:
            return _not_found()
        return Response(DeliveryOrderSerializer(order).data)

    # ------------------------------------------------------------------
    # Lookup by phone
    # ------------------------------------------------------------------

    @action(detail=False, methods=["get"])
    def lookup(self, request: Request) -> Response:
        """GET /api/v1/orders/lookup/?phone=..."""
        try:
            customer, orders = self._service.get_orders_by_phone(
                request.query_params.get("phone", "")
            )
        except InvalidPhoneNumber as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except CustomerNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(
            {
                "customer": CustomerSerializer(customer).data,
                "orders": OrderSerializer(orders, many=True).data,
            }
        )
