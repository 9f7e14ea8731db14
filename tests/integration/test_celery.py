"""Integration tests for the Celery configuration and delivery manifest task."""

from datetime import date

import pytest
from freezegun import freeze_time

from modules.orders.dtos import CreateOrderDTO, OrderItemDTO
from modules.orders.services import build_order_service

pytestmark = pytest.mark.integration


@pytest.fixture(autouse=True)
def _celery_eager(settings):
    """Run tasks synchronously in the test process."""
    settings.CELERY_TASK_ALWAYS_EAGER = True
    settings.CELERY_TASK_EAGER_PROPAGATES = True


class TestCeleryConfig:
    """Celery loads through Django."""

    def test_celery_app_is_importable(self):
        from config.celery import app

        assert app.main == "dairy"

    def test_celery_app_exported_from_init(self):
        from config import celery_app

        assert celery_app.main == "dairy"

    def test_celery_serializer_is_json(self, settings):
        assert settings.CELERY_TASK_SERIALIZER == "json"
        assert settings.CELERY_RESULT_SERIALIZER == "json"
        assert settings.CELERY_ACCEPT_CONTENT == ["json"]

    def test_celery_timezone_matches_django(self, settings):
        assert settings.CELERY_TIMEZONE == settings.TIME_ZONE

    def test_manifest_is_scheduled(self, settings):
        entry = settings.CELERY_BEAT_SCHEDULE["morning-delivery-manifest"]
        assert entry["task"] == "orders.build_delivery_manifest"


class TestDeliveryManifest:
    @pytest.fixture()
    def confirmed_order(self, customer, milk):
        return build_order_service().create_order(
            CreateOrderDTO(
                customer_id=customer.id,
                items=[OrderItemDTO(product_id=milk.id, quantity_per_day=2)],
                delivery_start=date(2025, 1, 1),
                delivery_end=date(2025, 1, 3),
                status="Confirmed",
            )
        )

    def test_manifest_lists_the_day(self, confirmed_order):
        from modules.orders.tasks import build_delivery_manifest

        result = build_delivery_manifest.delay("2025-01-02")

        assert result.successful()
        manifest = result.result
        assert manifest["date"] == "2025-01-02"
        assert manifest["count"] == 1
        assert manifest["orders"][0]["order_number"] == confirmed_order.order_number
        assert manifest["orders"][0]["items"] == [
            {"product_name": "A2 Gir Cow Milk", "quantity_per_day": 2}
        ]

    @freeze_time("2025-01-05 04:00:00")
    def test_defaults_to_today(self, confirmed_order):
        from modules.orders.tasks import build_delivery_manifest

        manifest = build_delivery_manifest()

        assert manifest == {"date": "2025-01-05", "count": 0, "orders": []}
