"""Integration tests for scoped throttling on the order API."""

from __future__ import annotations

import pytest
from django.core.cache import cache
from rest_framework.throttling import ScopedRateThrottle

pytestmark = pytest.mark.integration


@pytest.fixture()
def tight_rates(monkeypatch):
    cache.clear()
    monkeypatch.setattr(
        ScopedRateThrottle,
        "THROTTLE_RATES",
        {"order_creation": "2/minute", "order_lookup": "3/minute"},
    )
    yield
    cache.clear()


def test_phone_lookup_is_throttled(auth_client, tight_rates):
    for _ in range(3):
        response = auth_client.get("/api/v1/orders/lookup/", {"phone": "9000000000"})
        assert response.status_code == 404

    response = auth_client.get("/api/v1/orders/lookup/", {"phone": "9000000000"})
    assert response.status_code == 429


def test_order_creation_is_throttled(auth_client, customer, milk, tight_rates):
    def payload(order_date):
        return {
            "customer_id": str(customer.id),
            "items": [{"product_id": str(milk.id), "quantity_per_day": 1}],
            "order_date": order_date,
            "delivery_start": "2025-01-01",
            "delivery_end": "2025-01-01",
        }

    assert auth_client.post("/api/v1/orders/", payload("2025-01-01"), format="json").status_code == 201
    assert auth_client.post("/api/v1/orders/", payload("2025-01-02"), format="json").status_code == 201
    assert auth_client.post("/api/v1/orders/", payload("2025-01-03"), format="json").status_code == 429


def test_order_listing_is_not_scoped(auth_client, tight_rates):
    for _ in range(5):
        assert auth_client.get("/api/v1/orders/").status_code == 200
