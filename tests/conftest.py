from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from modules.customers.models import Customer
from modules.products.models import Product, ProductUnit


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def auth_client():
    """APIClient with a force-authenticated Django user."""
    client = APIClient()
    user = get_user_model().objects.create_user(
        username="farmhand", password="testpass123"
    )
    client.force_authenticate(user=user)
    return client


@pytest.fixture()
def make_product():
    def _make(name="A2 Gir Cow Milk", price="8.00", unit=ProductUnit.LITER):
        return Product.objects.create(
            name=name, price_per_unit=Decimal(price), unit=unit
        )

    return _make


@pytest.fixture()
def make_customer():
    def _make(name="Asha Patel", phone="98250 11111", **overrides):
        fields = {
            "address_line1": "12 Nilkanth Society",
            "city": "Rajkot",
            "postal_code": "360005",
            **overrides,
        }
        return Customer.objects.create(name=name, phone=phone, **fields)

    return _make


@pytest.fixture()
def milk(make_product):
    return make_product()


@pytest.fixture()
def ghee(make_product):
    return make_product(name="Bilona Ghee", price="25.00", unit=ProductUnit.KG)


@pytest.fixture()
def customer(make_customer):
    return make_customer()
