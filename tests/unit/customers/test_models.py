"""Unit tests for the Customer model."""

from __future__ import annotations

import pytest

from modules.customers.models import Customer

pytestmark = pytest.mark.unit


class TestPhoneDigits:
    def test_sanitize_phone(self):
        assert Customer.sanitize_phone("+91 (98250) 11-111") == "919825011111"

    def test_digits_set_on_create(self, customer):
        customer.refresh_from_db()
        assert customer.phone_digits == "9825011111"

    def test_digits_follow_update_fields(self, customer):
        customer.phone = "98790-22222"
        customer.save(update_fields=["phone"])
        customer.refresh_from_db()
        assert customer.phone_digits == "9879022222"

    def test_str_masks_phone(self, customer):
        assert str(customer) == "Asha Patel (phone: ***1111)"


class TestJoinDate:
    def test_defaults_to_today(self, customer):
        from django.utils import timezone

        assert customer.join_date == timezone.localdate()
