"""Unit tests for the customer snapshot resolver."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from modules.orders.snapshots import (
    CustomerSnapshot,
    resolve_customer_snapshot,
    snapshot_is_stale,
)

pytestmark = pytest.mark.unit


class TestResolveCustomerSnapshot:
    def test_copies_customer_fields(self, customer):
        repo = MagicMock()
        repo.get_by_id.return_value = customer

        snapshot = resolve_customer_snapshot(repo, customer.id)

        repo.get_by_id.assert_called_once_with(str(customer.id))
        assert snapshot.as_fields() == {
            "customer_name": "Asha Patel",
            "customer_phone": "98250 11111",
            "customer_address_line1": "12 Nilkanth Society",
            "customer_address_line2": None,
            "customer_city": "Rajkot",
            "customer_postal_code": "360005",
            "customer_google_maps_pin_link": None,
        }

    def test_missing_customer_gives_unknown_sentinel(self):
        repo = MagicMock()
        repo.get_by_id.return_value = None

        snapshot = resolve_customer_snapshot(repo, uuid4())

        assert snapshot == CustomerSnapshot.unknown()
        fields = snapshot.as_fields()
        assert fields.pop("customer_name") == "Unknown Customer"
        assert set(fields.values()) == {None}


class TestSnapshotIsStale:
    def test_same_customer_with_name_is_fresh(self):
        cid = uuid4()
        order = SimpleNamespace(customer_id=cid, customer_name="Asha")
        assert not snapshot_is_stale(order, None)
        assert not snapshot_is_stale(order, cid)

    def test_customer_change_is_stale(self):
        order = SimpleNamespace(customer_id=uuid4(), customer_name="Asha")
        assert snapshot_is_stale(order, uuid4())

    def test_customer_id_compared_as_text(self):
        cid = uuid4()
        order = SimpleNamespace(customer_id=str(cid), customer_name="Asha")
        assert not snapshot_is_stale(order, cid)

    def test_missing_name_heals(self):
        order = SimpleNamespace(customer_id=uuid4(), customer_name=None)
        assert snapshot_is_stale(order, None)
