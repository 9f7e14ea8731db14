"""Integration tests for the feed log API."""

from __future__ import annotations

from uuid import uuid4

import pytest

pytestmark = pytest.mark.integration

URL = "/api/v1/feed-logs/"


@pytest.fixture()
def cow_id():
    return str(uuid4())


def _day(cow_id, items, date="2025-03-01", notes=""):
    return {"cow_id": cow_id, "date": date, "items": items, "notes": notes}


class TestFeedAPIAuth:
    def test_unauthenticated_returns_401(self, api_client):
        assert api_client.get(URL).status_code == 401


class TestDailyFeedLogs:
    def test_post_saves_non_zero_items(self, auth_client, cow_id):
        response = auth_client.post(
            f"{URL}daily/",
            _day(
                cow_id,
                [
                    {"food_name": "SAILEG", "quantity_kg": "12.5"},
                    {"food_name": "KAPAS KHOD", "quantity_kg": "0"},
                ],
                notes="milked at 5",
            ),
            format="json",
        )

        assert response.status_code == 201
        assert [(log["food_name"], log["category"]) for log in response.data] == [
            ("SAILEG", "Lilu charu")
        ]
        assert response.data[0]["notes"] == "milked at 5"

    def test_post_replaces_the_day(self, auth_client, cow_id):
        auth_client.post(
            f"{URL}daily/",
            _day(cow_id, [{"food_name": "SAILEG", "quantity_kg": "10"}]),
            format="json",
        )
        auth_client.post(
            f"{URL}daily/",
            _day(cow_id, [{"food_name": "GHAU BHUSU", "quantity_kg": "4"}]),
            format="json",
        )

        response = auth_client.get(URL, {"cow": cow_id, "date": "2025-03-01"})

        assert [log["food_name"] for log in response.data["results"]] == ["GHAU BHUSU"]

    def test_unknown_food_returns_400(self, auth_client, cow_id):
        response = auth_client.post(
            f"{URL}daily/",
            _day(cow_id, [{"food_name": "GRASS", "quantity_kg": "1"}]),
            format="json",
        )
        assert response.status_code == 400

    def test_quantity_over_limit_returns_400(self, auth_client, cow_id):
        response = auth_client.post(
            f"{URL}daily/",
            _day(cow_id, [{"food_name": "SAILEG", "quantity_kg": "150"}]),
            format="json",
        )
        assert response.status_code == 400

    def test_delete_day(self, auth_client, cow_id):
        auth_client.post(
            f"{URL}daily/",
            _day(cow_id, [{"food_name": "SAILEG", "quantity_kg": "10"}]),
            format="json",
        )
        query = f"?cow_id={cow_id}&date=2025-03-01"

        assert auth_client.delete(f"{URL}daily/{query}").status_code == 204
        assert auth_client.delete(f"{URL}daily/{query}").status_code == 404

    def test_delete_requires_cow_and_date(self, auth_client):
        assert auth_client.delete(f"{URL}daily/").status_code == 400
