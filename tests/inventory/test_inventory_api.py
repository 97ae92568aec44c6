"""Tests for the stock and counting endpoints."""

import pytest
from inventory.models import Stock
from logs.models import Activity

pytestmark = pytest.mark.django_db


class TestStocksEndpoint:
    def test_upsert(self, api_client):
        response = api_client.post("/api/stocks", {"A": 3, "B": 7}, format="json")

        assert response.status_code == 200
        assert response.json() == {"message": "Stock updated successfully"}
        assert Stock.objects.get(item="B").expected_count == 7

    def test_upsert_rejects_non_integer_counts(self, api_client):
        response = api_client.post("/api/stocks", {"A": "lots"}, format="json")

        assert response.status_code == 400
        assert "message" in response.json()

    def test_list(self, api_client, make_stock):
        stock = make_stock("Widgets", expected_count=4, detected_count=1)

        response = api_client.get("/api/stocks")

        assert response.status_code == 200
        assert response.json() == [
            {
                "_id": str(stock.id),
                "item": "Widgets",
                "expectedCount": 4,
                "detectedCount": 1,
            }
        ]

    def test_delete(self, api_client, make_stock):
        make_stock("Widgets")

        response = api_client.delete("/api/stocks/Widgets")

        assert response.status_code == 200
        assert response.json() == {"message": "Deleted Widgets successfully"}
        assert Stock.objects.count() == 0

    def test_delete_absent_item(self, api_client):
        response = api_client.delete("/api/stocks/Nothing")

        assert response.status_code == 200
        assert response.json() == {"message": "Deleted Nothing successfully"}


class TestCountObjectsEndpoint:
    def test_count(self, api_client, user, make_stock):
        stock = make_stock("Widgets")

        response = api_client.post(
            "/api/count_objects",
            {"userId": str(user.id), "stockItem": "Widgets", "countedAmount": 3},
            format="json",
        )

        assert response.status_code == 200
        assert response.json() == {
            "message": "Object count logged and stock updated successfully"
        }
        stock.refresh_from_db()
        assert stock.detected_count == 3

    def test_missing_fields(self, api_client, user):
        response = api_client.post(
            "/api/count_objects", {"userId": str(user.id)}, format="json"
        )

        assert response.status_code == 400
        assert response.json()["message"] == "User ID, stock item, and count are required"

    def test_unknown_item(self, api_client, user):
        response = api_client.post(
            "/api/count_objects",
            {"userId": str(user.id), "stockItem": "Gadgets", "countedAmount": 1},
            format="json",
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Stock item 'Gadgets' not found"
        assert Activity.objects.count() == 0

    def test_unexpected_failure_is_a_500(self, api_client, user, make_stock, monkeypatch):
        make_stock("Widgets")

        def boom(*args, **kwargs):
            raise RuntimeError("database went away")

        monkeypatch.setattr(Activity.objects, "log_count", boom)

        response = api_client.post(
            "/api/count_objects",
            {"userId": str(user.id), "stockItem": "Widgets", "countedAmount": 1},
            format="json",
        )

        assert response.status_code == 500
        assert response.json() == {
            "message": "Error logging object count",
            "error": "database went away",
        }
