"""
웹 API 테스트 (Flask test_client)

기준일: 2026-10-12 (월, 우유 발주일)
"""

from datetime import date
from unittest.mock import patch

import pytest

from restock.application.services.restock_engine import RestockEngine
from restock.domain.errors import UnresolvedCycleError

ICE_CREAM_FORM = {
    "vanilla_stock": 10, "vanilla_weekday": 1, "vanilla_holiday": 2,
    "milk_stock": 5, "milk_weekday": 1, "milk_holiday": 1,
    "safety_days": 1, "today": "2026-10-16",
}


class TestStatusApi:

    @pytest.mark.integration
    def test_milk_status(self, client):
        resp = client.get("/api/milk/status")
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["schedule"] == "milk"
        assert data["status"]["is_order_day"] is True
        assert data["status"]["deliver_date"] == "2026-10-13"
        assert data["plan"]["coverage_days"] == 3

    @pytest.mark.integration
    def test_ice_cream_status_with_today(self, client):
        resp = client.get("/api/ice-cream/status?today=2026-10-17")
        data = resp.get_json()
        assert resp.status_code == 200
        assert data["status"]["order_date"] == "2026-11-06"
        assert data["status"]["days_to_order"] == 20

    @pytest.mark.integration
    def test_invalid_today(self, client):
        resp = client.get("/api/milk/status?today=yesterday")
        assert resp.status_code == 400
        assert resp.get_json()["code"] == "INVALID_INPUT"

    @pytest.mark.integration
    def test_unknown_schedule(self, client):
        resp = client.get("/api/bread/status")
        assert resp.status_code == 404
        assert resp.get_json()["code"] == "UNKNOWN_SCHEDULE"

    @pytest.mark.integration
    def test_schedules_list(self, client):
        data = client.get("/api/schedules").get_json()
        assert {s["name"] for s in data["schedules"]} == {"milk", "ice_cream"}
        assert data["today"] == "2026-10-12"


class TestRecommendApi:

    @pytest.mark.integration
    def test_milk_scenario_a(self, client, memory_store):
        resp = client.post("/api/milk/recommend", json={"current_stock": 2, "daily_usage": 1})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["today"] == "2026-10-12"
        assert data["total_qty"] == 3
        result = data["results"][0]
        assert result["recommended_qty"] == 3
        assert result["urgency"] == "ok"
        assert result["next_deliver_date"] == "2026-10-13"

        entries = memory_store.list_all("milk")
        assert len(entries) == 1
        assert entries[0].recommended_qty == 3

    @pytest.mark.integration
    def test_form_encoded_body(self, client):
        resp = client.post("/api/milk/recommend", data={"current_stock": "0.5", "daily_usage": "1"})
        assert resp.status_code == 200
        assert resp.get_json()["worst_urgency"] == "urgent"

    @pytest.mark.integration
    def test_ice_cream_batch(self, client, memory_store):
        resp = client.post("/api/ice-cream/recommend", json=ICE_CREAM_FORM)
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["schedule"] == "ice_cream"
        by_product = {r["product"]: r for r in data["results"]}
        assert by_product["vanilla"]["recommended_qty"] == 29
        assert by_product["milk"]["recommended_qty"] == 22
        assert data["total_qty"] == 51
        assert len(memory_store.list_all("ice_cream")) == 2

    @pytest.mark.integration
    def test_invalid_input(self, client, memory_store):
        resp = client.post("/api/milk/recommend", json={"current_stock": "abc", "daily_usage": -1})
        assert resp.status_code == 400
        data = resp.get_json()
        assert data["code"] == "INVALID_INPUT"
        fields = {e["field"] for e in data["errors"]}
        assert fields == {"current_stock", "daily_usage"}
        assert memory_store.list_all() == []

    @pytest.mark.integration
    def test_unresolved_cycle_is_422(self, client):
        error = UnresolvedCycleError("주기 없음", today=date(2026, 10, 12), horizon_months=4)
        with patch.object(RestockEngine, "recommend_all", side_effect=error):
            resp = client.post("/api/milk/recommend", json={"current_stock": 2, "daily_usage": 1})
        assert resp.status_code == 422
        data = resp.get_json()
        assert data["code"] == "UNRESOLVED_CYCLE"
        assert data["today"] == "2026-10-12"

    @pytest.mark.integration
    def test_method_not_allowed(self, client):
        resp = client.get("/api/milk/recommend")
        assert resp.status_code == 405
        assert resp.get_json()["code"] == "METHOD_NOT_ALLOWED"


class TestHistoryApi:

    @pytest.mark.integration
    def test_list_and_clear(self, client):
        client.post("/api/milk/recommend", json={"current_stock": 2, "daily_usage": 1})
        client.post("/api/ice-cream/recommend", json=ICE_CREAM_FORM)

        data = client.get("/api/history").get_json()
        assert data["count"] == 3

        data = client.get("/api/history?schedule=milk").get_json()
        assert data["count"] == 1
        assert data["entries"][0]["date_label"]

        resp = client.delete("/api/history?schedule=ice-cream")
        assert resp.get_json()["removed"] == 2
        assert client.get("/api/history").get_json()["count"] == 1

    @pytest.mark.integration
    def test_unknown_schedule_filter(self, client):
        assert client.get("/api/history?schedule=bread").status_code == 404


class TestAppBasics:

    @pytest.mark.integration
    def test_not_found_json(self, client):
        resp = client.get("/api/nothing/here/at/all")
        assert resp.status_code == 404
        assert resp.get_json()["code"] == "NOT_FOUND"

    @pytest.mark.integration
    def test_security_headers(self, client):
        resp = client.get("/api/milk/status")
        assert resp.headers["X-Content-Type-Options"] == "nosniff"
        assert resp.headers["X-Frame-Options"] == "DENY"
