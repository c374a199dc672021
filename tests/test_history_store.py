"""
추천 이력 저장소 테스트

in-memory / SQLite 두 구현 공통 계약 + SQLite 영속성
"""

from datetime import date, datetime

import pytest

from restock.application.services.restock_engine import RestockEngine
from restock.domain.cycle.schedules import MILK_WEEKLY
from restock.domain.demand.demand_model import DemandProfile
from restock.infrastructure.history.history_store import HistoryEntry
from restock.infrastructure.history.sqlite_history_store import SqliteHistoryStore


def _entry(schedule="milk", product="milk", qty=1, stock=2.0):
    return HistoryEntry(
        schedule=schedule,
        product=product,
        stock=stock,
        usage=1.0,
        holiday_usage=None,
        safety_days=1.0,
        multiplier=1.0,
        recommended_qty=qty,
        date_label="10/12 (월)",
        created_at="2026-10-12T09:00:00",
    )


class TestHistoryStoreContract:
    """두 구현이 같은 동작을 하는지"""

    @pytest.mark.unit
    def test_newest_first(self, history_store):
        for qty in (1, 2, 3):
            history_store.append(_entry(qty=qty))
        assert [e.recommended_qty for e in history_store.list_all()] == [3, 2, 1]

    @pytest.mark.unit
    def test_bounded_to_ten_per_schedule(self, history_store):
        for qty in range(12):
            history_store.append(_entry(qty=qty))
        entries = history_store.list_all("milk")
        assert len(entries) == 10
        assert entries[0].recommended_qty == 11
        assert entries[-1].recommended_qty == 2

    @pytest.mark.unit
    def test_limit_is_per_schedule(self, history_store):
        history_store.append(_entry(schedule="ice_cream", product="vanilla"))
        for qty in range(11):
            history_store.append(_entry(qty=qty))
        assert len(history_store.list_all("ice_cream")) == 1
        assert len(history_store.list_all("milk")) == 10
        assert len(history_store.list_all()) == 11

    @pytest.mark.unit
    def test_identical_entries_kept(self, history_store):
        history_store.append(_entry())
        history_store.append(_entry())
        assert len(history_store.list_all()) == 2

    @pytest.mark.unit
    def test_clear_by_schedule(self, history_store):
        history_store.append(_entry())
        history_store.append(_entry())
        history_store.append(_entry(schedule="ice_cream", product="vanilla"))
        assert history_store.clear("milk") == 2
        remaining = history_store.list_all()
        assert [e.schedule for e in remaining] == ["ice_cream"]

    @pytest.mark.unit
    def test_clear_all(self, history_store):
        history_store.append(_entry())
        history_store.append(_entry(schedule="ice_cream", product="vanilla"))
        assert history_store.clear() == 2
        assert history_store.list_all() == []

    @pytest.mark.unit
    def test_round_trip_fields(self, history_store):
        entry = _entry(stock=2.5)
        history_store.append(entry)
        assert history_store.list_all()[0] == entry


class TestSqliteHistoryStore:

    @pytest.mark.integration
    def test_persists_across_instances(self, tmp_path):
        db = tmp_path / "nested" / "history.db"
        SqliteHistoryStore(db).append(_entry(qty=7))
        entries = SqliteHistoryStore(db).list_all()
        assert len(entries) == 1
        assert entries[0].recommended_qty == 7

    @pytest.mark.integration
    def test_custom_limit(self, tmp_path):
        store = SqliteHistoryStore(tmp_path / "h.db", max_entries=3)
        for qty in range(5):
            store.append(_entry(qty=qty))
        assert [e.recommended_qty for e in store.list_all()] == [4, 3, 2]


class TestHistoryEntryFromResult:

    @pytest.mark.unit
    def test_from_result(self):
        profile = DemandProfile.uniform(stock=2, daily_usage=1, safety_days=1.5)
        engine = RestockEngine(MILK_WEEKLY)
        result = engine.recommend(profile, today=date(2026, 10, 12))

        entry = HistoryEntry.from_result("milk", profile, result, now=datetime(2026, 10, 12, 9, 30))
        assert entry.product == "milk"
        assert entry.stock == 2
        assert entry.usage == 1
        assert entry.holiday_usage is None
        assert entry.safety_days == 1.5
        assert entry.recommended_qty == result.recommended_qty
        assert entry.date_label == "10/12 (월)"
        assert entry.created_at == "2026-10-12T09:30:00"
        assert entry.to_dict()["schedule"] == "milk"
