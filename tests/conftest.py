"""
공유 테스트 픽스처

- 고정 기준일 (2026-10 달력 기준)
- 스케줄별 엔진
- 이력 저장소 (in-memory / SQLite 파일)
- Flask 테스트 앱 (오늘 날짜 주입)
"""

import sys
from datetime import date
from pathlib import Path

import pytest

# 프로젝트 루트를 sys.path에 추가
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from restock.application.services.restock_engine import RestockEngine  # noqa: E402
from restock.domain.cycle.schedules import ICE_CREAM_MONTHLY, MILK_WEEKLY  # noqa: E402
from restock.infrastructure.history.history_store import InMemoryHistoryStore  # noqa: E402
from restock.infrastructure.history.sqlite_history_store import SqliteHistoryStore  # noqa: E402
from restock.infrastructure.holiday_calendar import HolidayCalendar  # noqa: E402

# 2026-10 달력: 10/1 목, 금요일 = 2, 9, 16, 23, 30
MONDAY_ORDER_DAY = date(2026, 10, 12)       # 우유 발주일 (월 → 화 도착)


@pytest.fixture
def milk_engine():
    """우유 엔진 (공휴일 없음)"""
    return RestockEngine(MILK_WEEKLY, holiday_calendar=HolidayCalendar())


@pytest.fixture
def ice_cream_engine():
    """아이스크림 원료 엔진 (공휴일 없음)"""
    return RestockEngine(ICE_CREAM_MONTHLY, holiday_calendar=HolidayCalendar())


@pytest.fixture
def memory_store():
    return InMemoryHistoryStore()


@pytest.fixture(params=["memory", "sqlite"])
def history_store(request, tmp_path):
    """두 구현 공통 계약 테스트용"""
    if request.param == "memory":
        return InMemoryHistoryStore()
    return SqliteHistoryStore(tmp_path / "contract_history.db")


@pytest.fixture
def flask_app(memory_store):
    """Flask 테스트 앱 (기준일 2026-10-12 월요일)"""
    from restock.web.app import create_app

    app = create_app(
        history_store=memory_store,
        today_provider=lambda: MONDAY_ORDER_DAY,
        holiday_calendar=HolidayCalendar(),
    )
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(flask_app):
    """Flask 테스트 클라이언트"""
    return flask_app.test_client()
