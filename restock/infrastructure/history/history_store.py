"""
HistoryStore -- 최근 추천 이력 저장소 인터페이스

엔진은 이력을 읽지 않는다. 웹/CLI 가 계산 후에 따로 저장한다.
스케줄별 최대 HISTORY_MAX_ENTRIES 건, 최신순.

구현:
- InMemoryHistoryStore: 프로세스 메모리 (테스트, 단일 프로세스)
- SqliteHistoryStore: SQLite 파일 (sqlite_history_store.py)
"""

import threading
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from restock.domain.cycle.cycle_resolver import format_date_label
from restock.domain.demand.demand_model import DemandProfile
from restock.domain.quantity.result import RecommendationResult
from restock.settings.constants import HISTORY_MAX_ENTRIES


@dataclass(frozen=True)
class HistoryEntry:
    """이력 1건 (입력값 + 추천 결과)"""
    schedule: str
    product: str
    stock: float
    usage: float
    holiday_usage: Optional[float]
    safety_days: float
    multiplier: float
    recommended_qty: int
    date_label: str
    created_at: str

    @classmethod
    def from_result(
        cls,
        schedule: str,
        profile: DemandProfile,
        result: RecommendationResult,
        now: Optional[datetime] = None,
    ) -> "HistoryEntry":
        now = now or datetime.now()
        return cls(
            schedule=schedule,
            product=result.product,
            stock=profile.stock,
            usage=profile.weekday_usage,
            holiday_usage=profile.holiday_usage,
            safety_days=profile.safety_days,
            multiplier=profile.holiday_multiplier,
            recommended_qty=result.recommended_qty,
            date_label=format_date_label(now.date()),
            created_at=now.isoformat(timespec="seconds"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class HistoryStore(ABC):
    """이력 저장소 인터페이스 (추가 시 한도 유지, 전체 조회, 삭제)"""

    def __init__(self, max_entries: int = HISTORY_MAX_ENTRIES):
        self.max_entries = max_entries

    @abstractmethod
    def append(self, entry: HistoryEntry) -> None:
        """이력 추가 (같은 스케줄 한도 초과분은 오래된 것부터 삭제)"""

    @abstractmethod
    def list_all(self, schedule: Optional[str] = None) -> List[HistoryEntry]:
        """최신순 이력 (schedule 지정 시 해당 스케줄만)"""

    @abstractmethod
    def clear(self, schedule: Optional[str] = None) -> int:
        """이력 삭제, 삭제 건수 반환"""


class InMemoryHistoryStore(HistoryStore):
    """메모리 이력 저장소 (lock 으로 보호)"""

    def __init__(self, max_entries: int = HISTORY_MAX_ENTRIES):
        super().__init__(max_entries)
        self._entries: List[HistoryEntry] = []
        self._lock = threading.Lock()

    def append(self, entry: HistoryEntry) -> None:
        with self._lock:
            self._entries.insert(0, entry)
            kept, seen = [], 0
            for e in self._entries:
                if e.schedule == entry.schedule:
                    seen += 1
                    if seen > self.max_entries:
                        continue
                kept.append(e)
            self._entries = kept

    def list_all(self, schedule: Optional[str] = None) -> List[HistoryEntry]:
        with self._lock:
            return [e for e in self._entries if schedule is None or e.schedule == schedule]

    def clear(self, schedule: Optional[str] = None) -> int:
        with self._lock:
            keep = [e for e in self._entries if schedule is not None and e.schedule != schedule]
            removed = len(self._entries) - len(keep)
            self._entries = keep
            return removed
