"""
SqliteHistoryStore -- SQLite 기반 추천 이력 저장소

웹 서버와 CLI 프로세스가 같은 이력을 보도록 파일 DB 에 저장한다.
작업마다 연결을 열고 닫는다.
"""

import sqlite3
from pathlib import Path
from typing import List, Optional

from restock.infrastructure.history.history_store import HistoryEntry, HistoryStore
from restock.settings.constants import HISTORY_MAX_ENTRIES
from restock.utils.logger import get_logger

logger = get_logger(__name__)


SCHEMA = """
CREATE TABLE IF NOT EXISTS restock_history (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    schedule TEXT NOT NULL,
    product TEXT NOT NULL,
    stock REAL NOT NULL,
    usage REAL NOT NULL,
    holiday_usage REAL,
    safety_days REAL NOT NULL,
    multiplier REAL NOT NULL,
    recommended_qty INTEGER NOT NULL,
    date_label TEXT NOT NULL,
    created_at TEXT NOT NULL
)
"""

_COLUMNS = (
    "schedule", "product", "stock", "usage", "holiday_usage", "safety_days",
    "multiplier", "recommended_qty", "date_label", "created_at",
)


class SqliteHistoryStore(HistoryStore):
    """SQLite 이력 저장소

    Usage:
        store = SqliteHistoryStore(Path("data/restock_history.db"))
        store.append(entry)
        store.list_all("milk")
    """

    def __init__(self, db_path: Path, max_entries: int = HISTORY_MAX_ENTRIES):
        super().__init__(max_entries)
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = self._get_conn()
        try:
            conn.execute(SCHEMA)
            conn.commit()
        finally:
            conn.close()

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path), timeout=10)
        conn.row_factory = sqlite3.Row
        return conn

    def append(self, entry: HistoryEntry) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                f"INSERT INTO restock_history ({', '.join(_COLUMNS)}) "
                f"VALUES ({', '.join('?' for _ in _COLUMNS)})",
                tuple(getattr(entry, col) for col in _COLUMNS),
            )
            # 한도 초과분 삭제 (최신 max_entries 건만 유지)
            conn.execute(
                """DELETE FROM restock_history
                   WHERE schedule = ?
                     AND id NOT IN (
                         SELECT id FROM restock_history
                         WHERE schedule = ?
                         ORDER BY id DESC
                         LIMIT ?
                     )""",
                (entry.schedule, entry.schedule, self.max_entries),
            )
            conn.commit()
        finally:
            conn.close()
        logger.debug(f"이력 저장: {entry.schedule}/{entry.product} qty={entry.recommended_qty}")

    def list_all(self, schedule: Optional[str] = None) -> List[HistoryEntry]:
        conn = self._get_conn()
        try:
            if schedule is None:
                rows = conn.execute(
                    f"SELECT {', '.join(_COLUMNS)} FROM restock_history ORDER BY id DESC"
                ).fetchall()
            else:
                rows = conn.execute(
                    f"SELECT {', '.join(_COLUMNS)} FROM restock_history "
                    "WHERE schedule = ? ORDER BY id DESC",
                    (schedule,),
                ).fetchall()
        finally:
            conn.close()
        return [HistoryEntry(**dict(row)) for row in rows]

    def clear(self, schedule: Optional[str] = None) -> int:
        conn = self._get_conn()
        try:
            if schedule is None:
                cursor = conn.execute("DELETE FROM restock_history")
            else:
                cursor = conn.execute(
                    "DELETE FROM restock_history WHERE schedule = ?", (schedule,)
                )
            conn.commit()
            removed = cursor.rowcount
        finally:
            conn.close()
        logger.info(f"이력 삭제: {removed}건 (schedule={schedule or '전체'})")
        return removed
