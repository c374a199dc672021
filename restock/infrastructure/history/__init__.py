"""추천 이력 저장소"""

from restock.infrastructure.history.history_store import (  # noqa: F401
    HistoryEntry,
    HistoryStore,
    InMemoryHistoryStore,
)
from restock.infrastructure.history.sqlite_history_store import SqliteHistoryStore  # noqa: F401
