"""
통합 설정 진입점

- 프로젝트 경로
- .env 로드 (python-dotenv)
- 환경변수 기반 런타임 설정

Usage:
    from restock.settings.app_config import HISTORY_DB_PATH, HOLIDAY_COUNTRY
    from restock.settings.constants import HISTORY_MAX_ENTRIES
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# ── 프로젝트 경로 ──
PROJECT_ROOT = Path(__file__).parent.parent.parent
DATA_DIR = PROJECT_ROOT / "data"

load_dotenv(PROJECT_ROOT / ".env")

# ── 이력 저장소 ──
HISTORY_DB_PATH = Path(
    os.getenv("RESTOCK_HISTORY_DB") or DATA_DIR / "restock_history.db"
)

# ── 공휴일 ──
# 빈 값이면 토·일만 휴일 수요로 본다 (예: "TW", "KR")
HOLIDAY_COUNTRY = os.getenv("RESTOCK_HOLIDAY_COUNTRY", "").strip().upper() or None

# ── 웹 ──
WEB_HOST = os.getenv("RESTOCK_WEB_HOST", "127.0.0.1")
WEB_PORT = int(os.getenv("RESTOCK_WEB_PORT", "5000"))
