"""
재고 보충 추천 시스템 - 비즈니스 상수
- 요일 인덱스 / 표시명
- 발주 주기 (우유 주간, 아이스크림 월간)
- 포장 단위
- 긴급도 / 이력 한도

정식 경로: from restock.settings.constants import ...
"""

# =====================================================================
# 요일 (date.weekday() 기준: 0=월, 6=일)
# =====================================================================
MONDAY = 0
TUESDAY = 1
WEDNESDAY = 2
THURSDAY = 3
FRIDAY = 4
SATURDAY = 5
SUNDAY = 6

DAY_OF_WEEK_KR = {
    MONDAY: "월",
    TUESDAY: "화",
    WEDNESDAY: "수",
    THURSDAY: "목",
    FRIDAY: "금",
    SATURDAY: "토",
    SUNDAY: "일",
}

# 주말 = 휴일 수요 구간
WEEKEND_DAYS = frozenset({SATURDAY, SUNDAY})
WEEKDAYS_PER_WEEK = 5
HOLIDAYS_PER_WEEK = 2

# =====================================================================
# 주기 탐색
# =====================================================================
FORWARD_SCAN_MONTHS = 4          # 이번 달 포함 4개월치 주기 탐색

# =====================================================================
# 우유 (주간 2회 주기)
# =====================================================================
MILK_SCHEDULE = "milk"
MILK_BOTTLES_PER_BOX = 20        # 1박스 = 20병
MILK_COVERAGE_DAYS = 3           # 주기당 기본 커버 일수
MILK_WARN_MARGIN_DAYS = 1        # 도착 후 1일 미만 여유면 warn

# =====================================================================
# 아이스크림 원료 (매월 1·3번째 금요일)
# =====================================================================
ICE_CREAM_SCHEDULE = "ice_cream"
ICE_CREAM_ORDER_WEEKDAY = FRIDAY
ICE_CREAM_ORDER_OCCURRENCES = (1, 3)
ICE_CREAM_DELIVER_LAG_DAYS = 12  # 발주 12일 후 (2주 뒤 수요일) 도착
ICE_CREAM_COVERAGE_DAYS = 14     # 다음다음 도착일을 못 찾을 때 (약 반달)
ICE_CREAM_UNITS_PER_BOX = 12     # 바닐라 파우더 12팩, 멸균우유 12캔
ICE_CREAM_WARN_MARGIN_DAYS = 2

ICE_CREAM_PRODUCTS = {
    "vanilla": "바닐라 파우더",
    "milk": "멸균우유",
}

# =====================================================================
# 입력 기본값
# =====================================================================
DEFAULT_SAFETY_DAYS = 1.0
DEFAULT_HOLIDAY_MULTIPLIER = 1.0

# =====================================================================
# 긴급도
# =====================================================================
URGENCY_OK = "ok"
URGENCY_WARN = "warn"
URGENCY_URGENT = "urgent"

URGENCY_RANK = {URGENCY_OK: 0, URGENCY_WARN: 1, URGENCY_URGENT: 2}

# =====================================================================
# 이력
# =====================================================================
HISTORY_MAX_ENTRIES = 10
