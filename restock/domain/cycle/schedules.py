"""
기본 발주 스케줄

- milk: 주 2회 (월 발주 → 화 도착, 수 발주 → 금 도착), 1박스 = 20병
- ice_cream: 매월 1·3번째 금요일 발주 → 12일 후(2주 뒤 수요일) 도착, 1박스 = 12개
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from restock.domain.cycle.cycle_rules import (
    CycleRule,
    MonthlyNthWeekdayRule,
    WeeklyCycleRule,
)
from restock.settings.constants import (
    ICE_CREAM_COVERAGE_DAYS,
    ICE_CREAM_DELIVER_LAG_DAYS,
    ICE_CREAM_ORDER_OCCURRENCES,
    ICE_CREAM_ORDER_WEEKDAY,
    ICE_CREAM_SCHEDULE,
    ICE_CREAM_UNITS_PER_BOX,
    MILK_BOTTLES_PER_BOX,
    MILK_COVERAGE_DAYS,
    MILK_SCHEDULE,
    MONDAY,
    TUESDAY,
    WEDNESDAY,
    FRIDAY,
)


@dataclass(frozen=True)
class Schedule:
    """발주 스케줄 (규칙 묶음 + 포장 단위)"""
    name: str
    label: str
    rules: Tuple[CycleRule, ...]
    units_per_box: int
    unit_name: str

    def describe(self) -> str:
        return f"{self.label}: " + ", ".join(rule.describe() for rule in self.rules)


MILK_WEEKLY = Schedule(
    name=MILK_SCHEDULE,
    label="우유",
    rules=(
        WeeklyCycleRule(order_weekday=MONDAY, deliver_weekday=TUESDAY, coverage_days=MILK_COVERAGE_DAYS),
        WeeklyCycleRule(order_weekday=WEDNESDAY, deliver_weekday=FRIDAY, coverage_days=MILK_COVERAGE_DAYS),
    ),
    units_per_box=MILK_BOTTLES_PER_BOX,
    unit_name="병",
)

ICE_CREAM_MONTHLY = Schedule(
    name=ICE_CREAM_SCHEDULE,
    label="아이스크림 원료",
    rules=(
        MonthlyNthWeekdayRule(
            weekday=ICE_CREAM_ORDER_WEEKDAY,
            occurrences_in_month=ICE_CREAM_ORDER_OCCURRENCES,
            deliver_lag_days=ICE_CREAM_DELIVER_LAG_DAYS,
            coverage_days=ICE_CREAM_COVERAGE_DAYS,
        ),
    ),
    units_per_box=ICE_CREAM_UNITS_PER_BOX,
    unit_name="개",
)

SCHEDULES: Dict[str, Schedule] = {
    MILK_WEEKLY.name: MILK_WEEKLY,
    ICE_CREAM_MONTHLY.name: ICE_CREAM_MONTHLY,
}


def get_schedule(name: str) -> Schedule:
    """이름으로 스케줄 조회

    'ice-cream' 처럼 하이픈 표기도 허용한다.

    Raises:
        KeyError: 등록되지 않은 스케줄
    """
    key = (name or "").strip().lower().replace("-", "_")
    if key not in SCHEDULES:
        raise KeyError(f"알 수 없는 스케줄: {name}")
    return SCHEDULES[key]
