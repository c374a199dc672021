"""
CoverageCalculator -- 수요 구간의 평일/휴일 일수 분리

[from, to) 구간(시작 포함, 끝 제외)의 달력 일수를
평일(월~금) / 휴일(토·일)로 나눈다.

완전한 주는 5/2 로 한 번에 더하고, 남는 6일 이하만 요일 산술로 분류한다.
공휴일 집합이 주어지면 평일 중 공휴일을 휴일로 옮긴다.
"""

from dataclasses import dataclass
from datetime import date
from typing import AbstractSet, Any, Dict

from restock.settings.constants import (
    HOLIDAYS_PER_WEEK,
    WEEKDAYS_PER_WEEK,
    WEEKEND_DAYS,
)


@dataclass(frozen=True)
class DemandWindow:
    """수요 구간 일수"""
    weekday_count: int
    holiday_count: int

    @property
    def total_days(self) -> int:
        return self.weekday_count + self.holiday_count

    def to_dict(self) -> Dict[str, Any]:
        return {
            "weekday_count": self.weekday_count,
            "holiday_count": self.holiday_count,
            "total_days": self.total_days,
        }


EMPTY_WINDOW = DemandWindow(weekday_count=0, holiday_count=0)


def split_demand_window(
    start: date,
    end: date,
    holiday_dates: AbstractSet[date] = frozenset(),
) -> DemandWindow:
    """[start, end) 구간 평일/휴일 일수

    Args:
        start: 구간 시작 (포함)
        end: 구간 끝 (제외)
        holiday_dates: 휴일로 볼 공휴일 날짜 집합 (주말과 겹치면 무시)

    Returns:
        DemandWindow. end <= start 이면 (0, 0)
    """
    total = (end - start).days
    if total <= 0:
        return EMPTY_WINDOW

    full_weeks, remainder = divmod(total, 7)
    holidays = full_weeks * HOLIDAYS_PER_WEEK
    start_weekday = start.weekday()
    for offset in range(remainder):
        if (start_weekday + offset) % 7 in WEEKEND_DAYS:
            holidays += 1

    # 평일에 걸친 공휴일 → 휴일 수요
    holidays += sum(
        1 for d in holiday_dates
        if start <= d < end and d.weekday() not in WEEKEND_DAYS
    )

    return DemandWindow(weekday_count=total - holidays, holiday_count=holidays)


# 주간 평균 산출용 (평일 5 : 휴일 2)
WEEK_SPLIT = DemandWindow(weekday_count=WEEKDAYS_PER_WEEK, holiday_count=HOLIDAYS_PER_WEEK)
