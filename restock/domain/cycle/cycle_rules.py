"""
CycleRule -- 반복 발주/도착 주기 규칙

설정 시점에 정의되고 이후 변경되지 않는 값 객체.
각 규칙은 탐색 구간 안의 (발주일, 도착일) 쌍을 생성합니다.

- WeeklyCycleRule: 고정 발주 요일 → 고정 도착 요일 (예: 월 발주 → 화 도착)
- MonthlyNthWeekdayRule: 매월 N번째 W요일 발주 → 고정 일수 후 도착
  (예: 1·3번째 금요일 발주 → 12일 후 도착)

요일 인덱스는 date.weekday() 기준 (0=월, 6=일).
"""

import calendar
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator, List, Optional, Tuple

from restock.settings.constants import DAY_OF_WEEK_KR


def get_nth_weekday(year: int, month: int, weekday: int, n: int) -> Optional[date]:
    """해당 월의 N번째 W요일

    첫 번째 W요일에 (n-1)×7일을 더한다. 결과가 다음 달로 넘어가면
    (그 달에 W요일이 n번 없으면) None.

    Args:
        year: 연도
        month: 월 (1~12)
        weekday: 요일 (0=월, 6=일)
        n: 1부터 시작하는 순번

    Returns:
        해당 날짜 또는 None
    """
    if n < 1:
        return None
    first_weekday, days_in_month = calendar.monthrange(year, month)
    day = 1 + (weekday - first_weekday) % 7 + (n - 1) * 7
    if day > days_in_month:
        return None
    return date(year, month, day)


def get_nth_friday(year: int, month: int, n: int) -> Optional[date]:
    """해당 월의 N번째 금요일 (없으면 None)"""
    return get_nth_weekday(year, month, calendar.FRIDAY, n)


def iter_months(start: date, end: date) -> Iterator[Tuple[int, int]]:
    """start가 속한 월부터 end가 속한 월까지 (year, month)"""
    year, month = start.year, start.month
    while (year, month) <= (end.year, end.month):
        yield year, month
        month += 1
        if month > 12:
            year, month = year + 1, 1


class CycleRule(ABC):
    """발주 주기 규칙 인터페이스"""

    coverage_days: int

    @abstractmethod
    def occurrences(self, start: date, end: date) -> List[Tuple[date, date]]:
        """[start, end] 구간에 발주일이 있는 (발주일, 도착일) 목록 (발주일 오름차순)"""

    @abstractmethod
    def describe(self) -> str:
        """사람이 읽는 규칙 설명"""


@dataclass(frozen=True)
class WeeklyCycleRule(CycleRule):
    """주간 고정 요일 주기

    도착 요일이 발주 요일과 같거나 앞서면 다음 주 도착으로 본다.
    (도착은 절대 자기 발주보다 먼저 오지 않는다)
    """
    order_weekday: int
    deliver_weekday: int
    coverage_days: int = 3

    def __post_init__(self):
        for value in (self.order_weekday, self.deliver_weekday):
            if not 0 <= value <= 6:
                raise ValueError(f"요일 인덱스 범위 오류: {value}")

    @property
    def deliver_lag_days(self) -> int:
        """발주일 → 도착일 일수 (1~7)"""
        return (self.deliver_weekday - self.order_weekday) % 7 or 7

    def occurrences(self, start: date, end: date) -> List[Tuple[date, date]]:
        lag = timedelta(days=self.deliver_lag_days)
        order_date = start + timedelta(days=(self.order_weekday - start.weekday()) % 7)
        result = []
        while order_date <= end:
            result.append((order_date, order_date + lag))
            order_date += timedelta(days=7)
        return result

    def describe(self) -> str:
        return (
            f"매주 {DAY_OF_WEEK_KR[self.order_weekday]} 발주 → "
            f"{DAY_OF_WEEK_KR[self.deliver_weekday]} 도착"
        )


@dataclass(frozen=True)
class MonthlyNthWeekdayRule(CycleRule):
    """매월 N번째 W요일 발주 주기

    occurrences 에 나열된 순번마다 발주하며,
    그 달에 해당 순번이 없으면 건너뛴다.
    """
    weekday: int
    occurrences_in_month: Tuple[int, ...]
    deliver_lag_days: int
    coverage_days: int = 14

    def __post_init__(self):
        if not 0 <= self.weekday <= 6:
            raise ValueError(f"요일 인덱스 범위 오류: {self.weekday}")
        if self.deliver_lag_days < 0:
            raise ValueError(f"도착 지연 일수는 0 이상이어야 합니다: {self.deliver_lag_days}")
        if not self.occurrences_in_month:
            raise ValueError("월간 발주 순번이 비어 있습니다")

    def occurrences(self, start: date, end: date) -> List[Tuple[date, date]]:
        lag = timedelta(days=self.deliver_lag_days)
        result = []
        for year, month in iter_months(start, end):
            for n in sorted(self.occurrences_in_month):
                order_date = get_nth_weekday(year, month, self.weekday, n)
                if order_date is None or not start <= order_date <= end:
                    continue
                result.append((order_date, order_date + lag))
        return result

    def describe(self) -> str:
        nth = "·".join(str(n) for n in sorted(self.occurrences_in_month))
        return (
            f"매월 {nth}번째 {DAY_OF_WEEK_KR[self.weekday]}요일 발주 → "
            f"{self.deliver_lag_days}일 후 도착"
        )
