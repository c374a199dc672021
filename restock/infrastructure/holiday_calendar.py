"""
공휴일 달력 (holidays 라이브러리 기반)

국가 코드가 설정되면 평일에 걸친 공휴일을 휴일 수요로 분류할 수 있도록
구간 내 공휴일 날짜 집합을 제공한다.
국가 코드가 없으면 빈 집합 (토·일만 휴일).
"""

from datetime import date
from functools import lru_cache
from typing import FrozenSet, Optional

import holidays

from restock.utils.logger import get_logger
from restock.validation.validation_result import InvalidInputError, ValidationResult

logger = get_logger(__name__)


@lru_cache(maxsize=32)
def _country_holidays(country: str, year: int) -> FrozenSet[date]:
    """해당 국가/연도 공휴일 (연도별 캐시)"""
    calendar = holidays.country_holidays(country, years=year)
    return frozenset(calendar.keys())


class HolidayCalendar:
    """국가 공휴일 조회

    Usage:
        cal = HolidayCalendar("KR")
        cal.is_holiday(date(2026, 9, 25))            # True (추석)
        cal.dates_between(date(2026, 9, 21), date(2026, 9, 28))
    """

    def __init__(self, country: Optional[str] = None):
        self.country = (country or "").strip().upper() or None
        if self.country:
            # 잘못된 국가 코드는 생성 시점에 입력 오류로 실패시킨다
            try:
                holidays.country_holidays(self.country)
            except NotImplementedError:
                result = ValidationResult()
                result.add_error(
                    "UNKNOWN_COUNTRY",
                    f"지원하지 않는 공휴일 국가 코드: {self.country}",
                    "country",
                    {"country": self.country},
                )
                raise InvalidInputError(result) from None
            logger.info(f"공휴일 달력 사용: {self.country}")

    @property
    def enabled(self) -> bool:
        return self.country is not None

    def is_holiday(self, d: date) -> bool:
        if not self.enabled:
            return False
        return d in _country_holidays(self.country, d.year)

    def dates_between(self, start: date, end: date) -> FrozenSet[date]:
        """[start, end) 구간 공휴일 날짜"""
        if not self.enabled or end <= start:
            return frozenset()
        found = set()
        for year in range(start.year, end.year + 1):
            found.update(d for d in _country_holidays(self.country, year) if start <= d < end)
        return frozenset(found)
