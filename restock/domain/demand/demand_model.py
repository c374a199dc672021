"""
DemandModel -- 수요 구분(demand class) 수에 따른 소비량 계산 전략

두 엔진(우유 단일 사용량 / 아이스크림 평일·휴일 사용량)을 하나의 인터페이스로 묶는다.

- UniformDemandModel (1구분): 실사용량 = 일평균 × 연휴 배수, 모든 날 동일
- WeekdayHolidayDemandModel (2구분): 평일 수 × 평일 사용량 + 휴일 수 × 휴일 사용량

Usage:
    model = demand_model_for(profile)
    pre = model.consumption(split_demand_window(today, deliver_date))
    safety_usage = model.safety_daily_usage(coverage_window)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

from restock.domain.demand.coverage import DemandWindow, WEEK_SPLIT
from restock.settings.constants import (
    DEFAULT_HOLIDAY_MULTIPLIER,
    DEFAULT_SAFETY_DAYS,
    ICE_CREAM_WARN_MARGIN_DAYS,
    MILK_WARN_MARGIN_DAYS,
)


@dataclass(frozen=True)
class DemandProfile:
    """품목별 수요 입력 (호출마다 새로 전달, 코어에서 저장하지 않음)

    holiday_usage 가 None 이면 단일 사용량 프로필 (weekday_usage = 일평균).
    모든 값은 검증을 거친 0 이상의 숫자라고 가정한다.
    """
    stock: float
    weekday_usage: float
    holiday_usage: Optional[float] = None
    safety_days: float = DEFAULT_SAFETY_DAYS
    holiday_multiplier: float = DEFAULT_HOLIDAY_MULTIPLIER
    name: str = ""
    units_per_box: Optional[int] = None    # None 이면 스케줄 기본값

    @classmethod
    def uniform(
        cls,
        stock: float,
        daily_usage: float,
        safety_days: float = DEFAULT_SAFETY_DAYS,
        holiday_multiplier: float = DEFAULT_HOLIDAY_MULTIPLIER,
        name: str = "",
        units_per_box: Optional[int] = None,
    ) -> "DemandProfile":
        """단일 사용량 프로필 생성"""
        return cls(
            stock=stock,
            weekday_usage=daily_usage,
            safety_days=safety_days,
            holiday_multiplier=holiday_multiplier,
            name=name,
            units_per_box=units_per_box,
        )

    @classmethod
    def split(
        cls,
        stock: float,
        weekday_usage: float,
        holiday_usage: float,
        safety_days: float = DEFAULT_SAFETY_DAYS,
        holiday_multiplier: float = DEFAULT_HOLIDAY_MULTIPLIER,
        name: str = "",
        units_per_box: Optional[int] = None,
    ) -> "DemandProfile":
        """평일/휴일 사용량 프로필 생성"""
        return cls(
            stock=stock,
            weekday_usage=weekday_usage,
            holiday_usage=holiday_usage,
            safety_days=safety_days,
            holiday_multiplier=holiday_multiplier,
            name=name,
            units_per_box=units_per_box,
        )

    @property
    def demand_classes(self) -> int:
        return 1 if self.holiday_usage is None else 2

    @property
    def daily_usage(self) -> float:
        """단일 사용량 프로필의 일평균"""
        return self.weekday_usage

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "stock": self.stock,
            "weekday_usage": self.weekday_usage,
            "holiday_usage": self.holiday_usage,
            "safety_days": self.safety_days,
            "holiday_multiplier": self.holiday_multiplier,
            "units_per_box": self.units_per_box,
        }


class DemandModel(ABC):
    """수요 계산 전략 인터페이스"""

    @property
    @abstractmethod
    def demand_classes(self) -> int:
        """수요 구분 수 (1 또는 2)"""

    @property
    @abstractmethod
    def warn_margin_days(self) -> int:
        """warn 판정 여유 일수"""

    @abstractmethod
    def consumption(self, window: DemandWindow) -> float:
        """구간 소비량"""

    @abstractmethod
    def safety_daily_usage(self, coverage_window: DemandWindow) -> float:
        """안전재고 산출용 일평균"""

    @abstractmethod
    def average_daily_usage(self) -> float:
        """재고 소진 일수 산출용 전체 일평균"""


class UniformDemandModel(DemandModel):
    """단일 사용량 (1구분)

    연휴 배수는 주말이 아니라 여러 날 이어지는 연휴의 소비 증가를 뜻하므로
    모든 날에 똑같이 곱한다.
    """

    def __init__(self, daily_usage: float, holiday_multiplier: float = DEFAULT_HOLIDAY_MULTIPLIER):
        self.daily_usage = daily_usage
        self.holiday_multiplier = holiday_multiplier

    @property
    def demand_classes(self) -> int:
        return 1

    @property
    def warn_margin_days(self) -> int:
        return MILK_WARN_MARGIN_DAYS

    @property
    def effective_usage(self) -> float:
        return self.daily_usage * self.holiday_multiplier

    def consumption(self, window: DemandWindow) -> float:
        return window.total_days * self.effective_usage

    def safety_daily_usage(self, coverage_window: DemandWindow) -> float:
        return self.effective_usage

    def average_daily_usage(self) -> float:
        return self.effective_usage


class WeekdayHolidayDemandModel(DemandModel):
    """평일/휴일 사용량 (2구분)"""

    def __init__(
        self,
        weekday_usage: float,
        holiday_usage: float,
        holiday_multiplier: float = DEFAULT_HOLIDAY_MULTIPLIER,
    ):
        self.weekday_usage = weekday_usage * holiday_multiplier
        self.holiday_usage = holiday_usage * holiday_multiplier

    @property
    def demand_classes(self) -> int:
        return 2

    @property
    def warn_margin_days(self) -> int:
        return ICE_CREAM_WARN_MARGIN_DAYS

    def consumption(self, window: DemandWindow) -> float:
        return (
            window.weekday_count * self.weekday_usage
            + window.holiday_count * self.holiday_usage
        )

    def safety_daily_usage(self, coverage_window: DemandWindow) -> float:
        # 커버 구간 가중 평균, 빈 구간이면 평일 사용량
        if coverage_window.total_days == 0:
            return self.weekday_usage
        return self.consumption(coverage_window) / coverage_window.total_days

    def average_daily_usage(self) -> float:
        return self.consumption(WEEK_SPLIT) / WEEK_SPLIT.total_days


def demand_model_for(profile: DemandProfile) -> DemandModel:
    """프로필의 수요 구분 수에 맞는 전략 반환"""
    if profile.holiday_usage is None:
        return UniformDemandModel(profile.weekday_usage, profile.holiday_multiplier)
    return WeekdayHolidayDemandModel(
        profile.weekday_usage,
        profile.holiday_usage,
        profile.holiday_multiplier,
    )
