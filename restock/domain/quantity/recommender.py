"""
QuantityRecommender -- 추천 발주량 / 긴급도 순수 로직

공식:
    도착 시 재고 = max(0, 현재 재고 - 도착 전 소비)
    안전재고     = 안전재고용 일평균 × 안전재고 일수
    추천 발주량  = max(0, ceil(커버 수요 + 안전재고 - 도착 시 재고))   # 박스 단위 올림
    재고 소진 일수 = 현재 재고 / 전체 일평균 (일평균 0 → inf)

긴급도 (먼저 맞는 것):
    urgent: 소진 일수 < 도착까지 일수              (도착 전에 재고 소진)
    warn:   소진 일수 < 도착까지 일수 + 여유 일수   (도착 후 여유 부족)
    ok:     그 외

예외를 던지지 않는다. 0 사용량, 0 재고는 clamp 와 inf 로 처리한다.
"""

import math
from dataclasses import dataclass
from typing import Iterable

from restock.settings.constants import (
    URGENCY_OK,
    URGENCY_RANK,
    URGENCY_URGENT,
    URGENCY_WARN,
)

QTY_FLOAT_TOLERANCE = 1e-12


@dataclass(frozen=True)
class QuantityDecision:
    """수량 계산 결과"""
    stock_at_delivery: float
    safety_stock: float
    recommended_qty: int
    stock_duration_days: float
    urgency: str

    @property
    def needs_order(self) -> bool:
        return self.recommended_qty > 0


def classify_urgency(
    stock_duration_days: float,
    days_to_deliver: int,
    warn_margin_days: int,
) -> str:
    """재고 소진 일수 기준 긴급도 분류"""
    if stock_duration_days < days_to_deliver:
        return URGENCY_URGENT
    if stock_duration_days < days_to_deliver + warn_margin_days:
        return URGENCY_WARN
    return URGENCY_OK


def worst_urgency(urgencies: Iterable[str]) -> str:
    """여러 품목 중 가장 높은 긴급도 (urgent > warn > ok)"""
    return max(urgencies, key=lambda u: URGENCY_RANK.get(u, 0), default=URGENCY_OK)


def recommend_quantity(
    stock: float,
    pre_delivery_demand: float,
    coverage_demand: float,
    safety_days: float,
    safety_daily_usage: float,
    average_daily_usage: float,
    days_to_deliver: int,
    warn_margin_days: int,
) -> QuantityDecision:
    """추천 발주량 계산

    Args:
        stock: 현재 재고 (박스)
        pre_delivery_demand: 오늘 ~ 도착일 소비량
        coverage_demand: 도착일 ~ 다음다음 도착일 소비량
        safety_days: 안전재고 일수
        safety_daily_usage: 안전재고 산출용 일평균
        average_daily_usage: 재고 소진 일수 산출용 전체 일평균
        days_to_deliver: 도착까지 일수
        warn_margin_days: warn 여유 일수

    Returns:
        QuantityDecision
    """
    stock_at_delivery = max(0.0, stock - pre_delivery_demand)
    safety_stock = safety_daily_usage * safety_days

    raw_qty = coverage_demand + safety_stock - stock_at_delivery
    # 정수 바로 위의 부동소수 오차 (예: 2.0000000000000004) 만 정수로 본다
    nearest = round(raw_qty)
    if 0 < raw_qty - nearest <= QTY_FLOAT_TOLERANCE:
        raw_qty = nearest
    recommended_qty = max(0, math.ceil(raw_qty))

    if average_daily_usage > 0:
        stock_duration_days = stock / average_daily_usage
    else:
        stock_duration_days = math.inf

    return QuantityDecision(
        stock_at_delivery=stock_at_delivery,
        safety_stock=safety_stock,
        recommended_qty=recommended_qty,
        stock_duration_days=stock_duration_days,
        urgency=classify_urgency(stock_duration_days, days_to_deliver, warn_margin_days),
    )
