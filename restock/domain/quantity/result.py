"""
추천 결과 레코드

RecommendationResult: 품목 1개, 호출 1회당 1개 생성되는 불변 결과값
BatchRecommendation: 같은 주기로 계산한 여러 품목 결과 + 요약
"""

import math
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional, Tuple

from restock.domain.quantity.recommender import worst_urgency


def _round1(value: float) -> Optional[float]:
    """표시용 소수 1자리 (inf → None)"""
    if math.isinf(value):
        return None
    return round(value, 1)


@dataclass(frozen=True)
class RecommendationResult:
    """품목별 추천 결과"""
    product: str
    next_order_date: date
    next_deliver_date: date
    days_to_order: int
    days_to_deliver: int
    coverage_days: int
    pre_delivery_demand: float
    coverage_demand: float
    stock_at_delivery: float
    safety_stock: float
    recommended_qty: int
    recommended_units: int
    stock_duration_days: float
    urgency: str
    needs_order: bool
    coverage_weekdays: int
    coverage_holidays: int

    @property
    def stock_duration_unbounded(self) -> bool:
        return math.isinf(self.stock_duration_days)

    def to_dict(self) -> Dict[str, Any]:
        """JSON 직렬화용 (inf 는 None + unbounded 플래그)"""
        return {
            "product": self.product,
            "next_order_date": self.next_order_date.isoformat(),
            "next_deliver_date": self.next_deliver_date.isoformat(),
            "days_to_order": self.days_to_order,
            "days_to_deliver": self.days_to_deliver,
            "coverage_days": self.coverage_days,
            "coverage_weekdays": self.coverage_weekdays,
            "coverage_holidays": self.coverage_holidays,
            "pre_delivery_demand": _round1(self.pre_delivery_demand),
            "coverage_demand": _round1(self.coverage_demand),
            "stock_at_delivery": _round1(self.stock_at_delivery),
            "safety_stock": _round1(self.safety_stock),
            "recommended_qty": self.recommended_qty,
            "recommended_units": self.recommended_units,
            "stock_duration_days": _round1(self.stock_duration_days),
            "stock_duration_unbounded": self.stock_duration_unbounded,
            "urgency": self.urgency,
            "needs_order": self.needs_order,
        }


@dataclass(frozen=True)
class BatchRecommendation:
    """다품목 추천 결과"""
    schedule: str
    results: Tuple[RecommendationResult, ...]

    @property
    def total_qty(self) -> int:
        return sum(r.recommended_qty for r in self.results)

    @property
    def worst_urgency(self) -> str:
        return worst_urgency(r.urgency for r in self.results)

    @property
    def needs_order(self) -> bool:
        return any(r.needs_order for r in self.results)

    def get(self, product: str) -> RecommendationResult:
        for result in self.results:
            if result.product == product:
                return result
        raise KeyError(product)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schedule": self.schedule,
            "total_qty": self.total_qty,
            "worst_urgency": self.worst_urgency,
            "needs_order": self.needs_order,
            "results": [r.to_dict() for r in self.results],
        }
