"""
RestockEngine -- 주기 계산 → 수요 구간 → 추천 수량 파이프라인

데이터 흐름 (단방향, 공유 상태 없음):
    오늘 + 스케줄 규칙 → resolve_next_cycle → CyclePlan
    CyclePlan → split_demand_window (도착 전 / 커버 구간) → DemandWindow
    DemandWindow + DemandProfile → recommend_quantity → RecommendationResult

엔진 인스턴스는 스케줄/달력/오늘 공급자만 들고 있으며
호출마다 입력만 읽고 새 결과를 만든다. (동시 호출 안전)
"""

from datetime import date
from typing import Callable, Iterable, Optional

from restock.domain.cycle.cycle_resolver import (
    CyclePlan,
    NextOrderStatus,
    describe_next_order,
    resolve_next_cycle,
)
from restock.domain.cycle.schedules import Schedule
from restock.domain.demand.coverage import split_demand_window
from restock.domain.demand.demand_model import DemandProfile, demand_model_for
from restock.domain.quantity.recommender import recommend_quantity
from restock.domain.quantity.result import BatchRecommendation, RecommendationResult
from restock.infrastructure.holiday_calendar import HolidayCalendar
from restock.settings.constants import FORWARD_SCAN_MONTHS
from restock.utils.logger import get_logger, log_with_context

logger = get_logger(__name__)


class RestockEngine:
    """스케줄 단위 재고 보충 추천 엔진

    Usage:
        engine = RestockEngine(MILK_WEEKLY)
        result = engine.recommend(DemandProfile.uniform(2, 1), today=date(2026, 10, 12))
        result.recommended_qty  # 3

        engine = RestockEngine(ICE_CREAM_MONTHLY)
        batch = engine.recommend_all([vanilla, milk])
        batch.worst_urgency
    """

    def __init__(
        self,
        schedule: Schedule,
        holiday_calendar: Optional[HolidayCalendar] = None,
        today_provider: Optional[Callable[[], date]] = None,
        horizon_months: int = FORWARD_SCAN_MONTHS,
    ):
        """초기화

        Args:
            schedule: 발주 스케줄
            holiday_calendar: 공휴일 달력 (None 이면 토·일만 휴일)
            today_provider: 오늘 날짜 공급 함수 (기본: date.today)
            horizon_months: 주기 탐색 개월 수
        """
        self.schedule = schedule
        self.holiday_calendar = holiday_calendar or HolidayCalendar()
        self.today_provider = today_provider or date.today
        self.horizon_months = horizon_months

    def _today(self, today: Optional[date]) -> date:
        return today if today is not None else self.today_provider()

    def plan(self, today: Optional[date] = None) -> CyclePlan:
        """다음 주기 계산

        Raises:
            UnresolvedCycleError: 탐색 기간 내 주기 없음
        """
        return resolve_next_cycle(self._today(today), self.schedule.rules, self.horizon_months)

    def status(self, today: Optional[date] = None) -> NextOrderStatus:
        """상태 배너용 다음 발주 정보"""
        return describe_next_order(self._today(today), self.schedule.rules, self.horizon_months)

    def recommend(self, profile: DemandProfile, today: Optional[date] = None) -> RecommendationResult:
        """품목 1개 추천

        Raises:
            UnresolvedCycleError: 탐색 기간 내 주기 없음
        """
        return self.recommend_for_plan(profile, self.plan(today))

    def recommend_all(
        self,
        profiles: Iterable[DemandProfile],
        today: Optional[date] = None,
    ) -> BatchRecommendation:
        """여러 품목을 같은 주기로 추천"""
        plan = self.plan(today)
        results = tuple(self.recommend_for_plan(p, plan) for p in profiles)
        batch = BatchRecommendation(schedule=self.schedule.name, results=results)
        log_with_context(
            logger, "info", "다품목 추천 완료",
            schedule=self.schedule.name, products=len(results),
            total_qty=batch.total_qty, urgency=batch.worst_urgency,
        )
        return batch

    def recommend_for_plan(self, profile: DemandProfile, plan: CyclePlan) -> RecommendationResult:
        """이미 계산된 주기로 품목 추천"""
        deliver_date = plan.next.deliver_date
        coverage_end = plan.coverage_end
        holiday_dates = self.holiday_calendar.dates_between(plan.today, coverage_end)

        pre_window = split_demand_window(plan.today, deliver_date, holiday_dates)
        coverage_window = split_demand_window(deliver_date, coverage_end, holiday_dates)

        model = demand_model_for(profile)
        pre_delivery_demand = model.consumption(pre_window)
        coverage_demand = model.consumption(coverage_window)

        decision = recommend_quantity(
            stock=profile.stock,
            pre_delivery_demand=pre_delivery_demand,
            coverage_demand=coverage_demand,
            safety_days=profile.safety_days,
            safety_daily_usage=model.safety_daily_usage(coverage_window),
            average_daily_usage=model.average_daily_usage(),
            days_to_deliver=plan.next.days_to_deliver,
            warn_margin_days=model.warn_margin_days,
        )

        units_per_box = profile.units_per_box or self.schedule.units_per_box
        result = RecommendationResult(
            product=profile.name or self.schedule.name,
            next_order_date=plan.next.order_date,
            next_deliver_date=deliver_date,
            days_to_order=plan.next.days_to_order,
            days_to_deliver=plan.next.days_to_deliver,
            coverage_days=plan.coverage_days,
            pre_delivery_demand=pre_delivery_demand,
            coverage_demand=coverage_demand,
            stock_at_delivery=decision.stock_at_delivery,
            safety_stock=decision.safety_stock,
            recommended_qty=decision.recommended_qty,
            recommended_units=decision.recommended_qty * units_per_box,
            stock_duration_days=decision.stock_duration_days,
            urgency=decision.urgency,
            needs_order=decision.needs_order,
            coverage_weekdays=coverage_window.weekday_count,
            coverage_holidays=coverage_window.holiday_count,
        )
        log_with_context(
            logger, "debug", "추천 계산",
            schedule=self.schedule.name, product=result.product,
            classes=model.demand_classes, qty=result.recommended_qty,
            urgency=result.urgency,
        )
        return result
