"""
CycleResolver -- 다음 발주 주기 / 다음다음 도착일 계산

오늘 날짜와 주기 규칙 목록으로:
- 다음 발주일 / 도착일 (next)
- 그 다음 도착일 (after_next) → 커버 일수 계산용
을 구합니다. I/O 없는 순수 계산이며 결과는 호출마다 새로 만든다.

탐색 방식 (주간/월간 공통):
    이번 달 1일부터 horizon_months 개월 동안 모든 규칙의 발주 건을 모아
    (발주일, 선언 순서)로 정렬 → 발주일 >= 오늘 인 첫 건이 next,
    도착일이 next 도착일보다 엄격히 뒤인 첫 건이 after_next.

Usage:
    from restock.domain.cycle.cycle_resolver import resolve_next_cycle

    plan = resolve_next_cycle(date(2026, 10, 12), MILK_WEEKLY.rules)
    plan.next.days_to_order  # 0
    plan.coverage_days       # 3
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Sequence

from restock.domain.cycle.cycle_rules import CycleRule
from restock.domain.errors import UnresolvedCycleError
from restock.settings.constants import DAY_OF_WEEK_KR, FORWARD_SCAN_MONTHS
from restock.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CycleOccurrence:
    """규칙 하나가 만든 구체적인 발주 건"""
    order_date: date
    deliver_date: date
    rule_index: int       # 규칙 선언 순서 (동률 정렬용)
    coverage_days: int    # 규칙의 기본 커버 일수


@dataclass(frozen=True)
class ResolvedCycle:
    """오늘 기준으로 구체화된 주기"""
    order_date: date
    deliver_date: date
    days_to_order: int
    days_to_deliver: int

    @classmethod
    def from_occurrence(cls, occ: CycleOccurrence, today: date) -> "ResolvedCycle":
        return cls(
            order_date=occ.order_date,
            deliver_date=occ.deliver_date,
            days_to_order=(occ.order_date - today).days,
            days_to_deliver=(occ.deliver_date - today).days,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "order_date": self.order_date.isoformat(),
            "deliver_date": self.deliver_date.isoformat(),
            "days_to_order": self.days_to_order,
            "days_to_deliver": self.days_to_deliver,
        }


@dataclass(frozen=True)
class CyclePlan:
    """주기 계산 결과

    coverage_days: next 도착일 ~ after_next 도착일 일수.
    after_next 가 없으면 next 규칙의 기본 커버 일수.
    """
    today: date
    next: ResolvedCycle
    after_next: Optional[ResolvedCycle]
    coverage_days: int

    @property
    def coverage_end(self) -> date:
        """커버 구간 끝 (배타)"""
        if self.after_next is not None:
            return self.after_next.deliver_date
        return self.next.deliver_date + timedelta(days=self.coverage_days)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "today": self.today.isoformat(),
            "next": self.next.to_dict(),
            "after_next": self.after_next.to_dict() if self.after_next else None,
            "coverage_days": self.coverage_days,
        }


@dataclass(frozen=True)
class NextOrderStatus:
    """상태 배너용 다음 발주 요약"""
    order_date: date
    deliver_date: date
    days_to_order: int
    days_to_deliver: int
    is_order_day: bool

    @property
    def message(self) -> str:
        order_label = format_date_label(self.order_date)
        deliver_label = format_date_label(self.deliver_date)
        if self.is_order_day:
            return f"오늘({order_label})은 발주일입니다! 도착 예정: {deliver_label}"
        return (
            f"다음 발주({order_label})까지 {self.days_to_order}일, "
            f"도착 예정: {deliver_label}"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "order_date": self.order_date.isoformat(),
            "deliver_date": self.deliver_date.isoformat(),
            "days_to_order": self.days_to_order,
            "days_to_deliver": self.days_to_deliver,
            "is_order_day": self.is_order_day,
            "message": self.message,
        }


def format_date_label(d: date) -> str:
    """'10/12 (월)' 형식 날짜 라벨"""
    return f"{d.month}/{d.day} ({DAY_OF_WEEK_KR[d.weekday()]})"


def _scan_end(today: date, horizon_months: int) -> date:
    """탐색 마지막 날 (이번 달 포함 horizon_months 번째 달의 말일)"""
    month_index = today.year * 12 + (today.month - 1) + horizon_months
    first_after = date(month_index // 12, month_index % 12 + 1, 1)
    return first_after - timedelta(days=1)


def collect_occurrences(
    today: date,
    rules: Sequence[CycleRule],
    horizon_months: int = FORWARD_SCAN_MONTHS,
) -> List[CycleOccurrence]:
    """탐색 기간 내 모든 규칙의 발주 건 (발주일, 선언 순서 정렬)

    Args:
        today: 기준일
        rules: 주기 규칙 목록
        horizon_months: 이번 달 포함 탐색 개월 수

    Returns:
        정렬된 CycleOccurrence 리스트
    """
    if horizon_months < 1:
        return []
    start = today.replace(day=1)
    end = _scan_end(today, horizon_months)

    found = []
    for index, rule in enumerate(rules):
        for order_date, deliver_date in rule.occurrences(start, end):
            found.append(CycleOccurrence(
                order_date=order_date,
                deliver_date=deliver_date,
                rule_index=index,
                coverage_days=rule.coverage_days,
            ))
    found.sort(key=lambda o: (o.order_date, o.rule_index))
    return found


def resolve_next_cycle(
    today: date,
    rules: Sequence[CycleRule],
    horizon_months: int = FORWARD_SCAN_MONTHS,
) -> CyclePlan:
    """다음 주기와 다음다음 도착일 계산

    Args:
        today: 기준일 (테스트 시 주입)
        rules: 주기 규칙 목록
        horizon_months: 이번 달 포함 탐색 개월 수

    Returns:
        CyclePlan

    Raises:
        UnresolvedCycleError: 탐색 기간 내 발주일 >= today 인 건이 없을 때
    """
    upcoming = [
        occ for occ in collect_occurrences(today, rules, horizon_months)
        if occ.order_date >= today
    ]
    if not upcoming:
        raise UnresolvedCycleError(
            f"{horizon_months}개월 내 다음 발주 주기를 찾지 못했습니다 (기준일 {today.isoformat()})",
            today=today,
            horizon_months=horizon_months,
        )

    nxt = upcoming[0]
    after = next(
        (occ for occ in upcoming[1:] if occ.deliver_date > nxt.deliver_date),
        None,
    )

    if after is not None:
        coverage_days = (after.deliver_date - nxt.deliver_date).days
    else:
        coverage_days = nxt.coverage_days
        logger.warning(
            f"다음다음 도착일 없음 → 기본 커버 {coverage_days}일 사용 "
            f"(기준일 {today.isoformat()})"
        )

    plan = CyclePlan(
        today=today,
        next=ResolvedCycle.from_occurrence(nxt, today),
        after_next=ResolvedCycle.from_occurrence(after, today) if after else None,
        coverage_days=coverage_days,
    )
    logger.debug(
        f"주기 계산: 발주 {nxt.order_date} (D-{plan.next.days_to_order}) → "
        f"도착 {nxt.deliver_date} (D-{plan.next.days_to_deliver}), 커버 {coverage_days}일"
    )
    return plan


def describe_next_order(
    today: date,
    rules: Sequence[CycleRule],
    horizon_months: int = FORWARD_SCAN_MONTHS,
) -> NextOrderStatus:
    """상태 배너용 다음 발주 정보

    Raises:
        UnresolvedCycleError: resolve_next_cycle 과 동일
    """
    plan = resolve_next_cycle(today, rules, horizon_months)
    return NextOrderStatus(
        order_date=plan.next.order_date,
        deliver_date=plan.next.deliver_date,
        days_to_order=plan.next.days_to_order,
        days_to_deliver=plan.next.days_to_deliver,
        is_order_day=plan.next.days_to_order == 0,
    )
