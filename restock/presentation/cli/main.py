"""
CLI 진입점 -- 재고 보충 추천 명령 디스패처

Usage:
    restock milk --stock 2 --usage 1
    restock ice-cream --vanilla-stock 10 --vanilla-weekday 1 --vanilla-holiday 2 \\
        --milk-stock 5 --milk-weekday 1 --milk-holiday 1
    restock status milk
    restock history --schedule milk
    restock history --clear
    restock serve --port 8080

종료 코드: 0 정상, 1 입력 오류, 2 발주 주기 계산 불가
"""

import argparse
import sys
from typing import List, Optional

from restock.application.services.restock_engine import RestockEngine
from restock.domain.cycle.cycle_resolver import format_date_label
from restock.domain.cycle.schedules import SCHEDULES, Schedule, get_schedule
from restock.domain.errors import UnresolvedCycleError
from restock.domain.quantity.result import BatchRecommendation
from restock.infrastructure.history.history_store import HistoryEntry, HistoryStore
from restock.infrastructure.history.sqlite_history_store import SqliteHistoryStore
from restock.infrastructure.holiday_calendar import HolidayCalendar
from restock.settings.app_config import HISTORY_DB_PATH, HOLIDAY_COUNTRY, WEB_HOST, WEB_PORT
from restock.settings.constants import (
    ICE_CREAM_PRODUCTS,
    ICE_CREAM_SCHEDULE,
    MILK_SCHEDULE,
)
from restock.utils.logger import get_logger
from restock.validation import (
    InvalidInputError,
    ValidationResult,
    parse_ice_cream_form,
    parse_milk_form,
)
from restock.validation.input_validator import FormInput, parse_today

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_UNRESOLVED_CYCLE = 2

URGENCY_LABELS = {"ok": "여유", "warn": "주의", "urgent": "긴급"}


def create_parser() -> argparse.ArgumentParser:
    """CLI 파서 생성"""
    parser = argparse.ArgumentParser(
        prog="restock",
        description="우유/아이스크림 원료 재고 보충 추천 CLI",
    )
    parser.add_argument("--db", type=str, default=None, help="이력 DB 경로")
    parser.add_argument("--country", type=str, default=None, help="공휴일 국가 코드 (예: KR)")

    subparsers = parser.add_subparsers(dest="command", help="명령")

    # milk 명령
    milk_parser = subparsers.add_parser("milk", help="우유 추천")
    milk_parser.add_argument("--stock", type=str, required=True, help="현재 재고 (박스)")
    milk_parser.add_argument("--usage", type=str, required=True, help="일평균 사용량 (박스/일)")
    _add_common_arguments(milk_parser)

    # ice-cream 명령
    ice_parser = subparsers.add_parser("ice-cream", help="아이스크림 원료 추천")
    for product, label in ICE_CREAM_PRODUCTS.items():
        ice_parser.add_argument(f"--{product}-stock", type=str, required=True, help=f"{label} 재고 (박스)")
        ice_parser.add_argument(f"--{product}-weekday", type=str, required=True, help=f"{label} 평일 사용량 (박스/일)")
        ice_parser.add_argument(f"--{product}-holiday", type=str, required=True, help=f"{label} 휴일 사용량 (박스/일)")
    _add_common_arguments(ice_parser)

    # status 명령
    status_parser = subparsers.add_parser("status", help="다음 발주일")
    status_parser.add_argument("schedule", help="스케줄 (milk, ice-cream)")
    status_parser.add_argument("--today", type=str, default=None, help="기준일 (YYYY-MM-DD)")

    # history 명령
    history_parser = subparsers.add_parser("history", help="추천 이력")
    history_parser.add_argument("--schedule", type=str, default=None, help="스케줄 필터")
    history_parser.add_argument("--clear", action="store_true", help="이력 삭제")

    # serve 명령
    serve_parser = subparsers.add_parser("serve", help="웹 API 서버 (waitress)")
    serve_parser.add_argument("--host", default=WEB_HOST, help=f"바인딩 호스트 (기본: {WEB_HOST})")
    serve_parser.add_argument("--port", type=int, default=WEB_PORT, help=f"포트 번호 (기본: {WEB_PORT})")
    serve_parser.add_argument("--threads", type=int, default=4, help="워커 스레드 수 (기본: 4)")

    return parser


def _add_common_arguments(sub: argparse.ArgumentParser):
    sub.add_argument("--safety-days", type=str, default=None, help="안전재고 일수 (기본 1)")
    sub.add_argument("--multiplier", type=str, default=None, help="연휴 사용량 배수 (기본 1)")
    sub.add_argument("--today", type=str, default=None, help="기준일 (YYYY-MM-DD)")
    sub.add_argument("--no-history", action="store_true", help="이력 저장 안 함")


def _history_store(args) -> HistoryStore:
    return SqliteHistoryStore(args.db or HISTORY_DB_PATH)


def _engine(args, schedule: Schedule) -> RestockEngine:
    return RestockEngine(schedule, holiday_calendar=HolidayCalendar(args.country or HOLIDAY_COUNTRY))


def _print_batch(schedule: Schedule, batch: BatchRecommendation):
    first = batch.results[0]
    print(f"[{schedule.label}] 다음 발주: {format_date_label(first.next_order_date)} "
          f"(D-{first.days_to_order}), 도착: {format_date_label(first.next_deliver_date)} "
          f"(D-{first.days_to_deliver}), 커버 {first.coverage_days}일")
    for r in batch.results:
        duration = "무제한" if r.stock_duration_unbounded else f"{r.stock_duration_days:.1f}일"
        print(f"  {r.product}: 추천 {r.recommended_qty}박스 ({r.recommended_units}{schedule.unit_name}) "
              f"| 도착 시 재고 {r.stock_at_delivery:.1f} | 안전재고 {r.safety_stock:.1f} "
              f"| 재고 지속 {duration} | {URGENCY_LABELS.get(r.urgency, r.urgency)}")
    print(f"  합계: {batch.total_qty}박스")


def _run_recommend(args, schedule: Schedule, form_input: FormInput) -> int:
    batch = _engine(args, schedule).recommend_all(form_input.profiles, form_input.today)
    _print_batch(schedule, batch)

    if not args.no_history:
        store = _history_store(args)
        for profile, result in zip(form_input.profiles, batch.results):
            store.append(HistoryEntry.from_result(schedule.name, profile, result))
    return EXIT_OK


def cmd_milk(args) -> int:
    """우유 추천 명령"""
    form_input = parse_milk_form({
        "current_stock": args.stock,
        "daily_usage": args.usage,
        "safety_days": args.safety_days,
        "holiday_multiplier": args.multiplier,
        "today": args.today,
    })
    return _run_recommend(args, SCHEDULES[MILK_SCHEDULE], form_input)


def cmd_ice_cream(args) -> int:
    """아이스크림 원료 추천 명령"""
    form = {
        "safety_days": args.safety_days,
        "holiday_multiplier": args.multiplier,
        "today": args.today,
    }
    for product in ICE_CREAM_PRODUCTS:
        for suffix in ("stock", "weekday", "holiday"):
            form[f"{product}_{suffix}"] = getattr(args, f"{product}_{suffix}")
    form_input = parse_ice_cream_form(form)
    return _run_recommend(args, SCHEDULES[ICE_CREAM_SCHEDULE], form_input)


def cmd_status(args) -> int:
    """다음 발주일 명령"""
    try:
        schedule = get_schedule(args.schedule)
    except KeyError as e:
        print(e.args[0])
        return EXIT_INVALID_INPUT

    result = ValidationResult()
    today = parse_today(args.today, result)
    if not result.is_valid:
        raise InvalidInputError(result)

    status = _engine(args, schedule).status(today)
    print(f"[{schedule.label}] {status.message}")
    return EXIT_OK


def cmd_history(args) -> int:
    """추천 이력 명령"""
    schedule = None
    if args.schedule:
        try:
            schedule = get_schedule(args.schedule).name
        except KeyError as e:
            print(e.args[0])
            return EXIT_INVALID_INPUT

    store = _history_store(args)
    if args.clear:
        removed = store.clear(schedule)
        print(f"이력 삭제: {removed}건")
        return EXIT_OK

    entries = store.list_all(schedule)
    print(f"추천 이력: {len(entries)}건")
    for e in entries:
        usage = f"{e.usage:g}" if e.holiday_usage is None else f"{e.usage:g}/{e.holiday_usage:g}"
        print(f"  {e.date_label} {e.schedule}/{e.product}: 재고 {e.stock:g}, 사용량 {usage}, "
              f"안전 {e.safety_days:g}일, 배수 {e.multiplier:g} → {e.recommended_qty}박스")
    return EXIT_OK


def cmd_serve(args) -> int:
    """웹 API 서버 실행"""
    from waitress import serve

    from restock.web.app import create_app

    app = create_app(
        history_store=_history_store(args),
        holiday_calendar=HolidayCalendar(args.country or HOLIDAY_COUNTRY),
    )
    print(f"Restock API starting on http://{args.host}:{args.port}")
    print("  Ctrl+C to stop")
    try:
        serve(app, host=args.host, port=args.port, threads=args.threads)
    except KeyboardInterrupt:
        print("\nServer stopped.")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """CLI 메인 진입점"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_OK

    commands = {
        "milk": cmd_milk,
        "ice-cream": cmd_ice_cream,
        "status": cmd_status,
        "history": cmd_history,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return EXIT_OK

    try:
        return handler(args)
    except InvalidInputError as e:
        logger.warning(f"입력 오류 ({args.command}): {e}")
        for err in e.result.errors:
            print(f"  - {err.field_name}: {err.error_message}")
        return EXIT_INVALID_INPUT
    except UnresolvedCycleError as e:
        logger.error(f"발주 주기 계산 불가 ({args.command}): {e}")
        print(str(e))
        return EXIT_UNRESOLVED_CYCLE


if __name__ == "__main__":
    sys.exit(main())
