"""재고 보충 추천 REST API"""

from flask import Blueprint, current_app, jsonify, request

from restock.application.services.restock_engine import RestockEngine
from restock.domain.cycle.schedules import SCHEDULES, Schedule, get_schedule
from restock.domain.errors import UnresolvedCycleError
from restock.infrastructure.history.history_store import HistoryEntry
from restock.settings.constants import ICE_CREAM_SCHEDULE, MILK_SCHEDULE
from restock.utils.logger import get_logger
from restock.validation import (
    InvalidInputError,
    ValidationResult,
    parse_ice_cream_form,
    parse_milk_form,
)
from restock.validation.input_validator import parse_today

logger = get_logger(__name__)

restock_bp = Blueprint("restock", __name__)

FORM_PARSERS = {
    MILK_SCHEDULE: parse_milk_form,
    ICE_CREAM_SCHEDULE: parse_ice_cream_form,
}


def _engine_for(schedule: Schedule) -> RestockEngine:
    return RestockEngine(
        schedule,
        holiday_calendar=current_app.config["HOLIDAY_CALENDAR"],
        today_provider=current_app.config["TODAY_PROVIDER"],
    )


def unknown_schedule_response(name: str):
    return jsonify({"error": f"알 수 없는 스케줄입니다: {name}", "code": "UNKNOWN_SCHEDULE"}), 404


def invalid_input_response(e: InvalidInputError):
    return jsonify({
        "error": str(e),
        "code": "INVALID_INPUT",
        "errors": [err.to_dict() for err in e.result.errors],
    }), 400


def unresolved_cycle_response(e: UnresolvedCycleError):
    return jsonify({
        "error": str(e),
        "code": "UNRESOLVED_CYCLE",
        "today": e.today.isoformat() if e.today else None,
        "horizon_months": e.horizon_months,
    }), 422


# ---------------------------------------------------------------------------
# GET /api/<schedule>/status -- 다음 발주 배너
# ---------------------------------------------------------------------------
@restock_bp.route("/<schedule_name>/status", methods=["GET"])
def schedule_status(schedule_name: str):
    """다음 발주일/도착일 + 이번 주기 커버 구간"""
    try:
        schedule = get_schedule(schedule_name)
    except KeyError:
        return unknown_schedule_response(schedule_name)

    try:
        result = ValidationResult()
        today = parse_today(request.args.get("today"), result)
        if not result.is_valid:
            raise InvalidInputError(result)

        engine = _engine_for(schedule)
        status = engine.status(today)
        plan = engine.plan(today)
        return jsonify({
            "schedule": schedule.name,
            "label": schedule.label,
            "description": schedule.describe(),
            "status": status.to_dict(),
            "plan": plan.to_dict(),
        })
    except InvalidInputError as e:
        logger.warning(f"상태 조회 입력 오류 ({schedule.name}): {e}")
        return invalid_input_response(e)
    except UnresolvedCycleError as e:
        logger.warning(f"발주 주기 계산 불가 ({schedule.name}): {e}")
        return unresolved_cycle_response(e)
    except Exception as e:
        logger.error(f"상태 조회 실패 ({schedule.name}): {e}", exc_info=True)
        return jsonify({"error": "상태 조회에 실패했습니다", "code": "INTERNAL_ERROR"}), 500


# ---------------------------------------------------------------------------
# POST /api/<schedule>/recommend -- 추천 수량 계산 + 이력 저장
# ---------------------------------------------------------------------------
@restock_bp.route("/<schedule_name>/recommend", methods=["POST"])
def schedule_recommend(schedule_name: str):
    """폼 입력 → 품목별 추천 결과

    JSON 본문 또는 form-urlencoded 모두 허용.
    """
    try:
        schedule = get_schedule(schedule_name)
    except KeyError:
        return unknown_schedule_response(schedule_name)

    form = request.get_json(silent=True)
    if not isinstance(form, dict):
        form = request.form.to_dict()

    try:
        form_input = FORM_PARSERS[schedule.name](form)
        today = form_input.today or current_app.config["TODAY_PROVIDER"]()

        batch = _engine_for(schedule).recommend_all(form_input.profiles, today)

        store = current_app.config["HISTORY_STORE"]
        for profile, result in zip(form_input.profiles, batch.results):
            store.append(HistoryEntry.from_result(schedule.name, profile, result))

        logger.info(
            f"추천 완료: {schedule.name} total_qty={batch.total_qty} "
            f"urgency={batch.worst_urgency}"
        )
        payload = batch.to_dict()
        payload["today"] = today.isoformat()
        return jsonify(payload)
    except InvalidInputError as e:
        logger.warning(f"추천 입력 오류 ({schedule.name}): {e}")
        return invalid_input_response(e)
    except UnresolvedCycleError as e:
        logger.warning(f"발주 주기 계산 불가 ({schedule.name}): {e}")
        return unresolved_cycle_response(e)
    except Exception as e:
        logger.error(f"추천 계산 실패 ({schedule.name}): {e}", exc_info=True)
        return jsonify({"error": "추천 계산에 실패했습니다", "code": "INTERNAL_ERROR"}), 500


@restock_bp.route("/schedules", methods=["GET"])
def schedules_list():
    """등록된 스케줄 목록"""
    return jsonify({
        "schedules": [
            {
                "name": s.name,
                "label": s.label,
                "description": s.describe(),
                "units_per_box": s.units_per_box,
                "unit_name": s.unit_name,
            }
            for s in SCHEDULES.values()
        ],
        "today": current_app.config["TODAY_PROVIDER"]().isoformat(),
    })
