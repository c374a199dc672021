"""추천 이력 REST API"""

from flask import Blueprint, current_app, jsonify, request

from restock.domain.cycle.schedules import get_schedule
from restock.utils.logger import get_logger

logger = get_logger(__name__)

history_bp = Blueprint("history", __name__)


def _schedule_filter():
    """?schedule= 파라미터 (없으면 None, 잘못되면 KeyError)"""
    name = request.args.get("schedule", "").strip()
    if not name:
        return None
    return get_schedule(name).name


@history_bp.route("", methods=["GET"])
def history_list():
    """최근 추천 이력 (최신순)"""
    try:
        schedule = _schedule_filter()
    except KeyError:
        return jsonify({"error": "알 수 없는 스케줄입니다", "code": "UNKNOWN_SCHEDULE"}), 404

    try:
        entries = current_app.config["HISTORY_STORE"].list_all(schedule)
        return jsonify({
            "schedule": schedule,
            "count": len(entries),
            "entries": [e.to_dict() for e in entries],
        })
    except Exception as e:
        logger.error(f"이력 조회 실패: {e}", exc_info=True)
        return jsonify({"error": "이력 조회에 실패했습니다", "code": "INTERNAL_ERROR"}), 500


@history_bp.route("", methods=["DELETE"])
def history_clear():
    """이력 삭제 (schedule 지정 시 해당 스케줄만)"""
    try:
        schedule = _schedule_filter()
    except KeyError:
        return jsonify({"error": "알 수 없는 스케줄입니다", "code": "UNKNOWN_SCHEDULE"}), 404

    try:
        removed = current_app.config["HISTORY_STORE"].clear(schedule)
        logger.info(f"이력 삭제 요청: schedule={schedule or '전체'} removed={removed}")
        return jsonify({"schedule": schedule, "removed": removed})
    except Exception as e:
        logger.error(f"이력 삭제 실패: {e}", exc_info=True)
        return jsonify({"error": "이력 삭제에 실패했습니다", "code": "INTERNAL_ERROR"}), 500
