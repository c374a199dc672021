"""Flask 앱 생성"""
import os
import secrets
from datetime import date
from typing import Callable, Optional

from flask import Flask, jsonify, request

from restock.infrastructure.history.history_store import HistoryStore
from restock.infrastructure.history.sqlite_history_store import SqliteHistoryStore
from restock.infrastructure.holiday_calendar import HolidayCalendar
from restock.settings.app_config import HISTORY_DB_PATH, HOLIDAY_COUNTRY, WEB_HOST, WEB_PORT
from restock.utils.logger import get_logger

logger = get_logger(__name__)


def create_app(
    history_store: Optional[HistoryStore] = None,
    today_provider: Optional[Callable[[], date]] = None,
    holiday_calendar: Optional[HolidayCalendar] = None,
) -> Flask:
    """Flask 앱 팩토리

    Args:
        history_store: 추천 이력 저장소 (기본: SQLite 파일)
        today_provider: 오늘 날짜 공급 함수 (기본: date.today)
        holiday_calendar: 공휴일 달력 (기본: RESTOCK_HOLIDAY_COUNTRY)
    """
    app = Flask(__name__)
    app.config["SECRET_KEY"] = os.getenv("FLASK_SECRET_KEY") or secrets.token_hex(32)
    app.json.ensure_ascii = False

    app.config["HISTORY_STORE"] = history_store or SqliteHistoryStore(HISTORY_DB_PATH)
    app.config["TODAY_PROVIDER"] = today_provider or date.today
    app.config["HOLIDAY_CALENDAR"] = holiday_calendar or HolidayCalendar(HOLIDAY_COUNTRY)

    from .routes import register_blueprints

    register_blueprints(app)

    @app.before_request
    def log_request():
        """접근 로깅"""
        logger.info(f"[API] {request.method} {request.path} from {request.remote_addr}")

    @app.after_request
    def add_security_headers(response):
        """보안 헤더 추가"""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
        response.headers['Cache-Control'] = 'no-store, no-cache, must-revalidate'
        return response

    # 전역 에러 핸들러 (일관된 JSON 응답)
    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "요청한 리소스를 찾을 수 없습니다", "code": "NOT_FOUND"}), 404

    @app.errorhandler(500)
    def internal_error(e):
        return jsonify({"error": "서버 내부 오류가 발생했습니다", "code": "INTERNAL_ERROR"}), 500

    @app.errorhandler(400)
    def bad_request(e):
        return jsonify({"error": "잘못된 요청입니다", "code": "BAD_REQUEST"}), 400

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"error": "허용되지 않는 HTTP 메서드입니다", "code": "METHOD_NOT_ALLOWED"}), 405

    return app


if __name__ == "__main__":
    app = create_app()
    print(f"Restock API starting on http://{WEB_HOST}:{WEB_PORT}")
    app.run(host=WEB_HOST, port=WEB_PORT, debug=False)
