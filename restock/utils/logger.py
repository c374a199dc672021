"""
통합 로깅 모듈

사용법:
    from restock.utils.logger import get_logger

    logger = get_logger(__name__)
    logger.info("발주 추천 계산")
    logger.warning("재고 부족")
    logger.error("이력 저장 실패", exc_info=True)
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any


# 로그 디렉토리 (RESTOCK_LOG_DIR 로 변경 가능)
LOG_DIR = Path(
    os.getenv("RESTOCK_LOG_DIR")
    or Path(__file__).parent.parent.parent / "logs"
)


class SafeRotatingFileHandler(RotatingFileHandler):
    """파일 잠금에 안전한 RotatingFileHandler

    로테이션 중 PermissionError가 나면 기존 파일에 계속 쓴다.
    """

    def doRollover(self):
        try:
            super().doRollover()
        except PermissionError:
            if self.stream is None and not self.delay:
                self.stream = self._open()


# 로그 포맷
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_FORMAT_SIMPLE = "%(asctime)s | %(levelname)-8s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# 용도별 로그 파일
LOG_FILES = {
    "main": "restock.log",      # 전체 로그
    "engine": "engine.log",     # 주기/수량 계산
    "web": "web.log",           # API 요청
    "error": "error.log",       # 에러만
}

# 이미 설정된 로거 추적
_configured_loggers = set()


def _file_handler(file_key: str, level: int, max_bytes: int, backup_count: int):
    """로테이션 파일 핸들러 생성 (디렉토리 생성 실패 시 None)"""
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        handler = SafeRotatingFileHandler(
            LOG_DIR / LOG_FILES.get(file_key, LOG_FILES["main"]),
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
            delay=True,
        )
    except OSError as e:
        print(f"[WARN] 로그 파일 핸들러 설정 실패 ({file_key}): {e}")
        return None
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    handler.setLevel(level)
    return handler


def setup_logger(
    name: str,
    level: int = logging.INFO,
    log_file: str = "main",
    console: bool = True,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> logging.Logger:
    """
    로거 설정

    Args:
        name: 로거 이름 (보통 __name__)
        level: 로그 레벨
        log_file: 로그 파일 키 ("main", "engine", "web")
        console: 콘솔 출력 여부
        max_bytes: 파일당 최대 크기
        backup_count: 백업 파일 수

    Returns:
        설정된 Logger
    """
    logger = logging.getLogger(name)

    if name in _configured_loggers:
        return logger

    logger.setLevel(level)

    if logger.handlers:
        _configured_loggers.add(name)
        return logger

    file_handler = _file_handler(log_file, level, max_bytes, backup_count)
    if file_handler:
        logger.addHandler(file_handler)

    error_handler = _file_handler("error", logging.ERROR, max_bytes, backup_count)
    if error_handler:
        logger.addHandler(error_handler)

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT_SIMPLE, DATE_FORMAT))
        console_handler.setLevel(level)
        logger.addHandler(console_handler)

    logger.propagate = False

    _configured_loggers.add(name)
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    로거 가져오기 (편의 함수)

    모듈별 자동 분류:
        - restock.domain.* / restock.application.* → engine.log
        - restock.web.* → web.log
        - 그 외 → restock.log

    Args:
        name: 모듈 이름 (보통 __name__)

    Returns:
        모듈에 맞게 설정된 Logger 인스턴스
    """
    if ".domain" in name or ".application" in name:
        return setup_logger(name, log_file="engine")
    elif ".web" in name:
        return setup_logger(name, log_file="web")
    return setup_logger(name, log_file="main")


def log_with_context(
    _logger: logging.Logger,
    level: str,
    msg: str,
    exc_info: bool = False,
    **ctx: Any,
) -> None:
    """컨텍스트 키워드를 자동 포맷하는 로깅 헬퍼

    Args:
        _logger: 로거 인스턴스
        level: 로그 레벨 ("debug", "info", "warning", "error")
        msg: 로그 메시지
        exc_info: True면 예외 스택 트레이스 포함
        **ctx: 컨텍스트 키=값 쌍 (schedule, product, today 등)

    Usage:
        log_with_context(logger, "info", "추천 완료",
                        schedule="milk", qty=3, urgency="ok")
        # Output: "추천 완료 | schedule=milk | qty=3 | urgency=ok"
    """
    if ctx:
        ctx_str = " | ".join(f"{k}={v}" for k, v in ctx.items() if v is not None)
        if ctx_str:
            msg = f"{msg} | {ctx_str}"

    log_fn = getattr(_logger, level, None) or _logger.info
    log_fn(msg, exc_info=exc_info)
