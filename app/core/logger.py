from __future__ import annotations

import logging

import duckdb

from app.core.config import get_settings
from app.core.telemetry import TelemetryStore
from app.utils.clock import utc_now_iso


def log_event(
    event: str,
    level: str,
    entity: str,
    entity_id: object,
    message: str,
    error_code: str | None = None,
    duration_ms: int | None = None,
) -> None:
    """이벤트를 표준 로깅과 DuckDB에 기록

    Args:
        event: 이벤트 이름
        level: 로깅 레벨 문자열
        entity: 대상 엔티티 종류(patient, schedule, note, profile)
        entity_id: 대상 식별자
        message: 로그 메시지
        error_code: 에러 코드(선택)
        duration_ms: 처리 시간(밀리초, 선택)
    """
    logger = logging.getLogger("doctor-desk")
    extra = {
        "event": event,
        "entity": entity,
        "entity_id": str(entity_id),
    }
    logger.log(getattr(logging, level.upper(), logging.INFO), message, extra=extra)

    if not get_settings().telemetry_enabled:
        return
    record = {
        "timestamp": utc_now_iso(),
        "level": level.upper(),
        "event": event,
        "entity": entity,
        "entity_id": str(entity_id),
        "error_code": error_code,
        "message": message,
        "duration_ms": duration_ms,
    }
    try:
        TelemetryStore().insert_log(record)
    except (duckdb.Error, OSError):
        # 감사 로그 실패는 호출자에게 전파하지 않음
        logger.exception("telemetry write failed", extra={**extra, "event": "telemetry_failed"})
