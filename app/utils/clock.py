from __future__ import annotations

from datetime import datetime, timezone


def utc_now_iso() -> str:
    """현재 시각을 UTC ISO8601(Z) 문자열로 반환"""
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def parse_iso(value: str) -> datetime:
    """ISO8601 문자열을 UTC datetime으로 파싱

    Args:
        value: ISO8601 문자열

    Returns:
        타임존이 지정된 datetime
    """
    parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
