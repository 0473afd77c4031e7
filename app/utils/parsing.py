from __future__ import annotations

import math
from collections.abc import Mapping
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from app.core.errors import InvalidInputError

PatchT = TypeVar("PatchT", bound=BaseModel)


def parse_vital(value: object, field: str) -> float | None:
    """생체신호 값을 유한한 실수로 파싱

    빈 문자열과 None은 측정값 없음으로 처리한다.

    Args:
        value: 원본 값
        field: 에러 메시지에 사용할 필드명

    Returns:
        파싱된 실수 또는 None

    Raises:
        InvalidInputError: 숫자가 아니거나 유한하지 않거나 음수일 때
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidInputError(field, f"숫자가 아님: {value}")
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if text == "":
            return None
        try:
            number = float(text)
        except ValueError as exc:
            raise InvalidInputError(field, f"숫자가 아님: {value}") from exc
    if not math.isfinite(number):
        raise InvalidInputError(field, f"유한한 값이 아님: {value}")
    if number < 0:
        raise InvalidInputError(field, f"음수 값: {value}")
    return number


def parse_text_optional(value: object, field: str) -> str | None:
    """자유 텍스트 값을 정리

    Args:
        value: 원본 값
        field: 에러 메시지에 사용할 필드명

    Returns:
        정리된 문자열 또는 None

    Raises:
        InvalidInputError: 문자열이 아닐 때
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidInputError(field, f"문자열이 아님: {value!r}")
    return value.strip()


def invalid_input_from(exc: ValidationError) -> InvalidInputError:
    """pydantic 검증 오류를 InvalidInputError로 변환

    Args:
        exc: pydantic 검증 오류

    Returns:
        첫 번째 오류를 담은 InvalidInputError
    """
    errors = exc.errors()
    if not errors:
        return InvalidInputError("payload", str(exc))
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or "payload"
    return InvalidInputError(field, first.get("msg", "잘못된 값"))


def coerce_patch(model: type[PatchT], payload: object) -> PatchT:
    """딕셔너리 페이로드를 부분 업데이트 모델로 검증

    Args:
        model: 부분 업데이트 모델 클래스
        payload: 모델 인스턴스 또는 매핑

    Returns:
        검증된 모델 인스턴스

    Raises:
        InvalidInputError: 페이로드가 잘못되었을 때
    """
    if isinstance(payload, model):
        return payload
    if not isinstance(payload, Mapping):
        raise InvalidInputError("payload", f"객체가 아님: {type(payload).__name__}")
    try:
        return model.model_validate(dict(payload))
    except ValidationError as exc:
        raise invalid_input_from(exc) from exc
