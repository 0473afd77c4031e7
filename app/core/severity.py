from __future__ import annotations

from typing import Literal

Condition = Literal["Critical", "Serious", "Stable", "Recovering"]

CONDITIONS: tuple[Condition, ...] = ("Critical", "Serious", "Stable", "Recovering")

BASE_SCORE = 3
MAX_SCORE = 10


def derive_severity(
    heart_rate: float | None = None,
    spo2: float | None = None,
    resp_rate: float | None = None,
    temperature: float | None = None,
    systolic: float | None = None,
    diastolic: float | None = None,
) -> int:
    """생체신호로 중증도 점수를 계산

    0 값은 측정되지 않은 것으로 간주한다.

    Args:
        heart_rate: 심박수
        spo2: 산소포화도
        resp_rate: 호흡수
        temperature: 체온(섭씨)
        systolic: 수축기 혈압
        diastolic: 이완기 혈압

    Returns:
        0~10 사이의 중증도 점수
    """
    score = BASE_SCORE
    if heart_rate and (heart_rate > 120 or heart_rate < 50):
        score += 2
    if spo2 and spo2 < 90:
        score += 3
    elif spo2 and spo2 < 94:
        score += 1
    if resp_rate and (resp_rate > 25 or resp_rate < 10):
        score += 2
    if temperature and (temperature > 39 or temperature < 35):
        score += 1
    if systolic and (systolic > 180 or systolic < 90):
        score += 2
    if diastolic and diastolic > 110:
        score += 1
    return min(score, MAX_SCORE)


def derive_condition(score: int) -> Condition:
    """중증도 점수를 상태 라벨로 변환

    Args:
        score: 중증도 점수

    Returns:
        상태 라벨
    """
    if score >= 8:
        return "Critical"
    if score >= 5:
        return "Serious"
    if score >= 3:
        return "Stable"
    return "Recovering"


def assess_vitals(
    heart_rate: float | None = None,
    spo2: float | None = None,
    resp_rate: float | None = None,
    temperature: float | None = None,
    systolic: float | None = None,
    diastolic: float | None = None,
) -> tuple[int, Condition]:
    """중증도 점수와 상태 라벨을 함께 반환"""
    score = derive_severity(heart_rate, spo2, resp_rate, temperature, systolic, diastolic)
    return score, derive_condition(score)
