from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from app.core.severity import Condition
from app.utils.parsing import parse_text_optional, parse_vital

VITAL_FIELDS = (
    "heart_rate",
    "spo2",
    "resp_rate",
    "temperature",
    "bp_systolic",
    "bp_diastolic",
)

CLINICAL_FIELDS = (
    "bed_id",
    "presenting_ailment",
    "medical_history",
    "clinical_notes",
    "lab_results",
    "doctor",
)


class BloodPressure(BaseModel):
    """혈압 측정값"""

    systolic: float | None = Field(default=None, description="수축기 혈압")
    diastolic: float | None = Field(default=None, description="이완기 혈압")

    @field_validator("systolic", "diastolic", mode="before")
    @classmethod
    def _check_reading(cls, value: object, info: ValidationInfo) -> float | None:
        return parse_vital(value, info.field_name)


class AdmittedPatient(BaseModel):
    """입원 환자 레코드"""

    patient_id: int = Field(..., description="환자 식별자")
    patient_name: str = Field(..., description="환자 이름")
    age: int = Field(..., ge=0, description="나이")
    gender: str = Field(..., description="성별")
    bed_id: str = Field(..., description="병상 식별자")
    admission_date: str = Field(..., description="입원일")
    heart_rate: float | None = Field(default=None, description="심박수")
    spo2: float | None = Field(default=None, description="산소포화도")
    resp_rate: float | None = Field(default=None, description="호흡수")
    temperature: float | None = Field(default=None, description="체온(섭씨)")
    blood_pressure: BloodPressure = Field(default_factory=BloodPressure)
    measured_time: str | None = Field(default=None, description="측정 시각(UTC ISO8601)")
    presenting_ailment: str | None = Field(default=None, description="주 증상")
    medical_history: str | None = Field(default=None, description="병력")
    clinical_notes: str | None = Field(default=None, description="임상 메모")
    lab_results: str | None = Field(default=None, description="검사 결과")
    severity_score: int = Field(default=3, ge=0, le=10, description="중증도 점수")
    condition: Condition = Field(default="Stable", description="상태 라벨")
    doctor: str = Field(..., description="담당 의사 이름")
    created_at: str = Field(..., description="생성 시각(UTC ISO8601)")
    updated_at: str = Field(..., description="수정 시각(UTC ISO8601)")

    @field_validator("heart_rate", "spo2", "resp_rate", "temperature", mode="before")
    @classmethod
    def _check_reading(cls, value: object, info: ValidationInfo) -> float | None:
        return parse_vital(value, info.field_name)


class VitalsPatch(BaseModel):
    """생체신호 부분 업데이트

    전달되지 않은 필드는 유지하고 null로 전달된 필드는 측정값을 비운다.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    heart_rate: float | None = Field(default=None, alias="heartRate")
    spo2: float | None = Field(default=None, alias="spo2")
    resp_rate: float | None = Field(default=None, alias="respRate")
    temperature: float | None = Field(default=None, alias="temperature")
    bp_systolic: float | None = Field(default=None, alias="bpSystolic")
    bp_diastolic: float | None = Field(default=None, alias="bpDiastolic")

    @field_validator(*VITAL_FIELDS, mode="before")
    @classmethod
    def _check_reading(cls, value: object, info: ValidationInfo) -> float | None:
        return parse_vital(value, info.field_name)

    def supplied(self) -> dict[str, float | None]:
        """명시적으로 전달된 필드만 반환"""
        return {name: getattr(self, name) for name in VITAL_FIELDS if name in self.model_fields_set}


class ClinicalInfoPatch(BaseModel):
    """임상 정보 부분 업데이트"""

    model_config = ConfigDict(extra="forbid")

    bed_id: str | None = None
    presenting_ailment: str | None = None
    medical_history: str | None = None
    clinical_notes: str | None = None
    lab_results: str | None = None
    doctor: str | None = None

    @field_validator(*CLINICAL_FIELDS, mode="before")
    @classmethod
    def _check_text(cls, value: object, info: ValidationInfo) -> str | None:
        return parse_text_optional(value, info.field_name)

    @field_validator("bed_id", "doctor")
    @classmethod
    def _require_value(cls, value: str | None) -> str:
        if not value:
            raise ValueError("값이 필요함")
        return value

    def supplied(self) -> dict[str, str | None]:
        """명시적으로 전달된 필드만 반환"""
        return {name: getattr(self, name) for name in CLINICAL_FIELDS if name in self.model_fields_set}


class AdmissionFilters(BaseModel):
    """입원 환자 목록 필터"""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    condition: str | None = None
    min_severity: int | None = Field(default=None, ge=0, le=10, alias="minSeverity")
    max_severity: int | None = Field(default=None, ge=0, le=10, alias="maxSeverity")
    limit: int | None = Field(default=None, ge=0)
    offset: int | None = Field(default=None, ge=0)
