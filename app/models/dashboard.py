from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ScheduleStatus = Literal["upcoming", "in-progress", "completed", "cancelled"]


class ScheduleSlot(BaseModel):
    """진료 일정 슬롯"""

    id: int = Field(..., description="슬롯 식별자")
    time: str = Field(..., description="시각(HH:MM)")
    patient_name: str = Field(..., description="환자 이름")
    type: str = Field(..., description="진료 유형")
    status: ScheduleStatus = Field(default="upcoming", description="진행 상태")


class NewClinicalNote(BaseModel):
    """식별자와 생성 시각이 없는 새 임상 노트"""

    model_config = ConfigDict(extra="forbid")

    patient_id: int | None = Field(default=None, description="환자 식별자")
    patient_name: str = Field(..., description="환자 이름")
    title: str = Field(..., description="제목")
    content: str = Field(..., description="본문")


class ClinicalNote(NewClinicalNote):
    """임상 노트"""

    id: int = Field(..., description="노트 식별자")
    created_at: str = Field(..., description="생성 시각(UTC ISO8601)")


class DoctorInfo(BaseModel):
    """로그인한 의사 프로필"""

    full_name: str = Field(..., description="이름")
    specialization: str | None = Field(default=None, description="전문 분야")
    department: str | None = Field(default=None, description="진료과")
    email: str | None = Field(default=None, description="이메일")
    phone: str | None = Field(default=None, description="연락처")
    license_number: str | None = Field(default=None, description="면허 번호")
    experience_years: int | None = Field(default=None, description="경력(년)")


class DoctorInfoPatch(BaseModel):
    """의사 프로필 부분 업데이트"""

    model_config = ConfigDict(extra="forbid")

    full_name: str | None = None
    specialization: str | None = None
    department: str | None = None
    email: str | None = None
    phone: str | None = None
    license_number: str | None = None
    experience_years: int | None = None
