from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_dashboard
from app.services.dashboard import DoctorDashboard

router = APIRouter()


@router.get("/patients")
def list_patients(
    condition: str | None = None,
    min_severity: int | None = Query(default=None, ge=0, le=10),
    max_severity: int | None = Query(default=None, ge=0, le=10),
    limit: int | None = Query(default=None, ge=0),
    offset: int | None = Query(default=None, ge=0),
    dashboard: DoctorDashboard = Depends(get_dashboard),
) -> dict:
    """담당 환자 목록을 조회

    Args:
        condition: 상태 라벨 필터(대소문자 무시)
        min_severity: 최소 중증도(포함)
        max_severity: 최대 중증도(포함)
        limit: 최대 개수
        offset: 건너뛸 개수
        dashboard: 대시보드 서비스

    Returns:
        success, message, data 응답
    """
    filters = {
        "condition": condition,
        "min_severity": min_severity,
        "max_severity": max_severity,
        "limit": limit,
        "offset": offset,
    }
    patients = dashboard.get_all_admissions(
        {key: value for key, value in filters.items() if value is not None}
    )
    return {
        "success": True,
        "message": "OK",
        "data": [patient.model_dump() for patient in patients],
    }


@router.get("/patients/{patient_id}")
def get_patient(
    patient_id: int, dashboard: DoctorDashboard = Depends(get_dashboard)
) -> dict:
    """환자 단건 조회"""
    return dashboard.get_patient(patient_id).model_dump()


@router.patch("/patients/{patient_id}/vitals")
def update_vitals(
    patient_id: int,
    payload: dict,
    dashboard: DoctorDashboard = Depends(get_dashboard),
) -> dict:
    """생체신호를 업데이트하고 중증도를 다시 계산

    Args:
        patient_id: 환자 식별자
        payload: heartRate, spo2, respRate, temperature, bpSystolic, bpDiastolic 중 일부
        dashboard: 대시보드 서비스

    Returns:
        업데이트된 환자 레코드
    """
    return dashboard.update_patient_vitals(patient_id, payload).model_dump()


@router.patch("/patients/{patient_id}/clinical-info")
def update_clinical_info(
    patient_id: int,
    payload: dict,
    dashboard: DoctorDashboard = Depends(get_dashboard),
) -> dict:
    """임상 정보(메모, 검사 결과 등)를 업데이트"""
    return dashboard.update_patient_clinical_info(patient_id, payload).model_dump()
