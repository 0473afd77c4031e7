from fastapi import APIRouter, Depends

from app.api.deps import get_dashboard
from app.services.dashboard import DoctorDashboard

router = APIRouter()


@router.get("/profile")
def get_profile(dashboard: DoctorDashboard = Depends(get_dashboard)) -> dict:
    """의사 프로필 조회"""
    return dashboard.get_doctor_profile().model_dump()


@router.patch("/profile")
def update_profile(
    payload: dict, dashboard: DoctorDashboard = Depends(get_dashboard)
) -> dict:
    """의사 프로필을 병합 업데이트"""
    return dashboard.update_doctor_profile(payload).model_dump()
