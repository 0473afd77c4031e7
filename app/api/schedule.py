from fastapi import APIRouter, Depends

from app.api.deps import get_dashboard
from app.services.dashboard import DoctorDashboard

router = APIRouter()


@router.get("/schedule")
def list_schedule(dashboard: DoctorDashboard = Depends(get_dashboard)) -> list[dict]:
    """오늘의 일정을 조회"""
    return [slot.model_dump() for slot in dashboard.get_schedule()]


@router.patch("/schedule/{slot_id}")
def update_schedule_status(
    slot_id: int,
    payload: dict,
    dashboard: DoctorDashboard = Depends(get_dashboard),
) -> dict:
    """일정 슬롯 상태를 변경

    Args:
        slot_id: 슬롯 식별자
        payload: {"status": 새 상태}
        dashboard: 대시보드 서비스

    Returns:
        변경된 슬롯
    """
    return dashboard.update_schedule_status(slot_id, payload.get("status")).model_dump()
