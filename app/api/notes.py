from fastapi import APIRouter, Depends, status

from app.api.deps import get_dashboard
from app.services.dashboard import DoctorDashboard

router = APIRouter()


@router.get("/notes")
def list_notes(dashboard: DoctorDashboard = Depends(get_dashboard)) -> list[dict]:
    """임상 노트를 최신순으로 조회"""
    return [note.model_dump() for note in dashboard.get_clinical_notes()]


@router.post("/notes", status_code=status.HTTP_201_CREATED)
def add_note(payload: dict, dashboard: DoctorDashboard = Depends(get_dashboard)) -> dict:
    """새 임상 노트를 추가"""
    return dashboard.add_clinical_note(payload).model_dump()
