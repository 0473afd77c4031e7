from fastapi import APIRouter

from app.api.health import router as health_router
from app.api.notes import router as notes_router
from app.api.patients import router as patients_router
from app.api.profile import router as profile_router
from app.api.schedule import router as schedule_router

router = APIRouter()
router.include_router(health_router, tags=["health"])
router.include_router(patients_router, prefix="/v1", tags=["patients"])
router.include_router(schedule_router, prefix="/v1", tags=["schedule"])
router.include_router(notes_router, prefix="/v1", tags=["notes"])
router.include_router(profile_router, prefix="/v1", tags=["profile"])
