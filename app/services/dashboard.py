from __future__ import annotations

import time
from collections.abc import Callable, Mapping

from app.core.config import SeedData, Settings
from app.models.admission import (
    AdmissionFilters,
    AdmittedPatient,
    ClinicalInfoPatch,
    VitalsPatch,
)
from app.models.dashboard import (
    ClinicalNote,
    DoctorInfo,
    DoctorInfoPatch,
    NewClinicalNote,
    ScheduleSlot,
)
from app.stores.notes import NoteStore
from app.stores.patients import PatientStore
from app.stores.profile import ProfileStore
from app.stores.schedule import ScheduleStore


def no_latency() -> None:
    return None


def make_latency_hook(latency_ms: int) -> Callable[[], None]:
    """인위적 지연 훅을 생성

    Args:
        latency_ms: 호출마다 대기할 밀리초(0이면 지연 없음)

    Returns:
        지연 훅
    """
    if latency_ms <= 0:
        return no_latency
    seconds = latency_ms / 1000

    def _sleep() -> None:
        time.sleep(seconds)

    return _sleep


class DoctorDashboard:
    """로그인한 의사의 대시보드 서비스

    환자 목록은 현재 프로필의 full_name 기준으로 조회한다.
    """

    def __init__(
        self,
        patients: PatientStore,
        schedule: ScheduleStore,
        notes: NoteStore,
        profile: ProfileStore,
        latency: Callable[[], None] = no_latency,
    ) -> None:
        self.patients = patients
        self.schedule = schedule
        self.notes = notes
        self.profile = profile
        self._latency = latency

    def get_doctor_patients(self) -> list[AdmittedPatient]:
        self._latency()
        return self.patients.list_by_doctor(self.profile.get().full_name)

    def get_all_admissions(
        self, filters: AdmissionFilters | Mapping | None = None
    ) -> list[AdmittedPatient]:
        self._latency()
        return self.patients.list_by_doctor_filtered(self.profile.get().full_name, filters)

    def get_patient(self, patient_id: int) -> AdmittedPatient:
        self._latency()
        return self.patients.get_by_id(patient_id)

    def update_patient_vitals(
        self, patient_id: int, patch: VitalsPatch | Mapping
    ) -> AdmittedPatient:
        self._latency()
        return self.patients.update_vitals(patient_id, patch)

    def update_patient_clinical_info(
        self, patient_id: int, patch: ClinicalInfoPatch | Mapping
    ) -> AdmittedPatient:
        self._latency()
        return self.patients.update_clinical_info(patient_id, patch)

    def get_schedule(self) -> list[ScheduleSlot]:
        self._latency()
        return self.schedule.list()

    def update_schedule_status(self, slot_id: int, status: str) -> ScheduleSlot:
        self._latency()
        return self.schedule.update_status(slot_id, status)

    def get_clinical_notes(self) -> list[ClinicalNote]:
        self._latency()
        return self.notes.list_sorted_by_creation_descending()

    def add_clinical_note(self, note: NewClinicalNote | Mapping) -> ClinicalNote:
        self._latency()
        return self.notes.add(note)

    def get_doctor_profile(self) -> DoctorInfo:
        self._latency()
        return self.profile.get()

    def update_doctor_profile(self, patch: DoctorInfoPatch | Mapping) -> DoctorInfo:
        self._latency()
        return self.profile.update(patch)


def build_dashboard(seed: SeedData, settings: Settings | None = None) -> DoctorDashboard:
    """시드 데이터로 독립적인 저장소를 구성

    Args:
        seed: 시드 데이터
        settings: 애플리케이션 설정(지연 훅 구성용, 선택)

    Returns:
        대시보드 서비스
    """
    latency_ms = settings.simulated_latency_ms if settings else 0
    return DoctorDashboard(
        patients=PatientStore(seed.patients),
        schedule=ScheduleStore(seed.schedule),
        notes=NoteStore(seed.notes),
        profile=ProfileStore(seed.doctor),
        latency=make_latency_hook(latency_ms),
    )
