from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Mapping

from pydantic import ValidationError

from app.core.errors import InvalidInputError, NotFoundError, ServiceError
from app.core.logger import log_event
from app.core.severity import assess_vitals
from app.models.admission import (
    AdmissionFilters,
    AdmittedPatient,
    ClinicalInfoPatch,
    VitalsPatch,
)
from app.utils.clock import utc_now_iso
from app.utils.parsing import coerce_patch, invalid_input_from

READING_FIELDS = ("heart_rate", "spo2", "resp_rate", "temperature")


def _apply_severity(record: AdmittedPatient) -> AdmittedPatient:
    """레코드의 현재 생체신호로 중증도와 상태를 다시 계산

    Args:
        record: 변경 가능한 레코드 복사본

    Returns:
        같은 레코드
    """
    record.severity_score, record.condition = assess_vitals(
        record.heart_rate,
        record.spo2,
        record.resp_rate,
        record.temperature,
        record.blood_pressure.systolic,
        record.blood_pressure.diastolic,
    )
    return record


def _revalidated(patient: AdmittedPatient) -> AdmittedPatient:
    """측정값 검사를 다시 거친 레코드 복사본"""
    try:
        return AdmittedPatient.model_validate(patient.model_dump())
    except ValidationError as exc:
        raise invalid_input_from(exc) from exc


class PatientStore:
    """입원 환자 레코드 저장소

    레코드마다 잠금을 두어 같은 환자에 대한 업데이트를 직렬화한다.
    반환값은 항상 복사본이다.
    """

    def __init__(
        self,
        patients: Iterable[AdmittedPatient] = (),
        clock: Callable[[], str] = utc_now_iso,
    ) -> None:
        self._clock = clock
        self._records: dict[int, AdmittedPatient] = {}
        self._locks: dict[int, threading.Lock] = {}
        for patient in patients:
            if patient.patient_id in self._records:
                raise InvalidInputError("patient_id", f"중복 식별자: {patient.patient_id}")
            self._records[patient.patient_id] = _apply_severity(_revalidated(patient))
            self._locks[patient.patient_id] = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, patient_id: object) -> bool:
        return patient_id in self._records

    def ids(self) -> list[int]:
        """저장된 환자 식별자 목록(삽입 순서)"""
        return list(self._records)

    def _lock_for(self, patient_id: int) -> threading.Lock:
        lock = self._locks.get(patient_id)
        if lock is None:
            raise NotFoundError("patient", patient_id)
        return lock

    def list_by_doctor(self, doctor_name: str) -> list[AdmittedPatient]:
        """담당 의사 이름이 정확히 일치하는 환자 목록

        Args:
            doctor_name: 담당 의사 이름(대소문자 구분)

        Returns:
            환자 레코드 복사본 목록
        """
        return [
            record.model_copy(deep=True)
            for record in list(self._records.values())
            if record.doctor == doctor_name
        ]

    def list_by_doctor_filtered(
        self,
        doctor_name: str,
        filters: AdmissionFilters | Mapping | None = None,
    ) -> list[AdmittedPatient]:
        """필터를 적용한 담당 환자 목록

        Args:
            doctor_name: 담당 의사 이름
            filters: 상태(대소문자 무시), 중증도 범위, 페이지 필터

        Returns:
            환자 레코드 복사본 목록

        Raises:
            InvalidInputError: 필터 값이 잘못되었을 때
        """
        criteria = coerce_patch(AdmissionFilters, filters if filters is not None else {})
        patients = self.list_by_doctor(doctor_name)
        if criteria.condition:
            wanted = criteria.condition.strip().lower()
            patients = [p for p in patients if p.condition.lower() == wanted]
        if criteria.min_severity is not None:
            patients = [p for p in patients if p.severity_score >= criteria.min_severity]
        if criteria.max_severity is not None:
            patients = [p for p in patients if p.severity_score <= criteria.max_severity]
        start = criteria.offset or 0
        end = None if criteria.limit is None else start + criteria.limit
        return patients[start:end]

    def get_by_id(self, patient_id: int) -> AdmittedPatient:
        """식별자로 환자 조회

        Raises:
            NotFoundError: 환자가 없을 때
        """
        record = self._records.get(patient_id)
        if record is None:
            raise NotFoundError("patient", patient_id)
        return record.model_copy(deep=True)

    def update_vitals(
        self, patient_id: int, patch: VitalsPatch | Mapping
    ) -> AdmittedPatient:
        """생체신호를 부분 병합하고 중증도를 다시 계산

        전달된 필드만 병합하며, 수축기/이완기 혈압은 각각 독립적으로 병합한다.
        점수는 병합 후 전체 생체신호로 계산한다.

        Args:
            patient_id: 환자 식별자
            patch: 생체신호 부분 업데이트

        Returns:
            업데이트된 환자 레코드 복사본

        Raises:
            NotFoundError: 환자가 없을 때
            InvalidInputError: 페이로드가 잘못되었을 때
        """
        try:
            vitals = coerce_patch(VitalsPatch, patch)
            lock = self._lock_for(patient_id)
        except ServiceError as exc:
            log_event(
                "vitals_update_failed",
                "WARNING",
                "patient",
                patient_id,
                exc.message,
                error_code=exc.code,
            )
            raise

        supplied = vitals.supplied()
        with lock:
            updated = self._records[patient_id].model_copy(deep=True)
            for name in READING_FIELDS:
                if name in supplied:
                    setattr(updated, name, supplied[name])
            if "bp_systolic" in supplied:
                updated.blood_pressure.systolic = supplied["bp_systolic"]
            if "bp_diastolic" in supplied:
                updated.blood_pressure.diastolic = supplied["bp_diastolic"]
            _apply_severity(updated)
            now = self._clock()
            updated.measured_time = now
            updated.updated_at = now
            self._records[patient_id] = updated
            snapshot = updated.model_copy(deep=True)

        log_event(
            "vitals_updated",
            "INFO",
            "patient",
            patient_id,
            f"fields={sorted(supplied)} severity={snapshot.severity_score} "
            f"condition={snapshot.condition}",
        )
        return snapshot

    def update_clinical_info(
        self, patient_id: int, patch: ClinicalInfoPatch | Mapping
    ) -> AdmittedPatient:
        """임상 정보를 부분 병합

        중증도는 다시 계산하지 않는다.

        Args:
            patient_id: 환자 식별자
            patch: 임상 정보 부분 업데이트

        Returns:
            업데이트된 환자 레코드 복사본

        Raises:
            NotFoundError: 환자가 없을 때
            InvalidInputError: 페이로드가 잘못되었을 때
        """
        try:
            info = coerce_patch(ClinicalInfoPatch, patch)
            lock = self._lock_for(patient_id)
        except ServiceError as exc:
            log_event(
                "clinical_info_update_failed",
                "WARNING",
                "patient",
                patient_id,
                exc.message,
                error_code=exc.code,
            )
            raise

        supplied = info.supplied()
        with lock:
            updated = self._records[patient_id].model_copy(deep=True, update=supplied)
            updated.updated_at = self._clock()
            self._records[patient_id] = updated
            snapshot = updated.model_copy(deep=True)

        log_event(
            "clinical_info_updated",
            "INFO",
            "patient",
            patient_id,
            f"fields={sorted(supplied)}",
        )
        return snapshot
