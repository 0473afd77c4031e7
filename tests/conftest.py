import itertools
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from app.core.config import get_settings, load_seed_data
from app.core.telemetry import TelemetryStore
from app.models.admission import AdmittedPatient, BloodPressure

SEED_PATH = Path(__file__).resolve().parents[1] / "data" / "seed.yaml"


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """테스트마다 별도 DuckDB 파일과 캐시되지 않은 설정을 사용"""
    monkeypatch.setenv("DUCKDB_PATH", str(tmp_path / "telemetry.duckdb"))
    monkeypatch.setenv("SEED_PATH", str(SEED_PATH))
    monkeypatch.delenv("SIMULATED_LATENCY_MS", raising=False)
    monkeypatch.delenv("TELEMETRY_ENABLED", raising=False)
    get_settings.cache_clear()
    load_seed_data.cache_clear()
    yield
    TelemetryStore.close_all()
    get_settings.cache_clear()
    load_seed_data.cache_clear()


@pytest.fixture
def clock():
    """호출마다 1초씩 증가하는 UTC 시각"""
    base = datetime(2026, 10, 18, tzinfo=timezone.utc)
    ticks = itertools.count(1)

    def _now() -> str:
        moment = base + timedelta(seconds=next(ticks))
        return moment.isoformat().replace("+00:00", "Z")

    return _now


def _make_patient(patient_id: int, doctor: str = "Dr. X", **fields) -> AdmittedPatient:
    systolic = fields.pop("systolic", None)
    diastolic = fields.pop("diastolic", None)
    data = {
        "patient_id": patient_id,
        "patient_name": f"Patient {patient_id}",
        "age": 50,
        "gender": "Female",
        "bed_id": f"W1-{patient_id:02d}",
        "admission_date": "2026-10-01",
        "blood_pressure": BloodPressure(systolic=systolic, diastolic=diastolic),
        "doctor": doctor,
        "created_at": "2026-10-01T08:00:00Z",
        "updated_at": "2026-10-01T08:00:00Z",
    }
    data.update(fields)
    return AdmittedPatient(**data)


@pytest.fixture
def make_patient():
    """테스트용 입원 환자 레코드 팩토리"""
    return _make_patient
