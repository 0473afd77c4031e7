from functools import lru_cache
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.models.admission import AdmittedPatient
from app.models.dashboard import ClinicalNote, DoctorInfo, ScheduleSlot

DEFAULT_SEED_PATH = Path(__file__).resolve().parents[2] / "data" / "seed.yaml"


class Settings(BaseSettings):
    """환경 변수에서 애플리케이션 설정을 로드"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    environment: Literal["local", "dev", "prod"] = "local"
    version: str = "0.1.0"
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"
    seed_path: str = str(DEFAULT_SEED_PATH)
    duckdb_path: str = "data/telemetry.duckdb"
    telemetry_enabled: bool = True
    simulated_latency_ms: int = Field(default=0, ge=0)


class SeedData(BaseModel):
    """대시보드 초기 데이터"""

    doctor: DoctorInfo
    patients: list[AdmittedPatient] = Field(default_factory=list)
    schedule: list[ScheduleSlot] = Field(default_factory=list)
    notes: list[ClinicalNote] = Field(default_factory=list)


@lru_cache
def get_settings() -> Settings:
    """캐시된 설정 인스턴스를 반환"""
    return Settings()


@lru_cache
def load_seed_data() -> SeedData:
    """시드 파일(YAML)에서 초기 데이터 로드

    Returns:
        시드 데이터 인스턴스
    """
    settings = get_settings()
    with open(settings.seed_path, "r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    return SeedData(**data)


def reload_seed_data() -> SeedData:
    """시드 캐시를 초기화하고 다시 로드

    Returns:
        시드 데이터 인스턴스
    """
    load_seed_data.cache_clear()
    return load_seed_data()
