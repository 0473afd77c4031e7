from __future__ import annotations

import threading
from collections.abc import Mapping

from pydantic import ValidationError

from app.core.errors import ServiceError
from app.core.logger import log_event
from app.models.dashboard import DoctorInfo, DoctorInfoPatch
from app.utils.parsing import coerce_patch, invalid_input_from


class ProfileStore:
    """로그인한 의사 프로필 저장소"""

    def __init__(self, profile: DoctorInfo) -> None:
        self._lock = threading.Lock()
        self._profile = profile.model_copy()

    def get(self) -> DoctorInfo:
        with self._lock:
            return self._profile.model_copy()

    def update(self, patch: DoctorInfoPatch | Mapping) -> DoctorInfo:
        """프로필을 얕게 병합

        Args:
            patch: 프로필 부분 업데이트

        Returns:
            병합된 프로필 복사본

        Raises:
            InvalidInputError: 알 수 없는 필드이거나 이름을 비웠을 때
        """
        try:
            changes = coerce_patch(DoctorInfoPatch, patch).model_dump(exclude_unset=True)
            with self._lock:
                try:
                    merged = DoctorInfo.model_validate({**self._profile.model_dump(), **changes})
                except ValidationError as exc:
                    raise invalid_input_from(exc) from exc
                self._profile = merged
        except ServiceError as exc:
            log_event("profile_update_failed", "WARNING", "profile", "-", exc.message, error_code=exc.code)
            raise
        log_event("profile_updated", "INFO", "profile", merged.full_name, f"fields={sorted(changes)}")
        return merged.model_copy()
