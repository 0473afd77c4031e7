from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import get_args

from app.core.errors import InvalidInputError, NotFoundError
from app.core.logger import log_event
from app.models.dashboard import ScheduleSlot, ScheduleStatus

SCHEDULE_STATUSES = get_args(ScheduleStatus)


class ScheduleStore:
    """오늘의 진료 일정 저장소"""

    def __init__(self, slots: Iterable[ScheduleSlot] = ()) -> None:
        self._lock = threading.Lock()
        self._slots = [slot.model_copy() for slot in slots]

    def list(self) -> list[ScheduleSlot]:
        """일정 슬롯 목록(삽입 순서)"""
        with self._lock:
            return [slot.model_copy() for slot in self._slots]

    def update_status(self, slot_id: int, status: str) -> ScheduleSlot:
        """슬롯 상태를 변경

        Args:
            slot_id: 슬롯 식별자
            status: 새 상태

        Returns:
            변경된 슬롯 복사본

        Raises:
            InvalidInputError: 지원하지 않는 상태일 때
            NotFoundError: 슬롯이 없을 때
        """
        if status not in SCHEDULE_STATUSES:
            log_event(
                "schedule_status_update_failed",
                "WARNING",
                "schedule",
                slot_id,
                f"지원하지 않는 상태: {status}",
                error_code="INPUT_INVALID_001",
            )
            raise InvalidInputError("status", f"지원하지 않는 값: {status}")
        with self._lock:
            for index, slot in enumerate(self._slots):
                if slot.id == slot_id:
                    updated = slot.model_copy(update={"status": status})
                    self._slots[index] = updated
                    break
            else:
                updated = None
        if updated is None:
            log_event(
                "schedule_status_update_failed",
                "WARNING",
                "schedule",
                slot_id,
                "슬롯 없음",
                error_code="NOT_FOUND_001",
            )
            raise NotFoundError("schedule slot", slot_id)
        log_event("schedule_status_updated", "INFO", "schedule", slot_id, f"status={status}")
        return updated.model_copy()
