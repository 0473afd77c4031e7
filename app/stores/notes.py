from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Mapping

from app.core.errors import ServiceError
from app.core.logger import log_event
from app.models.dashboard import ClinicalNote, NewClinicalNote
from app.utils.clock import parse_iso, utc_now_iso
from app.utils.parsing import coerce_patch


class NoteStore:
    """의사가 작성한 임상 노트 저장소

    저장 순서가 원본이며 정렬은 조회 시점에 수행한다.
    """

    def __init__(
        self,
        notes: Iterable[ClinicalNote] = (),
        clock: Callable[[], str] = utc_now_iso,
    ) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._notes = [note.model_copy() for note in notes]
        self._next_id = max((note.id for note in self._notes), default=0) + 1

    def list_sorted_by_creation_descending(self) -> list[ClinicalNote]:
        """생성 시각 내림차순 노트 목록

        Returns:
            노트 복사본 목록(최신순, 동시각이면 식별자 내림차순)
        """
        with self._lock:
            notes = [note.model_copy() for note in self._notes]
        return sorted(notes, key=lambda note: (parse_iso(note.created_at), note.id), reverse=True)

    def add(self, note: NewClinicalNote | Mapping) -> ClinicalNote:
        """새 노트를 추가

        Args:
            note: 식별자와 생성 시각이 없는 노트

        Returns:
            식별자와 생성 시각이 부여된 노트

        Raises:
            InvalidInputError: 페이로드가 잘못되었을 때
        """
        try:
            draft = coerce_patch(NewClinicalNote, note)
        except ServiceError as exc:
            log_event("note_add_failed", "WARNING", "note", "-", exc.message, error_code=exc.code)
            raise
        with self._lock:
            created = ClinicalNote(
                **draft.model_dump(),
                id=self._next_id,
                created_at=self._clock(),
            )
            self._next_id += 1
            self._notes.append(created)
        log_event("note_added", "INFO", "note", created.id, f"patient={created.patient_name}")
        return created.model_copy()
