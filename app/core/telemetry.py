from __future__ import annotations

import threading
from pathlib import Path

import duckdb

from app.core.config import get_settings


class TelemetryStore:
    """이벤트 로그를 저장하는 DuckDB 텔레메트리 저장소

    DuckDB 파일 경로마다 하나의 인스턴스를 공유한다.
    """

    _instances: dict[str, "TelemetryStore"] = {}
    _instances_lock = threading.Lock()

    def __new__(cls) -> "TelemetryStore":
        path = get_settings().duckdb_path
        with cls._instances_lock:
            instance = cls._instances.get(path)
            if instance is None:
                instance = super().__new__(cls)
                instance._init_db(path)
                cls._instances[path] = instance
        return instance

    def _init_db(self, path: str) -> None:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._conn = duckdb.connect(path)
        self._conn.execute(
            """
            CREATE TABLE IF NOT EXISTS logs (
                timestamp VARCHAR,
                level VARCHAR,
                event VARCHAR,
                entity VARCHAR,
                entity_id VARCHAR,
                error_code VARCHAR,
                message VARCHAR,
                duration_ms INTEGER
            )
            """
        )

    def insert_log(self, record: dict) -> None:
        """로그 레코드를 저장

        Args:
            record: 로그 레코드 딕셔너리
        """
        with self._lock:
            self._conn.execute(
                """
                INSERT INTO logs (timestamp, level, event, entity, entity_id, error_code, message, duration_ms)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                [
                    record.get("timestamp"),
                    record.get("level"),
                    record.get("event"),
                    record.get("entity"),
                    record.get("entity_id"),
                    record.get("error_code"),
                    record.get("message"),
                    record.get("duration_ms"),
                ],
            )

    def query_logs(self, where: str, params: list) -> list[tuple]:
        """조건절(WHERE)을 사용해 로그를 조회

        Args:
            where: SQL WHERE 절
            params: 파라미터 목록

        Returns:
            행 목록
        """
        query = "SELECT * FROM logs"
        if where:
            query += f" WHERE {where}"
        query += " ORDER BY timestamp"
        with self._lock:
            return self._conn.execute(query, params).fetchall()

    def close(self) -> None:
        """연결을 닫고 경로별 캐시에서 제거"""
        with self._instances_lock:
            for path, instance in list(self._instances.items()):
                if instance is self:
                    del self._instances[path]
        with self._lock:
            self._conn.close()

    @classmethod
    def close_all(cls) -> None:
        """캐시된 모든 연결을 닫음"""
        with cls._instances_lock:
            instances = list(cls._instances.values())
        for instance in instances:
            instance.close()
