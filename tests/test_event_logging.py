import json
import logging

import pytest

from app.core.errors import NotFoundError
from app.core.logger import log_event
from app.core.logging import EventFormatter, JsonEventFormatter, build_handler
from app.core.telemetry import TelemetryStore
from app.stores.patients import PatientStore


def test_vitals_update_is_recorded(make_patient):
    store = PatientStore([make_patient(7)])
    store.update_vitals(7, {"spo2": 85})

    rows = TelemetryStore().query_logs("event = ?", ["vitals_updated"])
    assert len(rows) == 1
    assert rows[0][3] == "patient"
    assert rows[0][4] == "7"
    assert "condition=Serious" in rows[0][6]


def test_failed_update_records_error_code(make_patient):
    store = PatientStore([make_patient(7)])
    with pytest.raises(NotFoundError):
        store.update_vitals(8, {"spo2": 85})

    rows = TelemetryStore().query_logs("event = ?", ["vitals_update_failed"])
    assert len(rows) == 1
    assert rows[0][5] == "NOT_FOUND_001"


def test_telemetry_can_be_disabled(monkeypatch):
    from app.core.config import get_settings

    monkeypatch.setenv("TELEMETRY_ENABLED", "false")
    get_settings.cache_clear()
    log_event("note_added", "INFO", "note", 1, "skipped")

    monkeypatch.setenv("TELEMETRY_ENABLED", "true")
    get_settings.cache_clear()
    assert TelemetryStore().query_logs("event = ?", ["note_added"]) == []


def test_log_event_reaches_standard_logging(caplog):
    with caplog.at_level(logging.INFO, logger="doctor-desk"):
        log_event("profile_updated", "INFO", "profile", "Dr. X", "fields=['phone']")
    record = caplog.records[-1]
    assert record.event == "profile_updated"
    assert record.entity == "profile"
    assert record.entity_id == "Dr. X"


def test_unwritable_telemetry_does_not_fail_update(tmp_path, monkeypatch, make_patient, caplog):
    from app.core.config import get_settings

    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    monkeypatch.setenv("DUCKDB_PATH", str(blocker / "telemetry.duckdb"))
    get_settings.cache_clear()

    store = PatientStore([make_patient(1)])
    with caplog.at_level(logging.ERROR, logger="doctor-desk"):
        record = store.update_vitals(1, {"spo2": 85})

    assert record.severity_score == 6
    assert store.get_by_id(1).spo2 == 85
    assert any(r.event == "telemetry_failed" for r in caplog.records)


def test_close_all_releases_connections():
    first = TelemetryStore()
    TelemetryStore.close_all()
    assert TelemetryStore._instances == {}

    second = TelemetryStore()
    assert second is not first
    second.insert_log({"event": "reopened"})
    assert len(second.query_logs("event = ?", ["reopened"])) == 1


def test_console_formatter_fills_missing_event_fields():
    formatter = EventFormatter("event=%(event)s entity=%(entity)s entity_id=%(entity_id)s %(message)s")
    record = logging.makeLogRecord({"msg": "plain message", "levelname": "INFO"})
    assert formatter.format(record) == "event=system entity=- entity_id=- plain message"


def test_json_formatter_renders_event_fields():
    record = logging.makeLogRecord(
        {
            "name": "doctor-desk",
            "msg": "severity=%d",
            "args": (6,),
            "levelname": "INFO",
            "event": "vitals_updated",
            "entity": "patient",
            "entity_id": "3",
        }
    )
    payload = json.loads(JsonEventFormatter().format(record))
    assert payload["event"] == "vitals_updated"
    assert payload["entity"] == "patient"
    assert payload["entity_id"] == "3"
    assert payload["message"] == "severity=6"
    assert payload["logger"] == "doctor-desk"


def test_build_handler_picks_formatter():
    assert type(build_handler("json").formatter) is JsonEventFormatter
    assert type(build_handler("console").formatter) is EventFormatter
