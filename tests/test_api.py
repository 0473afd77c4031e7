import pytest
from fastapi.testclient import TestClient

from app.main import app, create_app


def _make_client() -> TestClient:
    return TestClient(create_app())


def test_health():
    client = _make_client()
    assert client.get("/health").json() == {"status": "ok"}


def test_list_patients_returns_envelope():
    client = _make_client()
    response = client.get("/v1/patients")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert [p["patient_id"] for p in body["data"]] == [1, 2, 3]


def test_list_patients_filters():
    client = _make_client()
    response = client.get("/v1/patients", params={"min_severity": 4, "max_severity": 8})
    assert [p["patient_id"] for p in response.json()["data"]] == [2]

    response = client.get("/v1/patients", params={"condition": "critical"})
    assert [p["patient_id"] for p in response.json()["data"]] == [1]


def test_get_patient_not_found():
    client = _make_client()
    response = client.get("/v1/patients/999")
    assert response.status_code == 404
    assert response.json()["error_code"] == "NOT_FOUND_001"


def test_update_vitals_recomputes_severity():
    client = _make_client()
    response = client.patch("/v1/patients/3/vitals", json={"spo2": 85})
    assert response.status_code == 200
    body = response.json()
    assert body["severity_score"] == 6
    assert body["condition"] == "Serious"
    assert body["heart_rate"] == 78

    response = client.patch("/v1/patients/3/vitals", json={"respRate": 30})
    assert response.json()["condition"] == "Critical"


@pytest.mark.parametrize("payload", [{"heartRate": "fast"}, {"pulse": 80}])
def test_update_vitals_rejects_bad_payload(payload):
    client = _make_client()
    response = client.patch("/v1/patients/3/vitals", json=payload)
    assert response.status_code == 422
    assert response.json()["error_code"] == "INPUT_INVALID_001"
    assert client.get("/v1/patients/3").json()["severity_score"] == 3


def test_update_clinical_info():
    client = _make_client()
    response = client.patch("/v1/patients/2/clinical-info", json={"clinical_notes": "Afebrile"})
    assert response.status_code == 200
    assert response.json()["clinical_notes"] == "Afebrile"
    assert response.json()["severity_score"] == 4


def test_schedule_routes():
    client = _make_client()
    assert len(client.get("/v1/schedule").json()) == 3
    response = client.patch("/v1/schedule/3", json={"status": "completed"})
    assert response.json()["status"] == "completed"
    assert client.patch("/v1/schedule/42", json={"status": "completed"}).status_code == 404
    assert client.patch("/v1/schedule/3", json={"status": "later"}).status_code == 422


def test_note_routes():
    client = _make_client()
    response = client.post(
        "/v1/notes",
        json={"patient_id": 1, "patient_name": "Ramesh Kumar", "title": "ABG", "content": "pH 7.31"},
    )
    assert response.status_code == 201
    assert response.json()["id"] == 3
    ids = [note["id"] for note in client.get("/v1/notes").json()]
    assert sorted(ids) == [1, 2, 3]


def test_profile_routes():
    client = _make_client()
    assert client.get("/v1/profile").json()["full_name"] == "Dr. Ananya Rao"
    response = client.patch("/v1/profile", json={"department": "Critical Care"})
    assert response.json()["department"] == "Critical Care"
    assert client.patch("/v1/profile", json={"salary": 1}).status_code == 422


def test_apps_do_not_share_state():
    first = _make_client()
    second = _make_client()
    first.patch("/v1/patients/3/vitals", json={"spo2": 85})
    assert second.get("/v1/patients/3").json()["condition"] == "Stable"


def test_module_level_app_serves_seed_data():
    client = TestClient(app)
    assert client.get("/health").status_code == 200
    assert client.get("/v1/profile").json()["full_name"] == "Dr. Ananya Rao"
