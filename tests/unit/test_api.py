# ============================================================================
# FILE: tests/unit/test_api.py
# ============================================================================
"""
Unit tests for the HTTP API
"""

import pytest
from fastapi.testclient import TestClient

from prescription_analysis.api.main import app


@pytest.fixture
def client():
    return TestClient(app)


HYPERTENSION_TEXT = "Patient has hypertension.\nLisinopril 10mg once daily"


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_analyze(client, diabetes_text):
    response = client.post("/api/analyze", json={"text": diabetes_text, "confidence": 0.9})

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "pending"
    assert [d["disease_id"] for d in data["detected_diseases"]] == ["diabetes"]
    assert data["parsed_medications"][0]["name"] == "Metformin"
    assert data["confidence_level"] == "high"


def test_analyze_empty_text(client):
    response = client.post("/api/analyze", json={"text": "   ", "confidence": 0.9})

    assert response.status_code == 422
    assert "No text found" in response.json()["detail"]


def test_analyze_missing_confidence(client):
    response = client.post("/api/analyze", json={"text": "Metformin 500mg"})

    assert response.status_code == 422


def test_analyze_rejects_nan_confidence(client):
    response = client.post(
        "/api/analyze",
        content='{"text": "Metformin 500mg twice daily", "confidence": NaN}',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 422


def test_reconcile_creates_records(client):
    response = client.post("/api/reconcile", json={
        "text": HYPERTENSION_TEXT,
        "confidence": 0.9,
        "user_id": "user-1",
        "user_age": 58,
    })

    assert response.status_code == 200
    plan = response.json()["plan"]
    assert plan["user_id"] == "user-1"
    assert plan["profiles"][0]["action"] == "create_disease_profile"
    assert plan["profiles"][0]["profile"]["personal_info"] == {"age": 58}
    assert plan["medicines"][0]["action"] == "create_medicine"
    assert plan["medicines"][0]["medicine"]["name"] == "Lisinopril"
    assert plan["schedules"][0]["schedule"]["times_of_day"] == ["08:00"]
    assert plan["requires_manual_entry"] is False


def test_reconcile_merges_existing_records(client):
    response = client.post("/api/reconcile", json={
        "text": HYPERTENSION_TEXT,
        "confidence": 0.9,
        "user_id": "user-1",
        "existing_profiles": [{
            "id": "p-1",
            "user_id": "user-1",
            "disease_id": "hypertension",
            "disease_name": "Hypertension",
            "medication_history": "amlodipine",
            "created_at": "2023-05-01T00:00:00Z",
        }],
        "existing_medicines": [{
            "id": "m-1",
            "user_id": "user-1",
            "name": "lisinopril",
            "strength": "10mg",
            "stock_count": 4,
        }],
    })

    assert response.status_code == 200
    plan = response.json()["plan"]
    assert len(plan["profiles"]) == 1
    merge = plan["profiles"][0]
    assert merge["action"] == "merge_disease_profile"
    assert merge["existing_id"] == "p-1"
    assert merge["profile"]["medication_history"] == "amlodipine, lisinopril"
    assert merge["profile"]["created_at"].startswith("2023-05-01")
    assert plan["medicines"] == [{
        "action": "update_medicine_stock",
        "medicine_id": "m-1",
        "added_quantity": 30,
        "new_stock_count": 34,
    }]
    assert plan["schedules"][0]["schedule"]["medicine_id"] == "m-1"


def test_reconcile_nothing_found(client):
    response = client.post("/api/reconcile", json={
        "text": "Follow up in two weeks",
        "confidence": 0.9,
        "user_id": "user-1",
    })

    assert response.status_code == 200
    plan = response.json()["plan"]
    assert plan["requires_manual_entry"] is True
    assert plan["profiles"] == []


def test_reconcile_rejects_bad_age(client):
    response = client.post("/api/reconcile", json={
        "text": HYPERTENSION_TEXT,
        "confidence": 0.9,
        "user_id": "user-1",
        "user_age": 200,
    })

    assert response.status_code == 422
