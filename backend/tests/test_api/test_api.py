"""Tests for meta, reference and i18n endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from app.main import app


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == "0.1.0"
    assert data["ai_configured"] is False


def test_prompts_lists_templates():
    data = client.get("/api/prompts").json()
    assert "diagnosis_system" in data
    assert "assistant_symptom" in data


def test_reference_symptoms():
    data = client.get("/api/reference/symptoms").json()
    assert len(data) == 8
    assert {"chronic-cough", "hemoptysis"} <= {s["id"] for s in data}


def test_reference_durations():
    data = client.get("/api/reference/durations").json()
    assert [d["id"] for d in data][0] == "less-than-1-week"
    assert len(data) == 5


def test_reference_emergency():
    data = client.get("/api/reference/emergency").json()
    assert data["numbers"]
    assert data["guidelines"]


def test_reference_hospitals_and_treatments():
    assert client.get("/api/reference/hospitals").json()
    assert client.get("/api/reference/treatments").json()


def test_medicine_search_by_use():
    data = client.get("/api/reference/medicines", params={"q": "FEVER"}).json()
    names = {m["name"] for m in data}
    assert "Paracetamol" in names
    assert all(
        "fever" in m["name"].lower() or any("fever" in u.lower() for u in m["uses"])
        for m in data
    )


def test_medicine_search_empty_returns_all():
    everything = client.get("/api/reference/medicines").json()
    assert len(everything) > 1


def test_i18n_languages():
    data = client.get("/api/i18n/languages").json()
    assert [lang["code"] for lang in data] == ["en", "es", "fr", "hi", "ar"]
    assert next(lang for lang in data if lang["code"] == "ar")["rtl"] is True


def test_i18n_table():
    data = client.get("/api/i18n/es").json()
    assert data["male"] == "Masculino"


def test_i18n_unsupported_language():
    response = client.get("/api/i18n/de")
    assert response.status_code == 404
    assert "de" in response.json()["error"]
