"""Shared test fixtures."""

from __future__ import annotations

import base64
import io
import os

# Settings are read at import time; point them at a throwaway database first.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ANTHROPIC_API_KEY"] = ""
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from PIL import Image

from app.db.models import Base, UserRole
from app.db.session import SessionLocal, engine


SAMPLE_PATIENT = {
    "name": "Jane Doe",
    "age": 42,
    "gender": "female",
    "duration": "3-4-weeks",
    "history": "Diabetes type 2",
}

SAMPLE_REQUEST = {
    "patientData": SAMPLE_PATIENT,
    "symptoms": ["chronic-cough", "night-sweats", "weight-loss"],
    "labResults": "Sputum smear: pending",
}

MODEL_REPLY = """Here is my assessment:
```json
{
  "summary": "Findings are suggestive of pulmonary tuberculosis.",
  "findings": ["Upper lobe opacity", "Chronic productive cough"],
  "confidence": "high",
  "confidenceScore": 0.82,
  "classification": "likely_tb",
  "recommendation": "Sputum GeneXpert and referral to a TB clinic.",
  "disclaimer": "Not a medical diagnosis.",
  "lesions": [{"x": 0.2, "y": 0.15, "width": 0.25, "height": 0.2, "confidence": 0.78}]
}
```"""


def png_bytes(width: int = 40, height: int = 30, color: tuple[int, int, int] = (255, 255, 255)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (width, height), color).save(buf, format="PNG")
    return buf.getvalue()


def png_data_url(width: int = 40, height: int = 30) -> str:
    return "data:image/png;base64," + base64.b64encode(png_bytes(width, height)).decode("ascii")


def signup(client, email: str = "user@example.com", password: str = "secret123") -> dict[str, str]:
    """Register an account and return its Authorization header."""
    response = client.post("/api/auth/signup", json={"email": email, "password": password})
    assert response.status_code == 201, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


def set_role(client, headers: dict[str, str], role: str) -> None:
    user_id = client.get("/api/auth/me", headers=headers).json()["id"]
    with SessionLocal() as db:
        db.query(UserRole).filter(UserRole.user_id == user_id).update({"role": role})
        db.commit()


@pytest.fixture(autouse=True)
def fresh_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def image_data_url() -> str:
    return png_data_url()
