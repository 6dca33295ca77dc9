"""API response models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    ai_configured: bool = False


class AssistantResponse(BaseModel):
    message: str


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    role: str = "user"
    is_admin: bool = False
    has_elevated_access: bool = False


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserOut


class AssessmentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    patient_name: str
    patient_age: int
    patient_gender: str
    symptom_duration: str
    medical_history: str | None = None
    symptoms: list[str] = Field(default_factory=list)
    lab_results: str | None = None
    has_image: bool | None = False
    diagnosis_summary: str
    findings: list[str] = Field(default_factory=list)
    confidence: str
    confidence_score: float | None = None
    classification: str | None = None
    recommendation: str
    lesions: list[dict] | None = None
    created_at: datetime


class ProfileOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    full_name: str | None = None
    date_of_birth: str | None = None
    gender: str | None = None
    phone: str | None = None
    emergency_contact: str | None = None
    blood_type: str | None = None
    avatar_url: str | None = None


class MedicalHistoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    condition_name: str
    diagnosed_date: str | None = None
    status: str
    notes: str | None = None
    created_at: datetime


class FavoriteHospitalOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    hospital_name: str
    address: str | None = None
    phone: str | None = None
    specialties: list[str] | None = None
    notes: str | None = None
    created_at: datetime


class HealthMetricOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    metric_type: str
    value: float
    unit: str
    notes: str | None = None
    recorded_at: datetime


class AnalyticsResponse(BaseModel):
    total_assessments: int = 0
    assessments_with_imaging: int = 0
    high_confidence: int = 0
    medium_confidence: int = 0
    low_confidence: int = 0
    last_7_days: int = 0
    last_30_days: int = 0


class DailyStats(BaseModel):
    date: str
    total_count: int = 0
    high_confidence_count: int = 0
    medium_confidence_count: int = 0
    low_confidence_count: int = 0


class UserRoleOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    role: str
    created_at: datetime
