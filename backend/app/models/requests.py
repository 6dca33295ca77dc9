"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

AppRole = Literal["admin", "moderator", "user", "clinician", "radiologist"]


class AuthRequest(BaseModel):
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", description="Account email")
    password: str = Field(..., min_length=6, description="At least 6 characters")


class ChatMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class AssistantRequest(BaseModel):
    messages: list[ChatMessage] = Field(..., min_length=1)
    type: str = Field(default="default", description="Prompt flavour: symptom | default")


class ProfileUpdate(BaseModel):
    full_name: str = ""
    date_of_birth: str = ""
    gender: str = ""
    phone: str = ""
    emergency_contact: str = ""
    blood_type: str = ""


class MedicalHistoryCreate(BaseModel):
    condition_name: str = Field(..., min_length=1)
    diagnosed_date: str = ""
    status: Literal["active", "resolved", "managed"] = "active"
    notes: str = ""


class FavoriteHospitalCreate(BaseModel):
    hospital_name: str = Field(..., min_length=1)
    address: str = ""
    phone: str = ""
    specialties: list[str] = Field(default_factory=list)
    notes: str = ""


class HealthMetricCreate(BaseModel):
    metric_type: str = Field(..., min_length=1)
    value: float
    unit: str = Field(..., min_length=1)
    notes: str = ""


class RoleUpdate(BaseModel):
    role: AppRole
