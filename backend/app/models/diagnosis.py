"""Diagnosis request/response contract between the client and the AI gateway route."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Confidence = Literal["low", "medium", "high"]
Classification = Literal["no_tb", "possible_tb", "likely_tb"]
Gender = Literal["male", "female", "other"]
SymptomDuration = Literal[
    "less-than-1-week",
    "1-2-weeks",
    "2-3-weeks",
    "3-4-weeks",
    "more-than-4-weeks",
]


class PatientData(BaseModel):
    name: str = Field(..., min_length=1, description="Patient full name")
    age: int = Field(..., ge=0, le=120)
    gender: Gender
    duration: SymptomDuration = Field(..., description="How long symptoms have lasted")
    history: str = Field(default="", description="Free-text medical history")


class DiagnosisRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    patient_data: PatientData = Field(..., alias="patientData")
    symptoms: list[str] = Field(..., min_length=1, description="Selected symptom ids or labels")
    lab_results: str = Field(default="", alias="labResults")
    image_data: str | None = Field(
        default=None,
        alias="imageData",
        description="Chest X-ray/CT as a data:image/...;base64 URL",
    )


class Lesion(BaseModel):
    """Normalized box: every coordinate is a fraction of the image size."""

    x: float = Field(..., ge=0.0, le=1.0)
    y: float = Field(..., ge=0.0, le=1.0)
    width: float = Field(..., ge=0.0, le=1.0)
    height: float = Field(..., ge=0.0, le=1.0)
    confidence: float = Field(..., ge=0.0, le=1.0)


class DiagnosisResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    summary: str
    findings: list[str] = Field(default_factory=list)
    confidence: Confidence = "medium"
    confidence_score: float = Field(default=0.6, ge=0.0, le=1.0, alias="confidenceScore")
    classification: Classification = "possible_tb"
    recommendation: str
    disclaimer: str
    lesions: list[Lesion] = Field(default_factory=list)


class DiagnosisResponse(DiagnosisResult):
    assessment_id: str | None = Field(default=None, alias="assessmentId")


class OverlayRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_data: str = Field(..., alias="imageData")
    lesions: list[Lesion] = Field(default_factory=list)
