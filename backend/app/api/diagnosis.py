"""POST /api/analyze-diagnosis and POST /api/overlay."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from sqlalchemy.orm import Session

from app.auth.dependencies import CurrentUser, get_current_user
from app.config import settings
from app.db.models import PatientAssessment
from app.db.session import get_db
from app.errors import GatewayFailure
from app.imaging.data_url import validate_image_data
from app.imaging.overlay import overlay_legend, render_overlay_png
from app.llm import client as llm_client
from app.llm.parsing import coerce_diagnosis
from app.models.diagnosis import DiagnosisRequest, DiagnosisResponse, DiagnosisResult, OverlayRequest

router = APIRouter(tags=["diagnosis"])

logger = logging.getLogger(__name__)


def _save_assessment(
    db: Session,
    user_id: str,
    req: DiagnosisRequest,
    result: DiagnosisResult,
) -> PatientAssessment:
    patient = req.patient_data
    row = PatientAssessment(
        user_id=user_id,
        patient_name=patient.name,
        patient_age=patient.age,
        patient_gender=patient.gender,
        symptom_duration=patient.duration,
        medical_history=patient.history or None,
        symptoms=list(req.symptoms),
        lab_results=req.lab_results or None,
        has_image=bool(req.image_data),
        diagnosis_summary=result.summary,
        findings=list(result.findings),
        confidence=result.confidence,
        confidence_score=result.confidence_score,
        classification=result.classification,
        recommendation=result.recommendation,
        lesions=[lesion.model_dump() for lesion in result.lesions],
    )
    db.add(row)
    db.commit()
    return row


@router.post("/analyze-diagnosis", response_model=DiagnosisResponse)
async def analyze_diagnosis(
    req: DiagnosisRequest,
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> DiagnosisResponse:
    if req.image_data:
        validate_image_data(req.image_data, settings.max_image_bytes, settings.max_image_pixels)

    messages = llm_client.build_diagnosis_messages(req)
    raw = await llm_client.invoke_gateway(messages, task="diagnosis")
    if not raw.strip():
        raise GatewayFailure("No response from AI")

    result = coerce_diagnosis(raw, has_image=bool(req.image_data))
    row = _save_assessment(db, current.id, req, result)
    logger.info(
        "Assessment %s: %s (%s, %.2f), %d lesions",
        row.id, result.classification, result.confidence, result.confidence_score, len(result.lesions),
    )
    return DiagnosisResponse(**result.model_dump(), assessment_id=row.id)


@router.post("/overlay", response_class=Response)
async def overlay(req: OverlayRequest) -> Response:
    _, image_bytes = validate_image_data(req.image_data, settings.max_image_bytes, settings.max_image_pixels)
    png = render_overlay_png(image_bytes, req.lesions, max_width=settings.overlay_max_width)
    return Response(content=png, media_type="image/png")


@router.get("/overlay/legend")
async def legend() -> list[dict[str, object]]:
    return overlay_legend()
