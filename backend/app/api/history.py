"""Assessment history: list, detail, delete and PDF export."""

from __future__ import annotations

import logging
from typing import Literal

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from app.auth.dependencies import CurrentUser, get_current_user
from app.db.models import PatientAssessment
from app.db.session import get_db
from app.errors import NotFound
from app.i18n import DEFAULT_LANGUAGE, is_supported
from app.models.responses import AssessmentOut
from app.reports.pdf import build_assessment_pdf

router = APIRouter(prefix="/assessments", tags=["history"])

logger = logging.getLogger(__name__)


def _escape_like(term: str) -> str:
    """Make LIKE match the term literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _visible(db: Session, current: CurrentUser):
    query = db.query(PatientAssessment)
    if not current.has_elevated_access:
        query = query.filter(PatientAssessment.user_id == current.id)
    return query


def _get_visible(db: Session, current: CurrentUser, assessment_id: str) -> PatientAssessment:
    row = _visible(db, current).filter(PatientAssessment.id == assessment_id).one_or_none()
    if row is None:
        raise NotFound("Assessment not found")
    return row


@router.get("", response_model=list[AssessmentOut])
def list_assessments(
    search: str = "",
    confidence: Literal["all", "low", "medium", "high"] = "all",
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[PatientAssessment]:
    query = _visible(db, current)
    term = search.strip().lower()
    if term:
        pattern = f"%{_escape_like(term)}%"
        query = query.filter(or_(
            func.lower(PatientAssessment.patient_name).like(pattern, escape="\\"),
            func.lower(PatientAssessment.diagnosis_summary).like(pattern, escape="\\"),
        ))
    if confidence != "all":
        query = query.filter(PatientAssessment.confidence == confidence)
    return query.order_by(PatientAssessment.created_at.desc()).all()


@router.get("/{assessment_id}", response_model=AssessmentOut)
def get_assessment(
    assessment_id: str,
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> PatientAssessment:
    return _get_visible(db, current, assessment_id)


@router.delete("/{assessment_id}", status_code=204)
def delete_assessment(
    assessment_id: str,
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Response:
    row = _get_visible(db, current, assessment_id)
    db.delete(row)
    db.commit()
    logger.info("Deleted assessment %s", assessment_id)
    return Response(status_code=204)


@router.get("/{assessment_id}/report.pdf", response_class=Response)
def assessment_report(
    assessment_id: str,
    lang: str = Query(default=DEFAULT_LANGUAGE),
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Response:
    row = _get_visible(db, current, assessment_id)
    language = lang if is_supported(lang) else DEFAULT_LANGUAGE
    pdf = build_assessment_pdf(row, language=language)
    safe_name = "".join(c if c.isalnum() else "_" for c in row.patient_name) or "patient"
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="TB_Assessment_{safe_name}.pdf"'},
    )
