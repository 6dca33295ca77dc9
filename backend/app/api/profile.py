"""Profile and personal records of the signed-in user."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from sqlalchemy.orm import Session

from app.auth.dependencies import CurrentUser, get_current_user
from app.db.models import FavoriteHospital, HealthMetric, MedicalHistory, Profile
from app.db.session import get_db
from app.errors import NotFound
from app.models.requests import (
    FavoriteHospitalCreate,
    HealthMetricCreate,
    MedicalHistoryCreate,
    ProfileUpdate,
)
from app.models.responses import FavoriteHospitalOut, HealthMetricOut, MedicalHistoryOut, ProfileOut

router = APIRouter(prefix="/profile", tags=["profile"])


def _get_or_create_profile(db: Session, user_id: str) -> Profile:
    profile = db.query(Profile).filter(Profile.user_id == user_id).one_or_none()
    if profile is None:
        profile = Profile(user_id=user_id)
        db.add(profile)
        db.commit()
    return profile


def _delete_owned(db: Session, model, row_id: str, user_id: str) -> Response:
    row = db.query(model).filter(model.id == row_id, model.user_id == user_id).one_or_none()
    if row is None:
        raise NotFound("Record not found")
    db.delete(row)
    db.commit()
    return Response(status_code=204)


@router.get("", response_model=ProfileOut)
def get_profile(
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Profile:
    return _get_or_create_profile(db, current.id)


@router.put("", response_model=ProfileOut)
def update_profile(
    req: ProfileUpdate,
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Profile:
    profile = _get_or_create_profile(db, current.id)
    for field, value in req.model_dump().items():
        setattr(profile, field, value or None)
    db.commit()
    return profile


# ── Medical history ──

@router.get("/medical-history", response_model=list[MedicalHistoryOut])
def list_medical_history(
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[MedicalHistory]:
    return (
        db.query(MedicalHistory)
        .filter(MedicalHistory.user_id == current.id)
        .order_by(MedicalHistory.diagnosed_date.desc(), MedicalHistory.created_at.desc())
        .all()
    )


@router.post("/medical-history", response_model=MedicalHistoryOut, status_code=201)
def add_medical_history(
    req: MedicalHistoryCreate,
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> MedicalHistory:
    row = MedicalHistory(
        user_id=current.id,
        condition_name=req.condition_name,
        diagnosed_date=req.diagnosed_date or None,
        status=req.status,
        notes=req.notes or None,
    )
    db.add(row)
    db.commit()
    return row


@router.delete("/medical-history/{record_id}", status_code=204)
def delete_medical_history(
    record_id: str,
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Response:
    return _delete_owned(db, MedicalHistory, record_id, current.id)


# ── Favourite hospitals ──

@router.get("/hospitals", response_model=list[FavoriteHospitalOut])
def list_hospitals(
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[FavoriteHospital]:
    return (
        db.query(FavoriteHospital)
        .filter(FavoriteHospital.user_id == current.id)
        .order_by(FavoriteHospital.created_at.desc())
        .all()
    )


@router.post("/hospitals", response_model=FavoriteHospitalOut, status_code=201)
def add_hospital(
    req: FavoriteHospitalCreate,
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> FavoriteHospital:
    row = FavoriteHospital(
        user_id=current.id,
        hospital_name=req.hospital_name,
        address=req.address or None,
        phone=req.phone or None,
        specialties=list(req.specialties),
        notes=req.notes or None,
    )
    db.add(row)
    db.commit()
    return row


@router.delete("/hospitals/{hospital_id}", status_code=204)
def delete_hospital(
    hospital_id: str,
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Response:
    return _delete_owned(db, FavoriteHospital, hospital_id, current.id)


# ── Health metrics ──

@router.get("/metrics", response_model=list[HealthMetricOut])
def list_metrics(
    limit: int = Query(default=10, ge=1, le=100),
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[HealthMetric]:
    return (
        db.query(HealthMetric)
        .filter(HealthMetric.user_id == current.id)
        .order_by(HealthMetric.recorded_at.desc())
        .limit(limit)
        .all()
    )


@router.post("/metrics", response_model=HealthMetricOut, status_code=201)
def add_metric(
    req: HealthMetricCreate,
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> HealthMetric:
    row = HealthMetric(
        user_id=current.id,
        metric_type=req.metric_type,
        value=req.value,
        unit=req.unit,
        notes=req.notes or None,
    )
    db.add(row)
    db.commit()
    return row


@router.delete("/metrics/{metric_id}", status_code=204)
def delete_metric(
    metric_id: str,
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Response:
    return _delete_owned(db, HealthMetric, metric_id, current.id)
