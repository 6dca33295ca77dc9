"""Admin analytics over ``patient_assessments``.

Two read models: a single summary row (totals, confidence split, recent
activity) and a per-day series for trend charts. Bucketing happens in Python
so the same code runs on SQLite and Postgres.
"""

from __future__ import annotations

from collections import OrderedDict
from datetime import datetime, timedelta
from typing import Any

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.db.models import PatientAssessment, utcnow

CONFIDENCE_LEVELS = ("high", "medium", "low")


def admin_analytics(db: Session, now: datetime | None = None) -> dict[str, int]:
    now = now or utcnow()

    total = db.query(func.count(PatientAssessment.id)).scalar() or 0
    with_imaging = (
        db.query(func.count(PatientAssessment.id))
        .filter(PatientAssessment.has_image.is_(True))
        .scalar()
        or 0
    )

    by_confidence = dict(
        db.query(PatientAssessment.confidence, func.count(PatientAssessment.id))
        .group_by(PatientAssessment.confidence)
        .all()
    )

    def _since(days: int) -> int:
        cutoff = now - timedelta(days=days)
        return (
            db.query(func.count(PatientAssessment.id))
            .filter(PatientAssessment.created_at >= cutoff)
            .scalar()
            or 0
        )

    return {
        "total_assessments": total,
        "assessments_with_imaging": with_imaging,
        "high_confidence": by_confidence.get("high", 0),
        "medium_confidence": by_confidence.get("medium", 0),
        "low_confidence": by_confidence.get("low", 0),
        "last_7_days": _since(7),
        "last_30_days": _since(30),
    }


def assessment_stats(
    db: Session,
    days_back: int = 30,
    now: datetime | None = None,
) -> list[dict[str, Any]]:
    """Per-day counts for days that have at least one assessment, oldest first."""
    now = now or utcnow()
    cutoff = now - timedelta(days=days_back)

    rows = (
        db.query(PatientAssessment.created_at, PatientAssessment.confidence)
        .filter(PatientAssessment.created_at >= cutoff)
        .order_by(PatientAssessment.created_at.asc())
        .all()
    )

    buckets: OrderedDict[str, dict[str, Any]] = OrderedDict()
    for created_at, confidence in rows:
        day = created_at.date().isoformat()
        bucket = buckets.setdefault(day, {
            "date": day,
            "total_count": 0,
            "high_confidence_count": 0,
            "medium_confidence_count": 0,
            "low_confidence_count": 0,
        })
        bucket["total_count"] += 1
        if confidence in CONFIDENCE_LEVELS:
            bucket[f"{confidence}_confidence_count"] += 1

    return list(buckets.values())
