"""Admin dashboard: analytics, daily stats, role management and charts."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from sqlalchemy.orm import Session

from app.auth.dependencies import CurrentUser, require_admin
from app.config import settings
from app.db.analytics import admin_analytics, assessment_stats
from app.db.models import User, UserRole
from app.db.session import get_db
from app.errors import NotFound
from app.models.requests import RoleUpdate
from app.models.responses import AnalyticsResponse, DailyStats, UserRoleOut
from app.reports.charts import confidence_distribution_png, daily_trends_png

router = APIRouter(prefix="/admin", tags=["admin"])

logger = logging.getLogger(__name__)


@router.get("/analytics", response_model=AnalyticsResponse)
def analytics(
    _: CurrentUser = Depends(require_admin),
    db: Session = Depends(get_db),
) -> AnalyticsResponse:
    return AnalyticsResponse(**admin_analytics(db))


@router.get("/stats", response_model=list[DailyStats])
def stats(
    days_back: int = Query(default=settings.stats_days_back, ge=1, le=365),
    _: CurrentUser = Depends(require_admin),
    db: Session = Depends(get_db),
) -> list[DailyStats]:
    return [DailyStats(**row) for row in assessment_stats(db, days_back=days_back)]


@router.get("/roles", response_model=list[UserRoleOut])
def list_roles(
    _: CurrentUser = Depends(require_admin),
    db: Session = Depends(get_db),
) -> list[UserRole]:
    return db.query(UserRole).order_by(UserRole.created_at.desc()).all()


@router.put("/roles/{user_id}", response_model=UserRoleOut)
def set_role(
    user_id: str,
    req: RoleUpdate,
    current: CurrentUser = Depends(require_admin),
    db: Session = Depends(get_db),
) -> UserRole:
    if db.get(User, user_id) is None:
        raise NotFound("User not found")
    row = db.query(UserRole).filter(UserRole.user_id == user_id).one_or_none()
    if row is None:
        row = UserRole(user_id=user_id, role=req.role)
        db.add(row)
    else:
        row.role = req.role
    db.commit()
    logger.info("Admin %s set role of %s to %s", current.id, user_id, req.role)
    return row


@router.get("/charts/confidence.png", response_class=Response)
def confidence_chart(
    _: CurrentUser = Depends(require_admin),
    db: Session = Depends(get_db),
) -> Response:
    return Response(content=confidence_distribution_png(admin_analytics(db)), media_type="image/png")


@router.get("/charts/trends.png", response_class=Response)
def trends_chart(
    days_back: int = Query(default=settings.stats_days_back, ge=1, le=365),
    _: CurrentUser = Depends(require_admin),
    db: Session = Depends(get_db),
) -> Response:
    png = daily_trends_png(assessment_stats(db, days_back=days_back), days_back=days_back)
    return Response(content=png, media_type="image/png")
