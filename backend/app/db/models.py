"""Relational schema: accounts, roles, profiles, assessments and personal records."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()

APP_ROLES = ("admin", "moderator", "user", "clinician", "radiologist")
ELEVATED_ROLES = ("admin", "clinician", "radiologist")


def utcnow() -> datetime:
    """Naive UTC timestamp; SQLite drops tzinfo, so every row stores naive UTC."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _uuid() -> str:
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_uuid)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(128), nullable=False)
    created_at = Column(DateTime, default=utcnow)


class UserRole(Base):
    __tablename__ = "user_roles"

    id = Column(String(36), primary_key=True, default=_uuid)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True, index=True)
    role = Column(String(20), nullable=False, default="user")
    created_at = Column(DateTime, default=utcnow, index=True)


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True, default=_uuid)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True, index=True)
    full_name = Column(String(200))
    date_of_birth = Column(String(20))
    gender = Column(String(20))
    phone = Column(String(50))
    emergency_contact = Column(String(200))
    blood_type = Column(String(5))
    avatar_url = Column(Text)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)


class PatientAssessment(Base):
    __tablename__ = "patient_assessments"

    id = Column(String(36), primary_key=True, default=_uuid)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Patient input
    patient_name = Column(String(200), nullable=False)
    patient_age = Column(Integer, nullable=False)
    patient_gender = Column(String(20), nullable=False)
    symptom_duration = Column(String(50), nullable=False)
    medical_history = Column(Text)
    symptoms = Column(JSON, nullable=False, default=list)
    lab_results = Column(Text)
    has_image = Column(Boolean, default=False)

    # Model output after normalization
    diagnosis_summary = Column(Text, nullable=False)
    findings = Column(JSON, nullable=False, default=list)
    confidence = Column(String(10), nullable=False, index=True)
    confidence_score = Column(Float)
    classification = Column(String(20))
    recommendation = Column(Text, nullable=False)
    lesions = Column(JSON, default=list)

    created_at = Column(DateTime, default=utcnow, index=True)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)


class MedicalHistory(Base):
    __tablename__ = "medical_history"

    id = Column(String(36), primary_key=True, default=_uuid)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    condition_name = Column(String(200), nullable=False)
    diagnosed_date = Column(String(20))
    status = Column(String(20), nullable=False, default="active")
    notes = Column(Text)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)


class FavoriteHospital(Base):
    __tablename__ = "favorite_hospitals"

    id = Column(String(36), primary_key=True, default=_uuid)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    hospital_name = Column(String(200), nullable=False)
    address = Column(Text)
    phone = Column(String(50))
    specialties = Column(JSON)
    notes = Column(Text)
    created_at = Column(DateTime, default=utcnow)


class HealthMetric(Base):
    __tablename__ = "health_metrics"

    id = Column(String(36), primary_key=True, default=_uuid)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    metric_type = Column(String(50), nullable=False)
    value = Column(Float, nullable=False)
    unit = Column(String(20), nullable=False)
    notes = Column(Text)
    recorded_at = Column(DateTime, default=utcnow, index=True)
    created_at = Column(DateTime, default=utcnow)
