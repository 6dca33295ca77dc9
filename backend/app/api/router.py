"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from app.api import admin, assistant, auth, diagnosis, health, history, i18n, profile, reference

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(auth.router)
api_router.include_router(diagnosis.router)
api_router.include_router(assistant.router)
api_router.include_router(history.router)
api_router.include_router(profile.router)
api_router.include_router(admin.router)
api_router.include_router(reference.router)
api_router.include_router(i18n.router)
