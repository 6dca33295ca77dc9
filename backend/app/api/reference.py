"""Static reference data: symptom checklist, emergency info, hospitals, treatments, medicines."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from app.reference import catalog

router = APIRouter(prefix="/reference", tags=["reference"])


@router.get("/symptoms")
async def symptoms() -> list[dict[str, str]]:
    return catalog.TB_SYMPTOMS


@router.get("/durations")
async def durations() -> list[dict[str, str]]:
    return catalog.SYMPTOM_DURATIONS


@router.get("/emergency")
async def emergency() -> dict[str, Any]:
    return {
        "numbers": catalog.EMERGENCY_NUMBERS,
        "guidelines": catalog.EMERGENCY_GUIDELINES,
    }


@router.get("/hospitals")
async def hospitals() -> list[dict[str, Any]]:
    return catalog.EXAMPLE_HOSPITALS


@router.get("/treatments")
async def treatments() -> list[dict[str, Any]]:
    return catalog.TREATMENT_CATEGORIES


@router.get("/medicines")
async def medicines(q: str = "") -> list[dict[str, Any]]:
    return catalog.search_medicines(q)
