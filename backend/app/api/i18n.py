"""Interface translations."""

from __future__ import annotations

from fastapi import APIRouter

from app.errors import NotFound
from app.i18n import RTL_LANGUAGES, SUPPORTED_LANGUAGES, get_translations, is_supported

router = APIRouter(prefix="/i18n", tags=["i18n"])

_LANGUAGE_NAMES = {
    "en": "English",
    "es": "Español",
    "fr": "Français",
    "hi": "हिन्दी",
    "ar": "العربية",
}


@router.get("/languages")
async def languages() -> list[dict[str, object]]:
    return [
        {"code": code, "name": _LANGUAGE_NAMES[code], "rtl": code in RTL_LANGUAGES}
        for code in SUPPORTED_LANGUAGES
    ]


@router.get("/{language}")
async def translations(language: str) -> dict[str, str]:
    if not is_supported(language):
        raise NotFound(f"Unsupported language: {language}")
    return get_translations(language)
