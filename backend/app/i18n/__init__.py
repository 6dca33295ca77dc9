"""Interface strings in English, Spanish, French, Hindi and Arabic.

Locale tables live in ``locales/<code>.json``. Lookups fall back to English
for unknown languages and to the key itself for unknown keys.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path

SUPPORTED_LANGUAGES = ("en", "es", "fr", "hi", "ar")
DEFAULT_LANGUAGE = "en"
RTL_LANGUAGES = frozenset({"ar"})

_LOCALES_DIR = Path(__file__).parent / "locales"


@lru_cache(maxsize=None)
def get_translations(language: str) -> dict[str, str]:
    if language not in SUPPORTED_LANGUAGES:
        language = DEFAULT_LANGUAGE
    with open(_LOCALES_DIR / f"{language}.json", encoding="utf-8") as f:
        return json.load(f)


def translate(key: str, language: str = DEFAULT_LANGUAGE) -> str:
    return get_translations(language).get(key, key)


def is_supported(language: str) -> bool:
    return language in SUPPORTED_LANGUAGES
