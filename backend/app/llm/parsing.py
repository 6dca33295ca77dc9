"""Coerce raw model text into a ``DiagnosisResult``.

The model is asked for JSON but answers are free text: the object may be
wrapped in prose or code fences, fields may be missing, mistyped or out of
range. Every field gets a normalizer with a fallback default so the caller
always receives a complete result.
"""

from __future__ import annotations

import json
import logging
import math
import re
from typing import Any

from app.models.diagnosis import DiagnosisResult, Lesion

logger = logging.getLogger(__name__)

FALLBACK_FINDINGS = ["Analysis completed. Please review the summary."]
DEFAULT_RECOMMENDATION = (
    "Consult with a qualified healthcare professional for comprehensive evaluation."
)
DEFAULT_DISCLAIMER = (
    "⚠️ This is an AI-based diagnostic suggestion, not a medical diagnosis. "
    "Always consult a qualified physician."
)
DEFAULT_SUMMARY = "No summary was provided by the analysis."

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")

_CONFIDENCE_LEVELS = ("low", "medium", "high")
_TIER_SCORES = {"low": 0.3, "medium": 0.6, "high": 0.85}

_CLASSIFICATION_ALIASES = {
    "no_tb": "no_tb",
    "notb": "no_tb",
    "no": "no_tb",
    "negative": "no_tb",
    "unlikely_tb": "no_tb",
    "possible_tb": "possible_tb",
    "possibletb": "possible_tb",
    "possible": "possible_tb",
    "suspected_tb": "possible_tb",
    "likely_tb": "likely_tb",
    "likelytb": "likely_tb",
    "likely": "likely_tb",
    "probable_tb": "likely_tb",
    "positive": "likely_tb",
}


def extract_json_object(text: str | None) -> dict[str, Any] | None:
    """Greedy first-``{`` to last-``}`` match, parsed. ``None`` if absent or invalid."""
    if not text:
        return None
    match = _JSON_OBJECT.search(text)
    if match is None:
        return None
    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        logger.error("Failed to parse AI response as JSON: %s", e)
        return None
    return parsed if isinstance(parsed, dict) else None


def fallback_result(raw_text: str) -> DiagnosisResult:
    return DiagnosisResult(
        summary=raw_text.strip() or DEFAULT_SUMMARY,
        findings=list(FALLBACK_FINDINGS),
        confidence="medium",
        confidence_score=_TIER_SCORES["medium"],
        classification="possible_tb",
        recommendation=DEFAULT_RECOMMENDATION,
        disclaimer=DEFAULT_DISCLAIMER,
        lesions=[],
    )


def _text(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def normalize_findings(value: Any) -> list[str]:
    if isinstance(value, str):
        items = [value]
    elif isinstance(value, list):
        items = value
    else:
        items = []
    findings = []
    for item in items:
        if item is None:
            continue
        text = item if isinstance(item, str) else json.dumps(item, ensure_ascii=False)
        text = text.strip()
        if text:
            findings.append(text)
    return findings or list(FALLBACK_FINDINGS)


def normalize_confidence(value: Any) -> str:
    if isinstance(value, str):
        level = value.strip().lower()
        if level in _CONFIDENCE_LEVELS:
            return level
    return "medium"


def normalize_score(value: Any) -> float | None:
    """Float in [0, 1]; percentages in (1, 100] are scaled down. ``None`` if unusable."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().rstrip("%")
        try:
            value = float(value)
        except ValueError:
            return None
    if not isinstance(value, (int, float)):
        return None
    score = float(value)
    if score != score:  # NaN
        return None
    if 1.0 < score <= 100.0:
        score /= 100.0
    return min(max(score, 0.0), 1.0)


def classify_from_score(score: float) -> str:
    if score > 0.7:
        return "likely_tb"
    if score > 0.4:
        return "possible_tb"
    return "no_tb"


def normalize_classification(value: Any, score: float) -> str:
    if isinstance(value, str):
        key = re.sub(r"[\s\-]+", "_", value.strip().lower())
        if key in _CLASSIFICATION_ALIASES:
            return _CLASSIFICATION_ALIASES[key]
    return classify_from_score(score)


def normalize_lesion(item: Any, default_confidence: float) -> Lesion | None:
    """Clamp a lesion box into the unit square. ``None`` for malformed entries."""
    if not isinstance(item, dict):
        return None
    coords = []
    for key in ("x", "y", "width", "height"):
        v = item.get(key)
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            return None
        if not math.isfinite(v):
            return None
        coords.append(float(v))
    x, y, w, h = coords
    x = min(max(x, 0.0), 1.0)
    y = min(max(y, 0.0), 1.0)
    w = min(max(w, 0.0), 1.0 - x)
    h = min(max(h, 0.0), 1.0 - y)
    if w <= 0.0 or h <= 0.0:
        return None
    confidence = normalize_score(item.get("confidence"))
    if confidence is None:
        confidence = default_confidence
    return Lesion(x=x, y=y, width=w, height=h, confidence=confidence)


def normalize_lesions(value: Any, default_confidence: float) -> list[Lesion]:
    if not isinstance(value, list):
        return []
    lesions = []
    for item in value:
        lesion = normalize_lesion(item, default_confidence)
        if lesion is not None:
            lesions.append(lesion)
    return lesions


def coerce_diagnosis(raw_text: str, has_image: bool) -> DiagnosisResult:
    """Turn model output into a complete result, falling back field by field."""
    data = extract_json_object(raw_text)
    if data is None:
        return fallback_result(raw_text)

    confidence = normalize_confidence(data.get("confidence"))
    score = normalize_score(data.get("confidenceScore", data.get("confidence_score")))
    if score is None:
        score = _TIER_SCORES[confidence]

    lesions: list[Lesion] = []
    if has_image:
        lesions = normalize_lesions(data.get("lesions"), score)

    return DiagnosisResult(
        summary=_text(data.get("summary"), DEFAULT_SUMMARY),
        findings=normalize_findings(data.get("findings")),
        confidence=confidence,
        confidence_score=score,
        classification=normalize_classification(data.get("classification"), score),
        recommendation=_text(data.get("recommendation"), DEFAULT_RECOMMENDATION),
        disclaimer=_text(data.get("disclaimer"), DEFAULT_DISCLAIMER),
        lesions=lesions,
    )
