"""Tests for coercing model output into a diagnosis result."""

from __future__ import annotations

import json

from app.llm.parsing import (
    DEFAULT_DISCLAIMER,
    DEFAULT_RECOMMENDATION,
    FALLBACK_FINDINGS,
    classify_from_score,
    coerce_diagnosis,
    extract_json_object,
    normalize_classification,
    normalize_findings,
    normalize_lesion,
    normalize_score,
)
from tests.conftest import MODEL_REPLY


def test_extract_json_from_fenced_reply():
    data = extract_json_object(MODEL_REPLY)
    assert data["classification"] == "likely_tb"


def test_extract_json_missing_or_invalid():
    assert extract_json_object("no braces here") is None
    assert extract_json_object("{not: valid}") is None
    assert extract_json_object("") is None
    assert extract_json_object(None) is None


def test_fallback_on_prose():
    result = coerce_diagnosis("Unable to format, but TB is possible.", has_image=False)
    assert result.summary == "Unable to format, but TB is possible."
    assert result.findings == FALLBACK_FINDINGS
    assert result.confidence == "medium"
    assert result.recommendation == DEFAULT_RECOMMENDATION
    assert result.disclaimer == DEFAULT_DISCLAIMER
    assert result.lesions == []


def test_full_reply_with_image():
    result = coerce_diagnosis(MODEL_REPLY, has_image=True)
    assert result.confidence == "high"
    assert result.confidence_score == 0.82
    assert len(result.lesions) == 1
    assert result.lesions[0].x == 0.2


def test_lesions_dropped_without_image():
    assert coerce_diagnosis(MODEL_REPLY, has_image=False).lesions == []


def test_missing_fields_get_defaults():
    result = coerce_diagnosis(json.dumps({"confidence": "LOW"}), has_image=False)
    assert result.confidence == "low"
    assert result.confidence_score == 0.3
    assert result.classification == "no_tb"
    assert result.findings == FALLBACK_FINDINGS
    assert result.disclaimer == DEFAULT_DISCLAIMER


def test_unknown_confidence_becomes_medium():
    result = coerce_diagnosis(json.dumps({"confidence": "certain"}), has_image=False)
    assert result.confidence == "medium"
    assert result.confidence_score == 0.6
    assert result.classification == "possible_tb"


def test_findings_normalization():
    assert normalize_findings("single finding") == ["single finding"]
    assert normalize_findings(["a", "", None, 3]) == ["a", "3"]
    assert normalize_findings([]) == FALLBACK_FINDINGS
    assert normalize_findings({"not": "a list"}) == FALLBACK_FINDINGS


def test_score_normalization():
    assert normalize_score(0.5) == 0.5
    assert normalize_score(75) == 0.75
    assert normalize_score("80%") == 0.8
    assert normalize_score(-1) == 0.0
    assert normalize_score(250) == 1.0
    assert normalize_score(True) is None
    assert normalize_score("high") is None
    assert normalize_score(float("nan")) is None


def test_classification_aliases():
    assert normalize_classification("Likely TB", 0.1) == "likely_tb"
    assert normalize_classification("possible-tb", 0.9) == "possible_tb"
    assert normalize_classification("negative", 0.9) == "no_tb"
    assert normalize_classification(None, 0.75) == "likely_tb"


def test_classify_from_score_boundaries():
    assert classify_from_score(0.71) == "likely_tb"
    assert classify_from_score(0.7) == "possible_tb"
    assert classify_from_score(0.41) == "possible_tb"
    assert classify_from_score(0.4) == "no_tb"


def test_lesion_clamped_inside_image():
    lesion = normalize_lesion({"x": 0.8, "y": -0.2, "width": 0.5, "height": 0.3}, 0.6)
    assert lesion.x == 0.8
    assert lesion.y == 0.0
    assert abs(lesion.width - 0.2) < 1e-9
    assert lesion.height == 0.3
    assert lesion.confidence == 0.6


def test_malformed_lesions_dropped():
    assert normalize_lesion({"x": "a", "y": 0, "width": 0.1, "height": 0.1}, 0.5) is None
    assert normalize_lesion({"x": 0.1, "y": 0.1, "width": 0.1}, 0.5) is None
    assert normalize_lesion({"x": 1.0, "y": 0.1, "width": 0.1, "height": 0.1}, 0.5) is None
    assert normalize_lesion("box", 0.5) is None


def test_lesion_percentage_confidence():
    lesion = normalize_lesion({"x": 0.1, "y": 0.1, "width": 0.1, "height": 0.1, "confidence": 90}, 0.5)
    assert lesion.confidence == 0.9


def test_non_finite_lesion_coordinates_dropped():
    assert normalize_lesion({"x": float("nan"), "y": 0.1, "width": 0.2, "height": 0.2}, 0.5) is None
    assert normalize_lesion({"x": 0.1, "y": 0.1, "width": float("inf"), "height": 0.2}, 0.5) is None


def test_nan_lesions_in_reply_are_skipped():
    raw = (
        '{"summary": "s", "confidence": "high", "lesions": ['
        '{"x": NaN, "y": 0.1, "width": 0.2, "height": 0.2}, '
        '{"x": 0.1, "y": Infinity, "width": 0.2, "height": 0.2}, '
        '{"x": 0.1, "y": 0.1, "width": 0.2, "height": 0.2, "confidence": NaN}]}'
    )
    result = coerce_diagnosis(raw, has_image=True)
    assert len(result.lesions) == 1
    assert result.lesions[0].confidence == 0.85
