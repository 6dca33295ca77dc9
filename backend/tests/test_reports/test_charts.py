"""Tests for admin dashboard charts."""

from __future__ import annotations

import io

from PIL import Image

from app.reports.charts import confidence_distribution_png, daily_trends_png

PNG_MAGIC = b"\x89PNG"


def _size(png: bytes) -> tuple[int, int]:
    with Image.open(io.BytesIO(png)) as img:
        return img.size


def test_confidence_pie():
    png = confidence_distribution_png({"high_confidence": 3, "medium_confidence": 2, "low_confidence": 1})
    assert png.startswith(PNG_MAGIC)
    assert _size(png)[0] > 100


def test_confidence_pie_empty():
    assert confidence_distribution_png({}).startswith(PNG_MAGIC)


def test_daily_trends():
    stats = [
        {"date": "2024-06-12", "total_count": 1, "high_confidence_count": 0, "medium_confidence_count": 1, "low_confidence_count": 0},
        {"date": "2024-06-14", "total_count": 2, "high_confidence_count": 1, "medium_confidence_count": 0, "low_confidence_count": 1},
    ]
    assert daily_trends_png(stats, days_back=7).startswith(PNG_MAGIC)


def test_daily_trends_empty():
    assert daily_trends_png([]).startswith(PNG_MAGIC)
