"""Tests for the lesion overlay renderer."""

from __future__ import annotations

import io

from PIL import Image, ImageFont

from app.imaging.overlay import (
    _load_font,
    HIGH,
    LOW,
    MEDIUM,
    confidence_tier,
    fit_size,
    lesion_label,
    overlay_legend,
    render_overlay,
    render_overlay_png,
)
from app.models.diagnosis import Lesion
from tests.conftest import png_bytes


def test_confidence_tiers():
    assert confidence_tier(0.71) is HIGH
    assert confidence_tier(0.7) is MEDIUM
    assert confidence_tier(0.41) is MEDIUM
    assert confidence_tier(0.4) is LOW
    assert HIGH.rgb == (239, 68, 68)
    assert MEDIUM.rgb == (251, 191, 36)
    assert LOW.rgb == (59, 130, 246)


def test_legend():
    labels = [entry["label"] for entry in overlay_legend()]
    assert labels == ["High Risk (>70%)", "Medium (40-70%)", "Low (<40%)"]


def test_lesion_label_is_one_based():
    assert lesion_label(0, 0.876) == "Lesion 1 (88%)"
    assert lesion_label(2, 0.4) == "Lesion 3 (40%)"


def test_fit_size_never_upscales():
    assert fit_size(400, 300, 800) == (400, 300, 1.0)
    width, height, scale = fit_size(1600, 1200, 800)
    assert (width, height) == (800, 600)
    assert scale == 0.5


def test_render_without_lesions_keeps_pixels():
    img = render_overlay(png_bytes(100, 50, (10, 20, 30)), [])
    assert img.size == (100, 50)
    assert img.mode == "RGB"
    assert img.getpixel((50, 25)) == (10, 20, 30)


def test_box_is_tinted_by_tier():
    base = png_bytes(200, 200, (255, 255, 255))
    high = render_overlay(base, [Lesion(x=0.5, y=0.5, width=0.4, height=0.4, confidence=0.9)])
    low = render_overlay(base, [Lesion(x=0.5, y=0.5, width=0.4, height=0.4, confidence=0.2)])

    r, g, b = high.getpixel((140, 160))
    assert r > g and r > b
    r, g, b = low.getpixel((140, 160))
    assert b > r and b > g

    # Outside every box stays white
    assert high.getpixel((20, 180)) == (255, 255, 255)


def test_label_box_above_lesion_is_dark():
    img = render_overlay(
        png_bytes(400, 400, (255, 255, 255)),
        [Lesion(x=0.25, y=0.5, width=0.25, height=0.25, confidence=0.5)],
    )
    # Inside the 120x25 tag (alpha 0.7 black) but away from the text
    r, g, b = img.getpixel((100 + 115, 200 - 3))
    assert r < 100 and g < 100 and b < 100


def test_render_png_scales_wide_images():
    png = render_overlay_png(png_bytes(1000, 500), [Lesion(x=0.1, y=0.1, width=0.2, height=0.2, confidence=0.5)])
    with Image.open(io.BytesIO(png)) as img:
        assert img.format == "PNG"
        assert img.size == (800, 400)


def test_render_respects_custom_max_width():
    img = render_overlay(png_bytes(300, 300), [], max_width=150)
    assert img.size == (150, 150)


def test_label_font_is_sized():
    font = _load_font()
    assert isinstance(font, ImageFont.FreeTypeFont)
    assert font.size == 14
