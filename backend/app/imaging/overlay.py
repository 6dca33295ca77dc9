"""Lesion overlay renderer.

Draws the uploaded image scaled to at most ``max_width`` pixels wide (never
upscaled) and, for every lesion, a translucent box coloured by confidence
tier with a "Lesion N (P%)" tag above it. Lesion coordinates are normalized
to the image, so they are scaled by the rendered size.
"""

from __future__ import annotations

import io
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from PIL import Image, ImageDraw, ImageFont

from app.models.diagnosis import Lesion

FILL_ALPHA = 0.3
STROKE_ALPHA = 0.8
STROKE_WIDTH = 3
LABEL_WIDTH = 120
LABEL_HEIGHT = 25
LABEL_ALPHA = 0.7
FONT_SIZE = 14


@dataclass(frozen=True)
class ConfidenceTier:
    name: str
    label: str
    rgb: tuple[int, int, int]


HIGH = ConfidenceTier("high", "High Risk (>70%)", (239, 68, 68))
MEDIUM = ConfidenceTier("medium", "Medium (40-70%)", (251, 191, 36))
LOW = ConfidenceTier("low", "Low (<40%)", (59, 130, 246))


def confidence_tier(confidence: float) -> ConfidenceTier:
    if confidence > 0.7:
        return HIGH
    if confidence > 0.4:
        return MEDIUM
    return LOW


def overlay_legend() -> list[dict[str, object]]:
    return [{"tier": t.name, "label": t.label, "rgb": list(t.rgb)} for t in (HIGH, MEDIUM, LOW)]


def lesion_label(index: int, confidence: float) -> str:
    """1-based tag drawn above each box."""
    return f"Lesion {index + 1} ({round(confidence * 100)}%)"


def _rgba(rgb: tuple[int, int, int], alpha: float) -> tuple[int, int, int, int]:
    return (*rgb, round(alpha * 255))


def _composite(base: Image.Image, draw_fn: Callable[[ImageDraw.ImageDraw], None]) -> Image.Image:
    """Draw on a transparent layer and alpha-blend it onto ``base``, like one canvas call."""
    layer = Image.new("RGBA", base.size, (0, 0, 0, 0))
    draw_fn(ImageDraw.Draw(layer))
    return Image.alpha_composite(base, layer)


def _load_font() -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    return ImageFont.load_default(size=FONT_SIZE)


def _text_top(font, baseline: float) -> float:
    if hasattr(font, "getmetrics"):
        ascent, _ = font.getmetrics()
        return baseline - ascent
    return baseline - FONT_SIZE


def fit_size(width: int, height: int, max_width: int) -> tuple[int, int, float]:
    scale = min(max_width / width, 1.0)
    return max(1, int(width * scale)), max(1, int(height * scale)), scale


def render_overlay(
    image_bytes: bytes,
    lesions: Sequence[Lesion],
    max_width: int = 800,
) -> Image.Image:
    with Image.open(io.BytesIO(image_bytes)) as src:
        src.load()
        width, height, _ = fit_size(src.width, src.height, max_width)
        canvas = src.convert("RGBA").resize((width, height), Image.Resampling.LANCZOS)

    font = _load_font()

    for i, lesion in enumerate(lesions):
        x = lesion.x * width
        y = lesion.y * height
        w = lesion.width * width
        h = lesion.height * height
        tier = confidence_tier(lesion.confidence)

        canvas = _composite(canvas, lambda d: d.rectangle(
            [x, y, x + w, y + h], fill=_rgba(tier.rgb, FILL_ALPHA),
        ))
        # Canvas strokes straddle the edge; centre the 3px line on it
        half = STROKE_WIDTH / 2
        canvas = _composite(canvas, lambda d: d.rectangle(
            [x - half, y - half, x + w + half, y + h + half],
            outline=_rgba(tier.rgb, STROKE_ALPHA),
            width=STROKE_WIDTH,
        ))
        canvas = _composite(canvas, lambda d: d.rectangle(
            [x, y - LABEL_HEIGHT, x + LABEL_WIDTH, y],
            fill=(0, 0, 0, round(LABEL_ALPHA * 255)),
        ))
        label = lesion_label(i, lesion.confidence)
        canvas = _composite(canvas, lambda d: d.text(
            (x + 5, _text_top(font, y - 7)), label, fill=(255, 255, 255, 255), font=font,
        ))

    return canvas.convert("RGB")


def render_overlay_png(
    image_bytes: bytes,
    lesions: Sequence[Lesion],
    max_width: int = 800,
) -> bytes:
    buf = io.BytesIO()
    render_overlay(image_bytes, lesions, max_width=max_width).save(buf, format="PNG")
    return buf.getvalue()
