"""Admin dashboard charts rendered server-side as PNG (matplotlib, Agg backend)."""

from __future__ import annotations

import io
from typing import Any

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

_COLORS = {"high": "#ef4444", "medium": "#f59e0b", "low": "#3b82f6", "total": "#2563eb"}


def _to_png(fig) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", bbox_inches="tight")
    plt.close(fig)
    return buf.getvalue()


def confidence_distribution_png(analytics: dict[str, int]) -> bytes:
    """Pie of high/medium/low counts; an empty dataset renders a placeholder."""
    labels = ["High", "Medium", "Low"]
    values = [
        analytics.get("high_confidence", 0),
        analytics.get("medium_confidence", 0),
        analytics.get("low_confidence", 0),
    ]
    fig, ax = plt.subplots(figsize=(5, 4), dpi=100)
    if sum(values) == 0:
        ax.text(0.5, 0.5, "No assessments yet", ha="center", va="center", fontsize=12)
        ax.axis("off")
    else:
        ax.pie(
            values,
            labels=[f"{label}: {v}" for label, v in zip(labels, values)],
            colors=[_COLORS["high"], _COLORS["medium"], _COLORS["low"]],
            startangle=90,
        )
        ax.axis("equal")
    ax.set_title("Confidence Distribution")
    return _to_png(fig)


def daily_trends_png(stats: list[dict[str, Any]], days_back: int = 30) -> bytes:
    dates = [row["date"] for row in stats]
    fig, ax = plt.subplots(figsize=(8, 4), dpi=100)
    if dates:
        ax.plot(dates, [r["total_count"] for r in stats], color=_COLORS["total"], label="Total", marker="o")
        ax.plot(dates, [r["high_confidence_count"] for r in stats], color=_COLORS["high"], label="High")
        ax.plot(dates, [r["medium_confidence_count"] for r in stats], color=_COLORS["medium"], label="Medium")
        ax.legend()
        ax.grid(True, linestyle="--", alpha=0.5)
        fig.autofmt_xdate()
    else:
        ax.text(0.5, 0.5, "No assessments in range", ha="center", va="center", fontsize=12)
        ax.axis("off")
    ax.set_title(f"Daily Assessment Trends ({days_back} Days)")
    return _to_png(fig)
