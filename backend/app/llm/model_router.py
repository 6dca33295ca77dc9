"""Task → model selection. Frontier model for image diagnosis, cheap model for chat."""

from __future__ import annotations

from app.config import settings

_TASK_MODEL_MAP = {
    "diagnosis": "frontier",
    "assistant": "cheap",
}


def get_model_for_task(task: str) -> str:
    tier = _TASK_MODEL_MAP.get(task, "cheap")
    if tier == "cheap":
        return settings.model_cheap
    elif tier == "mid":
        return settings.model_mid
    else:
        return settings.model_frontier
