"""LangChain ChatAnthropic wrapper for the AI gateway.

Builds the message lists for both gateway tasks and maps provider errors onto
the app's error hierarchy (429 → rate limited, 402 → payment required,
anything else → generic failure).
"""

from __future__ import annotations

import logging

import anthropic
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from app.config import settings
from app.errors import (
    GatewayFailure,
    GatewayNotConfigured,
    GatewayPaymentRequired,
    GatewayRateLimited,
    TBAssistError,
)
from app.llm.model_router import get_model_for_task
from app.llm.prompts import diagnosis_system_prompt, get_assistant_prompt, render_diagnosis_prompt
from app.models.diagnosis import DiagnosisRequest
from app.models.requests import ChatMessage

logger = logging.getLogger(__name__)


def build_diagnosis_messages(req: DiagnosisRequest) -> list[BaseMessage]:
    """System prompt + one user turn; the image rides in the same turn as the text."""
    user_prompt = render_diagnosis_prompt(req)
    messages: list[BaseMessage] = [SystemMessage(content=diagnosis_system_prompt())]
    if req.image_data:
        messages.append(HumanMessage(content=[
            {"type": "text", "text": user_prompt},
            {"type": "image_url", "image_url": {"url": req.image_data}},
        ]))
    else:
        messages.append(HumanMessage(content=user_prompt))
    return messages


def build_assistant_messages(history: list[ChatMessage], prompt_type: str) -> list[BaseMessage]:
    messages: list[BaseMessage] = [SystemMessage(content=get_assistant_prompt(prompt_type))]
    for msg in history:
        if msg.role == "user":
            messages.append(HumanMessage(content=msg.content))
        elif msg.role == "assistant":
            messages.append(AIMessage(content=msg.content))
    return messages


def content_text(content: str | list) -> str:
    """Flatten a LangChain message content into plain text."""
    if isinstance(content, str):
        return content
    parts: list[str] = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


def _map_status_error(e: anthropic.APIStatusError) -> TBAssistError:
    if e.status_code == 429:
        return GatewayRateLimited()
    if e.status_code == 402:
        return GatewayPaymentRequired()
    logger.error("AI gateway error: %s %s", e.status_code, e.message)
    return GatewayFailure()


async def invoke_gateway(
    messages: list[BaseMessage],
    task: str,
    max_tokens: int | None = None,
) -> str:
    """Send messages to the model routed for ``task`` and return its text (may be empty)."""
    if not settings.anthropic_api_key:
        raise GatewayNotConfigured()

    from langchain_anthropic import ChatAnthropic

    model_id = get_model_for_task(task)
    llm = ChatAnthropic(
        model=model_id,
        api_key=settings.anthropic_api_key,
        max_tokens=max_tokens or settings.diagnosis_max_tokens,
    )

    logger.info("Invoking %s for task %s", model_id, task)
    try:
        response = await llm.ainvoke(messages)
    except anthropic.APIStatusError as e:
        raise _map_status_error(e) from e
    except anthropic.APIError as e:
        logger.error("AI gateway unreachable: %s", e)
        raise GatewayFailure() from e

    return content_text(response.content)
