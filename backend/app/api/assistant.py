"""POST /api/health-assistant — conversational symptom guidance."""

from __future__ import annotations

from fastapi import APIRouter

from app.llm import client as llm_client
from app.models.requests import AssistantRequest
from app.models.responses import AssistantResponse

router = APIRouter(tags=["assistant"])

EMPTY_REPLY = "I apologize, but I was unable to generate a response. Please try again."


@router.post("/health-assistant", response_model=AssistantResponse)
async def health_assistant(req: AssistantRequest) -> AssistantResponse:
    messages = llm_client.build_assistant_messages(req.messages, req.type)
    text = await llm_client.invoke_gateway(messages, task="assistant", max_tokens=1024)
    return AssistantResponse(message=text.strip() or EMPTY_REPLY)
