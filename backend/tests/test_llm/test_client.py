"""Tests for the gateway client: configuration and provider error mapping."""

from __future__ import annotations

import asyncio

import anthropic
import httpx
import pytest
from langchain_core.messages import AIMessage, HumanMessage

from app.config import settings
from app.errors import GatewayFailure, GatewayNotConfigured, GatewayPaymentRequired, GatewayRateLimited
from app.llm import client as llm_client
from app.llm.model_router import get_model_for_task


def _status_error(status: int) -> anthropic.APIStatusError:
    request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
    response = httpx.Response(status, request=request)
    return anthropic.APIStatusError("boom", response=response, body=None)


class _FakeChat:
    reply = None
    error = None
    init_kwargs: dict = {}

    def __init__(self, **kwargs):
        _FakeChat.init_kwargs = kwargs

    async def ainvoke(self, messages):
        if _FakeChat.error is not None:
            raise _FakeChat.error
        return _FakeChat.reply


@pytest.fixture
def fake_chat(monkeypatch):
    monkeypatch.setattr(settings, "anthropic_api_key", "sk-test")
    monkeypatch.setattr("langchain_anthropic.ChatAnthropic", _FakeChat)
    _FakeChat.reply = AIMessage(content="ok")
    _FakeChat.error = None
    return _FakeChat


def _invoke(task: str = "diagnosis") -> str:
    return asyncio.run(llm_client.invoke_gateway([HumanMessage(content="hi")], task=task))


def test_model_routing():
    assert get_model_for_task("diagnosis") == settings.model_frontier
    assert get_model_for_task("assistant") == settings.model_cheap


def test_not_configured(monkeypatch):
    monkeypatch.setattr(settings, "anthropic_api_key", "")
    with pytest.raises(GatewayNotConfigured):
        _invoke()


def test_returns_text(fake_chat):
    assert _invoke() == "ok"
    assert fake_chat.init_kwargs["model"] == settings.model_frontier


def test_flattens_block_content(fake_chat):
    fake_chat.reply = AIMessage(content=[{"type": "text", "text": "part one "}, {"type": "text", "text": "two"}])
    assert _invoke("assistant") == "part one two"
    assert fake_chat.init_kwargs["model"] == settings.model_cheap


@pytest.mark.parametrize("status,expected", [
    (429, GatewayRateLimited),
    (402, GatewayPaymentRequired),
    (500, GatewayFailure),
    (400, GatewayFailure),
])
def test_status_mapping(fake_chat, status, expected):
    fake_chat.error = _status_error(status)
    with pytest.raises(expected):
        _invoke()


def test_connection_error_is_failure(fake_chat):
    fake_chat.error = anthropic.APIConnectionError(request=httpx.Request("POST", "https://api.anthropic.com"))
    with pytest.raises(GatewayFailure):
        _invoke()
