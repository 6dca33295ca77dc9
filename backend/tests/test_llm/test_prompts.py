"""Tests for prompt rendering and message assembly."""

from __future__ import annotations

from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from app.llm.client import build_assistant_messages, build_diagnosis_messages, content_text
from app.llm.prompts import diagnosis_system_prompt, get_assistant_prompt, render_diagnosis_prompt
from app.models.diagnosis import DiagnosisRequest
from app.models.requests import ChatMessage
from tests.conftest import SAMPLE_REQUEST, png_data_url


def _request(**overrides) -> DiagnosisRequest:
    return DiagnosisRequest.model_validate({**SAMPLE_REQUEST, **overrides})


def test_system_prompt_lists_json_fields():
    prompt = diagnosis_system_prompt()
    for field in ("summary", "findings", "confidenceScore", "classification", "lesions"):
        assert field in prompt
    assert "{x, y, width, height, confidence}" in prompt


def test_user_prompt_contents():
    prompt = render_diagnosis_prompt(_request())
    assert "- Name: Jane Doe" in prompt
    assert "- Symptom Duration: 3-4 weeks" in prompt
    assert "Chronic Cough (≥3 weeks), Night Sweats, Weight Loss" in prompt
    assert "LABORATORY RESULTS:\nSputum smear: pending" in prompt
    assert "No imaging provided." in prompt


def test_user_prompt_defaults():
    req = _request(
        patientData={**SAMPLE_REQUEST["patientData"], "history": ""},
        labResults="",
        symptoms=["persistent hoarseness"],
    )
    prompt = render_diagnosis_prompt(req)
    assert "- Medical History: None reported" in prompt
    assert "LABORATORY RESULTS" not in prompt
    assert "persistent hoarseness" in prompt


def test_diagnosis_messages_text_only():
    messages = build_diagnosis_messages(_request())
    assert isinstance(messages[0], SystemMessage)
    assert isinstance(messages[1], HumanMessage)
    assert isinstance(messages[1].content, str)


def test_diagnosis_messages_with_image():
    url = png_data_url()
    messages = build_diagnosis_messages(_request(imageData=url))
    content = messages[1].content
    assert content[0]["type"] == "text"
    assert "A chest X-ray/CT scan image has been provided for analysis." in content[0]["text"]
    assert content[1] == {"type": "image_url", "image_url": {"url": url}}


def test_assistant_prompt_selection():
    assert "caring and knowledgeable" in get_assistant_prompt("symptom")
    assert get_assistant_prompt("unknown") == get_assistant_prompt("default")


def test_assistant_messages_keep_history_order():
    history = [
        ChatMessage(role="user", content="I feel tired"),
        ChatMessage(role="assistant", content="How long?"),
        ChatMessage(role="user", content="Two weeks"),
    ]
    messages = build_assistant_messages(history, "symptom")
    assert [type(m) for m in messages] == [SystemMessage, HumanMessage, AIMessage, HumanMessage]
    assert messages[-1].content == "Two weeks"


def test_content_text_flattens_blocks():
    assert content_text("plain") == "plain"
    assert content_text([{"type": "text", "text": "a"}, {"type": "tool_use"}, "b"]) == "ab"
