"""Prompt templates for the diagnosis gateway and the health assistant."""

from __future__ import annotations

from app.models.diagnosis import DiagnosisRequest
from app.reference.catalog import duration_label, symptom_label

_DIAGNOSIS_SYSTEM = """You are a medical AI assistant specialized in tuberculosis detection and diagnosis.
You analyze patient data, symptoms, and medical imaging to provide diagnostic insights.
Your analysis must be professional, evidence-based, and include appropriate disclaimers.

IMPORTANT: Always structure your response as a JSON object with the following fields:
- summary: string (brief overview of findings)
- findings: array of strings (specific observations)
- confidence: "low" | "medium" | "high"
- confidenceScore: number between 0 and 1 (your confidence in the assessment)
- classification: "no_tb" | "possible_tb" | "likely_tb"
- recommendation: string (next steps for the patient)
- disclaimer: string (medical disclaimer)
- lesions: array of objects {{x, y, width, height, confidence}} locating suspicious regions on the provided image, every value normalized to 0-1 relative to image width/height with (x, y) the top-left corner. Use an empty array when no image is provided or nothing suspicious is visible."""

_DIAGNOSIS_USER = """Analyze the following patient case for tuberculosis:

PATIENT INFORMATION:
- Name: {name}
- Age: {age}
- Gender: {gender}
- Symptom Duration: {duration}
- Medical History: {history}

SYMPTOMS:
{symptoms}

{lab_section}

{imaging_line}

Please provide a comprehensive diagnostic analysis including:
1. Summary of findings
2. Key observations
3. Confidence level (low/medium/high)
4. Recommendations for next steps
5. Medical disclaimer

Format your response as a JSON object."""

_IMAGE_PROVIDED = "A chest X-ray/CT scan image has been provided for analysis."
_NO_IMAGE = "No imaging provided."

_SYMPTOM_ASSISTANT = """You are a caring and knowledgeable health assistant. Your role is to:
1. Listen to the user's symptoms with empathy
2. Ask clarifying questions when needed
3. Provide general health information and possible causes
4. Suggest home remedies when appropriate
5. Clearly indicate when professional medical attention is needed

IMPORTANT GUIDELINES:
- Always emphasize that this is educational information, not a diagnosis
- Be compassionate and reassuring
- Use simple, easy-to-understand language
- For serious symptoms (chest pain, difficulty breathing, severe bleeding, etc.), immediately advise seeking emergency care
- Remind users to consult healthcare professionals for proper diagnosis and treatment
- Do not prescribe specific medications or dosages

Be warm, supportive, and helpful while maintaining appropriate medical boundaries."""

_DEFAULT_ASSISTANT = (
    "You are a helpful health assistant providing general health information and guidance. "
    "Always remind users that this information is educational and not a replacement for "
    "professional medical advice."
)

_TEMPLATES = {
    "diagnosis_system": _DIAGNOSIS_SYSTEM,
    "diagnosis_user": _DIAGNOSIS_USER,
    "assistant_symptom": _SYMPTOM_ASSISTANT,
    "assistant_default": _DEFAULT_ASSISTANT,
}

_ASSISTANT_PROMPTS = {
    "symptom": _SYMPTOM_ASSISTANT,
    "default": _DEFAULT_ASSISTANT,
}


def diagnosis_system_prompt() -> str:
    return _DIAGNOSIS_SYSTEM.format()


def render_diagnosis_prompt(req: DiagnosisRequest) -> str:
    patient = req.patient_data
    lab_text = req.lab_results.strip()
    return _DIAGNOSIS_USER.format(
        name=patient.name,
        age=patient.age,
        gender=patient.gender,
        duration=duration_label(patient.duration),
        history=patient.history.strip() or "None reported",
        symptoms=", ".join(symptom_label(s) for s in req.symptoms),
        lab_section=f"LABORATORY RESULTS:\n{lab_text}" if lab_text else "",
        imaging_line=_IMAGE_PROVIDED if req.image_data else _NO_IMAGE,
    )


def get_assistant_prompt(prompt_type: str) -> str:
    return _ASSISTANT_PROMPTS.get(prompt_type, _DEFAULT_ASSISTANT)


def get_all_templates() -> dict[str, str]:
    """Return all prompt templates keyed by name."""
    return dict(_TEMPLATES)
