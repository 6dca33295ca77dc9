"""Static reference content: TB symptom checklist, emergency contacts, example
hospitals, treatment guide and common medicines.

Plain data plus two lookups. Nothing here is patient-specific.
"""

from __future__ import annotations

from typing import Any

TB_SYMPTOMS: list[dict[str, str]] = [
    {"id": "chronic-cough", "label": "Chronic Cough (≥3 weeks)", "description": "Persistent cough lasting three weeks or more"},
    {"id": "fever", "label": "Fever", "description": "Elevated body temperature, especially at night"},
    {"id": "night-sweats", "label": "Night Sweats", "description": "Excessive sweating during sleep"},
    {"id": "chest-pain", "label": "Chest Pain", "description": "Pain or discomfort in the chest area"},
    {"id": "fatigue", "label": "Fatigue", "description": "Persistent tiredness and lack of energy"},
    {"id": "weight-loss", "label": "Weight Loss", "description": "Unintentional weight loss"},
    {"id": "hemoptysis", "label": "Hemoptysis", "description": "Coughing up blood or blood-tinged sputum"},
    {"id": "loss-appetite", "label": "Loss of Appetite", "description": "Reduced desire to eat"},
]

SYMPTOM_DURATIONS: list[dict[str, str]] = [
    {"id": "less-than-1-week", "label": "Less than 1 week"},
    {"id": "1-2-weeks", "label": "1-2 weeks"},
    {"id": "2-3-weeks", "label": "2-3 weeks"},
    {"id": "3-4-weeks", "label": "3-4 weeks"},
    {"id": "more-than-4-weeks", "label": "More than 4 weeks"},
]

_SYMPTOM_LABELS = {s["id"]: s["label"] for s in TB_SYMPTOMS}
_DURATION_LABELS = {d["id"]: d["label"] for d in SYMPTOM_DURATIONS}

EMERGENCY_NUMBERS: list[dict[str, Any]] = [
    {
        "title": "National Emergency",
        "numbers": [
            {"country": "India", "number": "108", "description": "All emergencies"},
            {"country": "USA", "number": "911", "description": "All emergencies"},
            {"country": "UK", "number": "999", "description": "All emergencies"},
            {"country": "Australia", "number": "000", "description": "All emergencies"},
        ],
    },
    {
        "title": "Ambulance Service",
        "numbers": [
            {"country": "India", "number": "102", "description": "Ambulance"},
            {"country": "India", "number": "108", "description": "Free ambulance"},
        ],
    },
    {
        "title": "Mental Health Helpline",
        "numbers": [
            {"country": "India", "number": "1800-599-0019", "description": "NIMHANS Helpline"},
            {"country": "USA", "number": "988", "description": "Suicide & Crisis Lifeline"},
            {"country": "UK", "number": "116 123", "description": "Samaritans"},
        ],
    },
    {
        "title": "Poison Control",
        "numbers": [
            {"country": "India", "number": "1066", "description": "Poison Information Center"},
            {"country": "USA", "number": "1-800-222-1222", "description": "Poison Control"},
        ],
    },
]

EMERGENCY_GUIDELINES: list[dict[str, Any]] = [
    {
        "title": "When to Call Emergency Services",
        "items": [
            "Severe chest pain or difficulty breathing",
            "Uncontrolled bleeding or severe injuries",
            "Loss of consciousness or seizures",
            "Suspected heart attack or stroke symptoms",
            "Severe allergic reactions (anaphylaxis)",
            "Poisoning or drug overdose",
            "Suicidal thoughts or severe mental health crisis",
        ],
    },
    {
        "title": "What to Tell Emergency Services",
        "items": [
            "Your exact location with landmarks",
            "Nature of the emergency",
            "Number of people involved",
            "Condition of the patient(s)",
            "Any immediate dangers present",
            "Your callback number",
        ],
    },
]

# Example facilities; a location-aware provider would replace these.
EXAMPLE_HOSPITALS: list[dict[str, Any]] = [
    {
        "name": "City General Hospital",
        "distance": "1.2 km",
        "type": "Multi-specialty",
        "emergency": True,
        "phone": "+1-234-567-8900",
        "address": "123 Main Street, Downtown",
        "available247": True,
        "services": ["Emergency", "ICU", "Surgery", "Radiology"],
    },
    {
        "name": "St. Mary's Medical Center",
        "distance": "2.5 km",
        "type": "Teaching Hospital",
        "emergency": True,
        "phone": "+1-234-567-8901",
        "address": "456 Oak Avenue, Medical District",
        "available247": True,
        "services": ["Emergency", "Cardiology", "Neurology", "Pediatrics"],
    },
    {
        "name": "Community Health Clinic",
        "distance": "0.8 km",
        "type": "Clinic",
        "emergency": False,
        "phone": "+1-234-567-8902",
        "address": "789 Elm Street, Riverside",
        "available247": False,
        "services": ["Primary Care", "Lab Tests", "Vaccinations"],
    },
]

TREATMENT_CATEGORIES: list[dict[str, Any]] = [
    {
        "title": "Home Remedies",
        "description": "Simple steps for relief at home",
        "treatments": [
            "Drink warm water with honey for sore throat",
            "Gargle with salt water for throat inflammation",
            "Steam inhalation for congestion relief",
            "Rest and adequate sleep for recovery",
        ],
    },
    {
        "title": "Lifestyle & Diet",
        "description": "Nutrition and habits for better health",
        "treatments": [
            "Stay hydrated - drink 8-10 glasses of water daily",
            "Eat vitamin C rich foods (citrus fruits, bell peppers)",
            "Avoid cold drinks and ice cream during illness",
            "Include ginger and turmeric in your diet",
        ],
    },
    {
        "title": "Medical Treatments",
        "description": "Clinical approaches and therapies",
        "treatments": [
            "Antibiotics for bacterial infections (prescribed by doctor)",
            "Antivirals for viral infections (as prescribed)",
            "Pain relievers like Paracetamol (consult doctor)",
            "Physical therapy for mobility issues",
        ],
    },
    {
        "title": "When to See a Doctor",
        "description": "Warning signs requiring medical attention",
        "treatments": [
            "Fever persisting for more than 3 days",
            "Difficulty breathing or chest pain",
            "Severe headache with stiff neck",
            "Persistent vomiting or diarrhea",
            "Blood in cough, stool, or urine",
            "Sudden severe abdominal pain",
        ],
    },
]

MEDICINES: list[dict[str, Any]] = [
    {
        "name": "Paracetamol",
        "genericName": "Acetaminophen",
        "uses": ["Fever", "Mild to moderate pain", "Headache"],
        "dosage": "500-1000mg every 4-6 hours (Max: 4g/day)",
        "sideEffects": ["Nausea", "Allergic reactions (rare)", "Liver damage (overdose)"],
        "precautions": "Avoid alcohol. Do not exceed recommended dose. Not for liver disease patients.",
        "category": "Pain Relief",
    },
    {
        "name": "Ibuprofen",
        "genericName": "Ibuprofen",
        "uses": ["Pain", "Inflammation", "Fever"],
        "dosage": "200-400mg every 4-6 hours (Max: 1200mg/day)",
        "sideEffects": ["Stomach upset", "Heartburn", "Dizziness"],
        "precautions": "Take with food. Avoid in stomach ulcers. Not for prolonged use without consultation.",
        "category": "Anti-inflammatory",
    },
    {
        "name": "Amoxicillin",
        "genericName": "Amoxicillin",
        "uses": ["Bacterial infections", "Respiratory infections", "Ear infections"],
        "dosage": "250-500mg every 8 hours (as prescribed)",
        "sideEffects": ["Diarrhea", "Nausea", "Allergic rash"],
        "precautions": "Complete full course. Report allergic reactions immediately. Prescription required.",
        "category": "Antibiotic",
    },
    {
        "name": "Cetirizine",
        "genericName": "Cetirizine",
        "uses": ["Allergies", "Hay fever", "Hives", "Itching"],
        "dosage": "10mg once daily",
        "sideEffects": ["Drowsiness", "Dry mouth", "Fatigue"],
        "precautions": "May cause drowsiness. Avoid driving after taking. Stay hydrated.",
        "category": "Antihistamine",
    },
    {
        "name": "Omeprazole",
        "genericName": "Omeprazole",
        "uses": ["Acid reflux", "Heartburn", "Stomach ulcers"],
        "dosage": "20-40mg once daily before breakfast",
        "sideEffects": ["Headache", "Nausea", "Diarrhea"],
        "precautions": "Not for immediate relief. May take 1-4 days to work. Long-term use needs monitoring.",
        "category": "Proton Pump Inhibitor",
    },
]


def symptom_label(symptom: str) -> str:
    """Checklist label for a symptom id; free text passes through unchanged."""
    return _SYMPTOM_LABELS.get(symptom, symptom)


def duration_label(duration: str) -> str:
    return _DURATION_LABELS.get(duration, duration)


def search_medicines(query: str = "") -> list[dict[str, Any]]:
    """Match on medicine name or any listed use, case-insensitive."""
    q = query.strip().lower()
    if not q:
        return list(MEDICINES)
    return [
        med for med in MEDICINES
        if q in med["name"].lower() or any(q in use.lower() for use in med["uses"])
    ]
