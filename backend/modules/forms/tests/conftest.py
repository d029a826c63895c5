# backend/modules/forms/tests/conftest.py

import pytest
from typing import Any, Dict, List
from datetime import datetime, timedelta

from modules.forms.services.validation_service import FormAnswerValidator
from modules.forms.services.sanitization_service import AnswerSanitizer
from modules.forms.services.scoring_service import ResponseScorer


# Service fixtures
@pytest.fixture
def validator() -> FormAnswerValidator:
    """Create a fresh answer validator."""
    return FormAnswerValidator()


@pytest.fixture
def sanitizer() -> AnswerSanitizer:
    return AnswerSanitizer()


@pytest.fixture
def scorer() -> ResponseScorer:
    return ResponseScorer()


# Schema fixtures
@pytest.fixture
def feedback_form_schema() -> List[Dict[str, Any]]:
    """A typical customer feedback form."""
    return [
        {"id": "intro", "type": "section_title", "title": "Tell us about your visit"},
        {"id": "name", "type": "text_input", "label": "Name", "required": True},
        {"id": "email", "type": "email", "label": "Email", "required": True},
        {"id": "phone", "type": "phone", "label": "Phone"},
        {"id": "visits", "type": "number", "label": "Visits", "validation": {"min": 1, "max": 100}},
        {"id": "visit_date", "type": "date", "label": "Visit date"},
        {"id": "visit_time", "type": "time", "label": "Visit time"},
        {"id": "rating", "type": "rating", "label": "Overall rating", "required": True},
        {
            "id": "area",
            "type": "multiple_choice",
            "label": "Area",
            "options": ["Dining", "Takeaway", "Delivery"],
        },
        {
            "id": "extras",
            "type": "checkboxes",
            "label": "Extras",
            "options": ["Wifi", "Parking", "Music"],
        },
        {
            "id": "size",
            "type": "dropdown",
            "label": "Party size",
            "options": ["1", "2", "3-5", "6+"],
        },
        {"id": "again", "type": "yesno", "label": "Visit again"},
        {"id": "receipt", "type": "image_upload", "label": "Receipt"},
        {"id": "comments", "type": "textarea", "label": "Comments"},
        {"id": "divider", "type": "divider"},
        {"id": "submit", "type": "submit_button", "label": "Send"},
    ]


@pytest.fixture
def valid_answers() -> Dict[str, Any]:
    return {
        "name": "  Jane Doe ",
        "email": "Jane@Example.com",
        "phone": "+1 (555) 123-4567",
        "visits": "12",
        "visit_date": "2024-02-29",
        "visit_time": "18:30",
        "rating": 4,
        "area": "Dining",
        "extras": ["Wifi", "Music"],
        "size": "3-5",
        "again": "YES",
        "receipt": {"name": "receipt.png", "size": 2048, "type": "image/png"},
        "comments": "Great food, friendly staff. I would suggest a larger menu.",
    }


# Entry fixtures
@pytest.fixture
def scored_entries() -> List[Dict[str, Any]]:
    now = datetime(2024, 6, 1, 12, 0, 0)
    return [
        {"id": 1, "ai_score": 80, "is_flagged": True, "created_at": now - timedelta(days=3)},
        {"id": 2, "ai_score": 45, "is_flagged": False, "created_at": now - timedelta(days=2)},
        {"id": 3, "ai_score": 80, "is_flagged": True, "created_at": now - timedelta(days=1)},
        {"id": 4, "ai_score": 15, "is_flagged": False, "created_at": now},
    ]
