from .validation_service import FormAnswerValidator, form_answer_validator
from .sanitization_service import AnswerSanitizer, answer_sanitizer
from .scoring_service import ResponseScorer, response_scorer
from .form_config_service import (
    build_schema,
    generate_field_id,
    get_expected_data_type,
    normalize_form_config,
    validate_form_config,
)
from .trend_service import analyze_feedback_trends, get_top_entries
from .feedback_pipeline import (
    process_submission,
    sanitize_answers_for_storage,
    score_and_flag_feedback,
    validate_contact_details,
    validate_form_answers,
)

__all__ = [
    "FormAnswerValidator",
    "form_answer_validator",
    "AnswerSanitizer",
    "answer_sanitizer",
    "ResponseScorer",
    "response_scorer",
    "build_schema",
    "generate_field_id",
    "get_expected_data_type",
    "normalize_form_config",
    "validate_form_config",
    "analyze_feedback_trends",
    "get_top_entries",
    "process_submission",
    "sanitize_answers_for_storage",
    "score_and_flag_feedback",
    "validate_contact_details",
    "validate_form_answers",
]
