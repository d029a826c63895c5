# backend/modules/forms/services/feedback_pipeline.py

"""
Call-level operations used by the submission endpoints.

A public submission flows through validation, sanitization and scoring:

    raw answers -> validate_form_answers -> sanitize_answers_for_storage
                -> score_and_flag_feedback

Persistence of the resulting entry is left to the caller.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Dict, List, Optional, Tuple, Union

from modules.forms.schemas.form_schemas import (
    AnswerValidationResult,
    ContactDetails,
    FieldDescriptor,
    ScoreResult,
    SubmissionOutcome,
)
from modules.forms.services.validation_service import (
    EMAIL_PATTERN,
    form_answer_validator,
)
from modules.forms.services.sanitization_service import answer_sanitizer
from modules.forms.services.scoring_service import response_scorer
from modules.forms.exceptions import InvalidFormConfigurationError
from modules.forms.config.forms_config import get_forms_config
from modules.forms.constants import (
    INVALID_FORM_CONFIGURATION_MESSAGE,
    MAX_CONTACT_NAME_LENGTH,
    MAX_CONTACT_PHONE_LENGTH,
)

logger = logging.getLogger(__name__)

Schema = Union[Sequence[Union[FieldDescriptor, Mapping[str, Any]]], Mapping[str, Any]]


def validate_form_answers(raw_answers: Optional[Mapping[str, Any]], schema: Schema) -> AnswerValidationResult:
    """
    Validate answers against a schema or a stored form configuration.

    A configuration without a fields list yields a failed result rather
    than an exception, so callers can relay it like any other error.
    """

    fields = schema.get("fields") if isinstance(schema, Mapping) else schema

    try:
        return form_answer_validator.validate(fields, raw_answers)
    except InvalidFormConfigurationError as e:
        logger.error(f"Rejected submission against malformed schema: {e.message}")
        return AnswerValidationResult(
            success=False,
            errors=[INVALID_FORM_CONFIGURATION_MESSAGE],
            processed_answers={},
        )


def sanitize_answers_for_storage(processed_answers: Mapping[str, Any]) -> Dict[str, Any]:
    """Bound validated answers for storage"""
    return answer_sanitizer.sanitize(processed_answers)


def score_and_flag_feedback(sanitized_answers: Mapping[str, Any]) -> ScoreResult:
    """Score sanitized answers; never raises"""
    return response_scorer.score(sanitized_answers)


def validate_contact_details(
    contact_details: Any
) -> Tuple[Optional[ContactDetails], List[str]]:
    """Check and clean the contact details of a submitter who asked to be contacted"""

    if not isinstance(contact_details, Mapping):
        return None, ["Contact details are required when you want to be contacted"]

    email = contact_details.get("email")
    phone = contact_details.get("phone")
    name = contact_details.get("name")

    if not email and not phone:
        return None, ["At least email or phone number is required in contact details"]

    if email and (not isinstance(email, str) or not EMAIL_PATTERN.match(email.strip())):
        return None, ["Please provide a valid email address"]

    return ContactDetails(
        name=name.strip()[:MAX_CONTACT_NAME_LENGTH] if isinstance(name, str) else None,
        email=email.strip().lower() if isinstance(email, str) else None,
        phone=phone.strip()[:MAX_CONTACT_PHONE_LENGTH] if isinstance(phone, str) else None,
    ), []


def process_submission(
    raw_answers: Optional[Mapping[str, Any]],
    schema: Schema,
    wants_to_be_contacted: bool = False,
    contact_details: Any = None,
) -> SubmissionOutcome:
    """Run a public submission through validation, sanitization and scoring"""

    validation = validate_form_answers(raw_answers, schema)
    if not validation.success:
        return SubmissionOutcome(success=False, errors=validation.errors)

    sanitized_answers = sanitize_answers_for_storage(validation.processed_answers)

    contact = None
    if wants_to_be_contacted:
        contact, contact_errors = validate_contact_details(contact_details)
        if contact_errors:
            return SubmissionOutcome(success=False, errors=contact_errors)

    if not get_forms_config().SCORING_ENABLED:
        return SubmissionOutcome(success=True, answers=sanitized_answers, contact_details=contact)

    result = score_and_flag_feedback(sanitized_answers)
    logger.info(
        f"Processed submission with {len(sanitized_answers)} answer(s): "
        f"score {result.score} (flagged: {result.flagged})"
    )

    return SubmissionOutcome(
        success=True,
        answers=sanitized_answers,
        contact_details=contact,
        score=result.score,
        flagged=result.flagged,
        components=result.components,
    )
