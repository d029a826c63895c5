# backend/modules/forms/services/validation_service.py

import re
import math
import logging
from datetime import datetime
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from pydantic import ValidationError

from modules.forms.models.form_models import (
    FieldKind,
    TEXT_FIELD_KINDS,
    FILE_FIELD_KINDS,
)
from modules.forms.schemas.form_schemas import (
    AnswerValidationResult,
    FieldDescriptor,
)
from modules.forms.exceptions import InvalidFormConfigurationError
from modules.forms.config.forms_config import get_forms_config
from modules.forms.constants import (
    DEFAULT_UPLOAD_NAME,
    DEFAULT_UPLOAD_TYPE,
    MIN_RATING,
    MAX_RATING,
)

logger = logging.getLogger(__name__)

Number = Union[int, float]
FieldCheck = Tuple[Any, List[str]]

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+\Z")
PHONE_PATTERN = re.compile(r"^\+?[1-9][0-9]{0,14}\Z")
PHONE_SEPARATORS = re.compile(r"[\s\-()]")
DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}\Z")
TIME_PATTERN = re.compile(r"^([01]?[0-9]|2[0-3]):[0-5][0-9]\Z")
INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+\Z")
DECIMAL_PATTERN = re.compile(r"^[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?\Z")


def parse_number(value: Any) -> Optional[Number]:
    """Parse a numeric answer, returning None when it is not a finite number"""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip()
        if INTEGER_PATTERN.match(text):
            return int(text)
        if DECIMAL_PATTERN.match(text):
            parsed = float(text)
            return parsed if math.isfinite(parsed) else None
    return None


def is_empty_answer(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def _format_bound(bound: Number) -> str:
    if isinstance(bound, float) and bound.is_integer():
        return str(int(bound))
    return str(bound)


class FormAnswerValidator:
    """Validates submitted answers against a form schema, field by field"""

    def __init__(self):
        self.field_checks: Dict[FieldKind, Callable[[FieldDescriptor, Any], FieldCheck]] = {
            FieldKind.EMAIL: self._check_email,
            FieldKind.PHONE: self._check_phone,
            FieldKind.NUMBER: self._check_number,
            FieldKind.DATE: self._check_date,
            FieldKind.TIME: self._check_time,
            FieldKind.RATING: self._check_rating,
            FieldKind.MULTIPLE_CHOICE: self._check_single_choice,
            FieldKind.DROPDOWN: self._check_dropdown,
            FieldKind.YESNO: self._check_yes_no,
            FieldKind.CHECKBOXES: self._check_multi_choice,
        }
        self.field_checks.update({kind: self._check_text for kind in TEXT_FIELD_KINDS})
        self.field_checks.update({kind: self._check_file for kind in FILE_FIELD_KINDS})

    def validate(
        self,
        schema: Sequence,
        answers: Optional[Mapping[str, Any]]
    ) -> AnswerValidationResult:
        """
        Validate answers against the schema.

        Every field is checked and all problems are reported together, in
        schema order. Only fields with a present, valid value appear in the
        processed answers; on failure they still hold the fields that passed.

        Raises:
            InvalidFormConfigurationError: If the schema is not a sequence of
                field descriptors
        """

        fields = self.coerce_schema(schema)

        if answers is None:
            answers = {}
        elif not isinstance(answers, Mapping):
            logger.warning(
                f"Answers of type {type(answers).__name__} are not a mapping; treating as empty"
            )
            answers = {}

        errors: List[str] = []
        processed_answers: Dict[str, Any] = {}

        for field in fields:
            if not field.is_input:
                continue

            value = answers.get(field.id)

            if is_empty_answer(value):
                if field.required:
                    errors.append(f"{field.display_label} is required")
                continue

            kind = field.known_kind
            if kind is None:
                self._log_unknown_kind(field)
                processed_answers[field.id] = value
                continue

            checked_value, field_errors = self.field_checks[kind](field, value)
            if field_errors:
                errors.extend(field_errors)
            else:
                processed_answers[field.id] = checked_value

        if errors:
            logger.debug(f"Answer validation failed with {len(errors)} error(s)")

        return AnswerValidationResult(
            success=len(errors) == 0,
            errors=errors,
            processed_answers=processed_answers,
        )

    def coerce_schema(self, schema: Any) -> List[FieldDescriptor]:
        """Turn a sequence of descriptors or descriptor dicts into descriptors"""

        if isinstance(schema, (str, bytes)) or not isinstance(schema, Sequence):
            raise InvalidFormConfigurationError(
                "schema must be a sequence of field descriptors",
                received_type=type(schema).__name__
            )

        fields = []
        for index, item in enumerate(schema):
            if isinstance(item, FieldDescriptor):
                fields.append(item)
                continue
            if not isinstance(item, Mapping):
                raise InvalidFormConfigurationError(
                    f"field {index + 1} is not an object",
                    received_type=type(item).__name__
                )

            data = dict(item)
            if not data.get("id"):
                data["id"] = f"field-{index}"
            try:
                fields.append(FieldDescriptor.model_validate(data))
            except ValidationError as e:
                raise InvalidFormConfigurationError(
                    f"field {index + 1} is malformed: {e.error_count()} problem(s)",
                    received_type=type(item).__name__
                ) from e

        return fields

    def _log_unknown_kind(self, field: FieldDescriptor) -> None:
        if get_forms_config().LOG_UNKNOWN_FIELD_KINDS:
            logger.warning(f"Unknown field type: {field.kind} for field {field.id}")

    # Type-specific checks. Each returns the coerced value and any errors.

    def _check_text(self, field: FieldDescriptor, value: Any) -> FieldCheck:
        label = field.display_label
        if not isinstance(value, str):
            return None, [f"{label} must be a text string"]

        text = value.strip()
        constraints = field.constraints
        errors = []
        if constraints and constraints.min_length and len(text) < constraints.min_length:
            errors.append(
                f"{label} must be at least {constraints.min_length} characters long"
            )
        if constraints and constraints.max_length and len(text) > constraints.max_length:
            errors.append(
                f"{label} must be no more than {constraints.max_length} characters long"
            )
        return text, errors

    def _check_email(self, field: FieldDescriptor, value: Any) -> FieldCheck:
        error = [f"{field.display_label} must be a valid email address"]
        if not isinstance(value, str):
            return None, error

        email = value.strip()
        if not email.isascii() or not EMAIL_PATTERN.match(email):
            return None, error
        return email.lower(), []

    def _check_phone(self, field: FieldDescriptor, value: Any) -> FieldCheck:
        error = [f"{field.display_label} must be a valid phone number"]
        if not isinstance(value, str):
            return None, error

        phone = value.strip()
        if not PHONE_PATTERN.match(PHONE_SEPARATORS.sub("", phone)):
            return None, error
        return phone, []

    def _check_number(self, field: FieldDescriptor, value: Any) -> FieldCheck:
        label = field.display_label
        number = parse_number(value)
        if number is None:
            return None, [f"{label} must be a valid number"]

        constraints = field.constraints
        errors = []
        if constraints and constraints.min is not None and number < constraints.min:
            errors.append(f"{label} must be at least {_format_bound(constraints.min)}")
        if constraints and constraints.max is not None and number > constraints.max:
            errors.append(f"{label} must be no more than {_format_bound(constraints.max)}")
        return number, errors

    def _check_date(self, field: FieldDescriptor, value: Any) -> FieldCheck:
        label = field.display_label
        if not isinstance(value, str):
            return None, [f"{label} must be a valid date"]
        if not DATE_PATTERN.match(value):
            return None, [f"{label} must be in YYYY-MM-DD format"]

        try:
            datetime.strptime(value, "%Y-%m-%d")
        except ValueError:
            return None, [f"{label} must be a valid date"]
        return value, []

    def _check_time(self, field: FieldDescriptor, value: Any) -> FieldCheck:
        label = field.display_label
        if not isinstance(value, str):
            return None, [f"{label} must be a valid time"]
        if not TIME_PATTERN.match(value):
            return None, [f"{label} must be in HH:MM format"]
        return value, []

    def _check_rating(self, field: FieldDescriptor, value: Any) -> FieldCheck:
        rating = parse_number(value)
        if (
            rating is None
            or not float(rating).is_integer()
            or rating < MIN_RATING
            or rating > MAX_RATING
        ):
            return None, [
                f"{field.display_label} must be a rating between {MIN_RATING} and {MAX_RATING}"
            ]
        return int(rating), []

    def _check_single_choice(self, field: FieldDescriptor, value: Any) -> FieldCheck:
        return self._check_option(field, value, f"{field.display_label} must be a valid option")

    def _check_dropdown(self, field: FieldDescriptor, value: Any) -> FieldCheck:
        return self._check_option(field, value, f"{field.display_label} must be a valid selection")

    def _check_option(self, field: FieldDescriptor, value: Any, type_error: str) -> FieldCheck:
        if not isinstance(value, str):
            return None, [type_error]
        if field.options and value not in field.options:
            return None, [f"{field.display_label} must be one of the provided options"]
        return value, []

    def _check_yes_no(self, field: FieldDescriptor, value: Any) -> FieldCheck:
        label = field.display_label
        if not isinstance(value, str):
            return None, [f"{label} must be a valid option"]

        answer = value.strip().lower()
        if answer not in ("yes", "no"):
            return None, [f"{label} must be either 'yes' or 'no'"]
        return answer, []

    def _check_multi_choice(self, field: FieldDescriptor, value: Any) -> FieldCheck:
        label = field.display_label
        if not isinstance(value, list):
            return None, [f"{label} must be an array of selections"]

        if field.options:
            invalid = [item for item in value if item not in field.options]
            if invalid:
                names = ", ".join(str(item) for item in invalid)
                return None, [f"{label} contains invalid options: {names}"]
        return value, []

    def _check_file(self, field: FieldDescriptor, value: Any) -> FieldCheck:
        if isinstance(value, str):
            return value, []
        if isinstance(value, Mapping):
            return {
                "name": value.get("name") or DEFAULT_UPLOAD_NAME,
                "size": value.get("size") or 0,
                "type": value.get("type") or DEFAULT_UPLOAD_TYPE,
                "path": value.get("path") or None,
            }, []
        return None, [f"{field.display_label} must be a valid file"]


# Global validator instance
form_answer_validator = FormAnswerValidator()
