# backend/modules/forms/services/form_config_service.py

import re
import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from modules.forms.models.form_models import (
    FieldKind,
    ExpectedDataType,
    CHOICE_FIELD_KINDS,
    FILE_FIELD_KINDS,
)
from modules.forms.schemas.form_schemas import (
    ConfigValidationResult,
    FieldDescriptor,
)
from modules.forms.exceptions import InvalidFormConfigurationError
from modules.forms.constants import FIELD_ID_LABEL_SUFFIX_LENGTH

logger = logging.getLogger(__name__)

NON_ID_CHARACTERS = re.compile(r"[^a-z0-9]")


def generate_field_id(kind: Union[FieldKind, str], index: int, label: Optional[str] = "") -> str:
    """
    Generate a field id from its kind, position and label.

    Example: ("text_input", 2, "Your Name") -> "textinput_2_yourname"
    """
    kind_value = kind.value if isinstance(kind, FieldKind) else str(kind)
    prefix = kind_value.replace("_", "", 1)
    suffix = ""
    if label:
        suffix = "_" + NON_ID_CHARACTERS.sub("", label.lower())[:FIELD_ID_LABEL_SUFFIX_LENGTH]
    return f"{prefix}_{index}{suffix}"


def get_expected_data_type(kind: Union[FieldKind, str]) -> ExpectedDataType:
    """Storage type produced by validating a field of the given kind"""
    resolved = FieldKind.parse(kind)
    if resolved in (FieldKind.NUMBER, FieldKind.RATING):
        return ExpectedDataType.NUMBER
    if resolved == FieldKind.CHECKBOXES:
        return ExpectedDataType.ARRAY
    if resolved in FILE_FIELD_KINDS:
        return ExpectedDataType.FILE
    return ExpectedDataType.STRING


def validate_form_config(config: Any) -> ConfigValidationResult:
    """Check a stored form configuration before it is saved or used"""

    if not isinstance(config, Mapping):
        return ConfigValidationResult(
            success=False,
            errors=["Form configuration must be a valid object"]
        )

    fields = config.get("fields")
    if not isinstance(fields, list):
        return ConfigValidationResult(
            success=False,
            errors=["Form configuration must contain a fields array"]
        )

    # Empty forms are allowed as drafts
    if not fields:
        return ConfigValidationResult(success=True, errors=[])

    errors: List[str] = []
    seen_ids = set()

    for index, field in enumerate(fields):
        position = index + 1
        if not isinstance(field, Mapping):
            errors.append(f"Field {position}: must be an object")
            continue

        raw_kind = field.get("type") or field.get("kind")
        kind = FieldKind.parse(raw_kind)
        if not raw_kind:
            errors.append(f"Field {position}: type is required")
        elif kind is None:
            errors.append(f"Field {position}: invalid field type '{raw_kind}'")

        if kind is not None and kind.is_input:
            if not field.get("label") and not field.get("title"):
                errors.append(
                    f"Field {position}: label or title is required for input components"
                )

        if kind == FieldKind.SECTION_TITLE and not field.get("title"):
            errors.append(f"Field {position}: title is required for section titles")

        if kind == FieldKind.DESCRIPTION and not field.get("content") and not field.get("description"):
            errors.append(
                f"Field {position}: content or description is required for description components"
            )

        if kind in CHOICE_FIELD_KINDS:
            options = field.get("options")
            if not isinstance(options, list) or len(options) == 0:
                errors.append(
                    f"Field {position}: options array is required for choice components"
                )

        field_id = field.get("id")
        if isinstance(field_id, str) and field_id:
            if field_id in seen_ids:
                errors.append(f"Field {position}: duplicate field id '{field_id}'")
            seen_ids.add(field_id)

    return ConfigValidationResult(success=len(errors) == 0, errors=errors)


def normalize_form_config(config: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Return a copy of the configuration with an id on every field and an
    explicit required flag on input fields. The input is not modified.
    """

    fields = config.get("fields")
    if not fields:
        return dict(config)

    normalized_fields = []
    for index, field in enumerate(fields):
        normalized = dict(field)
        kind = FieldKind.parse(normalized.get("type") or normalized.get("kind"))

        if not normalized.get("id"):
            raw_kind = normalized.get("type") or normalized.get("kind") or ""
            normalized["id"] = generate_field_id(
                raw_kind, index, normalized.get("label") or normalized.get("title")
            )

        if kind is not None and kind.is_input:
            normalized["required"] = bool(normalized.get("required", False))

        normalized_fields.append(normalized)

    return {**config, "fields": normalized_fields}


def build_schema(config: Mapping[str, Any]) -> List[FieldDescriptor]:
    """
    Parse a stored form configuration into field descriptors.

    Raises:
        InvalidFormConfigurationError: If the configuration has no fields list
    """

    if not isinstance(config, Mapping) or not isinstance(config.get("fields"), list):
        raise InvalidFormConfigurationError(
            "configuration must contain a fields array",
            received_type=type(config).__name__
        )

    normalized = normalize_form_config(config)
    try:
        descriptors = [FieldDescriptor.model_validate(field) for field in normalized["fields"]]
    except ValidationError as e:
        raise InvalidFormConfigurationError(
            f"fields are malformed: {e.error_count()} problem(s)",
            received_type=type(config).__name__
        ) from e
    logger.debug(f"Built schema with {len(descriptors)} field(s)")
    return descriptors
