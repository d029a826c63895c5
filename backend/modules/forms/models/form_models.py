# backend/modules/forms/models/form_models.py

import enum
from typing import Dict, FrozenSet, Optional, Union


class FieldKind(str, enum.Enum):
    """Form component types as stored in form configurations"""

    # Input components
    TEXT_INPUT = "text_input"
    TEXT = "text"
    TEXTAREA = "textarea"
    EMAIL = "email"
    PHONE = "phone"
    NUMBER = "number"
    DATE = "date"
    TIME = "time"

    # Selection components
    RATING = "rating"
    MULTIPLE_CHOICE = "multiple_choice"
    CHECKBOXES = "checkboxes"
    DROPDOWN = "dropdown"
    YESNO = "yesno"

    # File components
    FILE_UPLOAD = "file_upload"
    IMAGE_UPLOAD = "image_upload"

    # Layout components
    SECTION_TITLE = "section_title"
    DESCRIPTION = "description"
    DIVIDER = "divider"
    SUBMIT_BUTTON = "submit_button"

    @classmethod
    def parse(cls, value: Union[str, "FieldKind", None]) -> Optional["FieldKind"]:
        """Resolve a stored kind or one of its aliases, None if unrecognized"""
        if isinstance(value, FieldKind):
            return value
        if not isinstance(value, str):
            return None

        key = value.strip().lower().replace("-", "_")
        try:
            return cls(key)
        except ValueError:
            return FIELD_KIND_ALIASES.get(key)

    @property
    def is_input(self) -> bool:
        return self in INPUT_FIELD_KINDS

    @property
    def is_choice(self) -> bool:
        return self in CHOICE_FIELD_KINDS


class ExpectedDataType(str, enum.Enum):
    """Storage type of a validated answer"""
    STRING = "string"
    NUMBER = "number"
    ARRAY = "array"
    FILE = "file"


# Descriptive names used by form builders and API clients
FIELD_KIND_ALIASES: Dict[str, FieldKind] = {
    "short_text": FieldKind.TEXT_INPUT,
    "long_text": FieldKind.TEXTAREA,
    "integer": FieldKind.NUMBER,
    "single_choice": FieldKind.MULTIPLE_CHOICE,
    "radio": FieldKind.MULTIPLE_CHOICE,
    "multi_choice": FieldKind.CHECKBOXES,
    "dropdown_choice": FieldKind.DROPDOWN,
    "yes_no": FieldKind.YESNO,
    "file": FieldKind.FILE_UPLOAD,
    "file_ref": FieldKind.FILE_UPLOAD,
    "image": FieldKind.IMAGE_UPLOAD,
    "image_ref": FieldKind.IMAGE_UPLOAD,
    "submit_marker": FieldKind.SUBMIT_BUTTON,
}

LAYOUT_FIELD_KINDS: FrozenSet[FieldKind] = frozenset({
    FieldKind.SECTION_TITLE,
    FieldKind.DESCRIPTION,
    FieldKind.DIVIDER,
    FieldKind.SUBMIT_BUTTON,
})

INPUT_FIELD_KINDS: FrozenSet[FieldKind] = frozenset(
    kind for kind in FieldKind if kind not in LAYOUT_FIELD_KINDS
)

CHOICE_FIELD_KINDS: FrozenSet[FieldKind] = frozenset({
    FieldKind.MULTIPLE_CHOICE,
    FieldKind.CHECKBOXES,
    FieldKind.DROPDOWN,
})

TEXT_FIELD_KINDS: FrozenSet[FieldKind] = frozenset({
    FieldKind.TEXT_INPUT,
    FieldKind.TEXT,
    FieldKind.TEXTAREA,
})

FILE_FIELD_KINDS: FrozenSet[FieldKind] = frozenset({
    FieldKind.FILE_UPLOAD,
    FieldKind.IMAGE_UPLOAD,
})
