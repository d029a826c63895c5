from .form_models import (
    FieldKind,
    ExpectedDataType,
    FIELD_KIND_ALIASES,
    LAYOUT_FIELD_KINDS,
    INPUT_FIELD_KINDS,
    CHOICE_FIELD_KINDS,
    TEXT_FIELD_KINDS,
    FILE_FIELD_KINDS,
)

__all__ = [
    "FieldKind",
    "ExpectedDataType",
    "FIELD_KIND_ALIASES",
    "LAYOUT_FIELD_KINDS",
    "INPUT_FIELD_KINDS",
    "CHOICE_FIELD_KINDS",
    "TEXT_FIELD_KINDS",
    "FILE_FIELD_KINDS",
]
