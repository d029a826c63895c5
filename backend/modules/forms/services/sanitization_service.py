# backend/modules/forms/services/sanitization_service.py

"""
Storage sanitization for validated form answers.

Values are bounded by their runtime type, not by field kind, so the
sanitizer is safe to call on answers that never went through validation.
"""

from typing import Any, Dict, List, Mapping

from modules.forms.constants import (
    MAX_STRING_LENGTH,
    MAX_NUMBER_MAGNITUDE,
    MAX_ARRAY_ITEMS,
    MAX_ARRAY_ITEM_LENGTH,
    MAX_FILE_NAME_LENGTH,
    MAX_FILE_TYPE_LENGTH,
    UNKNOWN_FILE_VALUE,
)


class AnswerSanitizer:
    """Bounds answer values so they are safe to store"""

    @classmethod
    def sanitize(cls, answers: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Sanitize every answer independently.

        Args:
            answers: Normalized answers keyed by field id

        Returns:
            New mapping with each value clipped to storage bounds
        """
        return {key: cls.sanitize_value(value) for key, value in answers.items()}

    @classmethod
    def sanitize_value(cls, value: Any) -> Any:
        if isinstance(value, str):
            return cls.sanitize_string(value, MAX_STRING_LENGTH)
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return cls.clamp_number(value)
        if isinstance(value, (list, tuple)):
            return cls.sanitize_array(value)
        if isinstance(value, Mapping):
            return cls.sanitize_file_reference(value)
        return value

    @staticmethod
    def sanitize_string(value: str, max_length: int) -> str:
        # Trailing whitespace exposed by the cut is trimmed so a second pass is a no-op
        return value.strip()[:max_length].rstrip()

    @staticmethod
    def clamp_number(value):
        return max(-MAX_NUMBER_MAGNITUDE, min(MAX_NUMBER_MAGNITUDE, value))

    @classmethod
    def sanitize_array(cls, items) -> List[Any]:
        return [
            cls.sanitize_string(item, MAX_ARRAY_ITEM_LENGTH) if isinstance(item, str) else item
            for item in list(items)[:MAX_ARRAY_ITEMS]
        ]

    @staticmethod
    def sanitize_file_reference(value: Mapping[str, Any]) -> Dict[str, Any]:
        """Rebuild file metadata as a fixed name/size/type structure"""

        name = value.get("name")
        size = value.get("size")
        file_type = value.get("type")

        return {
            "name": name[:MAX_FILE_NAME_LENGTH] if isinstance(name, str) else UNKNOWN_FILE_VALUE,
            "size": (
                max(0, size)
                if isinstance(size, (int, float)) and not isinstance(size, bool)
                else 0
            ),
            "type": (
                file_type[:MAX_FILE_TYPE_LENGTH]
                if isinstance(file_type, str)
                else UNKNOWN_FILE_VALUE
            ),
        }


answer_sanitizer = AnswerSanitizer()
