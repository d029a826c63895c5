# backend/modules/forms/exceptions.py

"""
Custom exceptions for forms module.

Answer problems are reported as error lists, not exceptions. These types
cover programmer errors such as passing a malformed form configuration.
"""

from typing import Optional, Dict, Any


class FormsBaseException(Exception):
    """Base exception for all forms errors"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class InvalidFormConfigurationError(FormsBaseException):
    """Raised when a form schema is not a sequence of field descriptors"""

    def __init__(self, reason: str, received_type: Optional[str] = None):
        message = f"Invalid form configuration: {reason}"
        details = {
            "reason": reason,
            "received_type": received_type
        }
        super().__init__(message, "INVALID_FORM_CONFIGURATION", details)

