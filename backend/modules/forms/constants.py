# backend/modules/forms/constants.py

"""
Constants for forms module.

Centralizes storage bounds and validation limits.
"""

# Storage bounds applied by the answer sanitizer
MAX_STRING_LENGTH = 10000  # Characters kept for a single text answer
MAX_NUMBER_MAGNITUDE = 1000000  # Numbers are clamped to +/- this value
MAX_ARRAY_ITEMS = 100  # Selections kept for a multi-choice answer
MAX_ARRAY_ITEM_LENGTH = 1000  # Characters kept for each string selection
MAX_FILE_NAME_LENGTH = 255
MAX_FILE_TYPE_LENGTH = 100
UNKNOWN_FILE_VALUE = "unknown"

# Defaults for uploaded file metadata during validation
DEFAULT_UPLOAD_NAME = "uploaded_file"
DEFAULT_UPLOAD_TYPE = "unknown"

# Rating scale
MIN_RATING = 1
MAX_RATING = 5

# Contact details of submitters who want a reply
MAX_CONTACT_NAME_LENGTH = 255
MAX_CONTACT_PHONE_LENGTH = 50

# Field id generation
FIELD_ID_LABEL_SUFFIX_LENGTH = 20

# Messages surfaced to callers
INVALID_FORM_CONFIGURATION_MESSAGE = "Invalid form configuration"

# Trend analysis thresholds
POSITIVE_TREND_THRESHOLD = 70
NEGATIVE_TREND_THRESHOLD = 30
DEFAULT_TOP_ENTRIES_LIMIT = 10
