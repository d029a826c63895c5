# backend/modules/forms/__init__.py

"""
Dynamic Forms and Feedback Scoring Module

This module provides the processing core for vendor-defined feedback forms:
- Form configuration validation and normalization
- Field-by-field validation of submitted answers against a form schema
- Sanitization of validated answers before storage
- Heuristic quality/spam/sentiment scoring of submissions
- Feedback trend summaries over scored entries

Key Components:
- Models: Field kind enumeration and kind groupings
- Schemas: Pydantic models for descriptors, results and scores
- Services: Validation, sanitization, scoring and pipeline composition
- Config: Module settings loaded from FORMS_* environment variables

Integration Points:
- Forms: Stored form configurations are parsed into field descriptors
- Entries: Sanitized answers and scores are persisted by the caller
- Analytics: Trend summaries feed vendor dashboards
"""

__version__ = "1.0.0"
__author__ = "AuraConnect AI"
