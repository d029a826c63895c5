# backend/modules/forms/tests/__init__.py

"""
Test suite for the forms module.

Covers:
- Answer validation for every field kind
- Storage sanitization bounds and idempotence
- Feedback scoring, penalties and flagging
- Form configuration validation and normalization
- Trend summaries and the end-to-end submission pipeline
"""
