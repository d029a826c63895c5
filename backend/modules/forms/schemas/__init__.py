from .form_schemas import (
    FieldConstraints,
    FieldDescriptor,
    AnswerValidationResult,
    ConfigValidationResult,
    ScoreComponents,
    ScoreResult,
    ContactDetails,
    SubmissionOutcome,
    SentimentTrend,
    FeedbackTrendSummary,
)

__all__ = [
    "FieldConstraints",
    "FieldDescriptor",
    "AnswerValidationResult",
    "ConfigValidationResult",
    "ScoreComponents",
    "ScoreResult",
    "ContactDetails",
    "SubmissionOutcome",
    "SentimentTrend",
    "FeedbackTrendSummary",
]
