# backend/modules/forms/schemas/form_schemas.py

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)
from typing import Optional, List, Dict, Any, Union
from enum import Enum

from modules.forms.models.form_models import FieldKind


# Form schema
class FieldConstraints(BaseModel):
    """Optional bounds attached to a field; meaning depends on the field kind"""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    min_length: Optional[int] = Field(
        None, ge=0, validation_alias=AliasChoices("min_length", "minLength")
    )
    max_length: Optional[int] = Field(
        None, ge=0, validation_alias=AliasChoices("max_length", "maxLength")
    )
    min: Optional[Union[int, float]] = None
    max: Optional[Union[int, float]] = None


class FieldDescriptor(BaseModel):
    """One entry in a form schema"""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    id: str = Field(..., min_length=1)
    kind: Union[FieldKind, str] = Field(
        ..., validation_alias=AliasChoices("kind", "type")
    )
    label: str = ""
    required: bool = False
    options: Optional[List[str]] = None
    constraints: Optional[FieldConstraints] = Field(
        None, validation_alias=AliasChoices("constraints", "validation")
    )

    @model_validator(mode="before")
    @classmethod
    def fill_label_from_title(cls, data: Any) -> Any:
        # Stored configurations may carry "title" instead of "label", or a null label
        if isinstance(data, dict) and not data.get("label"):
            data = {**data, "label": data.get("title") or ""}
        return data

    @field_validator("kind", mode="before")
    @classmethod
    def resolve_kind(cls, v):
        if isinstance(v, FieldKind):
            return v
        if not isinstance(v, str):
            raise ValueError("Field kind must be a string")
        return FieldKind.parse(v) or v

    @field_validator("required", mode="before")
    @classmethod
    def coerce_required(cls, v):
        return bool(v)

    @property
    def known_kind(self) -> Optional[FieldKind]:
        """The resolved kind, None when the kind is unrecognized"""
        return self.kind if isinstance(self.kind, FieldKind) else None

    @property
    def is_input(self) -> bool:
        # Unrecognized kinds are treated as input so their values pass through
        return self.known_kind is None or self.known_kind.is_input

    @property
    def display_label(self) -> str:
        return self.label or "Field"


# Validation results
class AnswerValidationResult(BaseModel):
    """Outcome of validating a submission against a form schema"""

    success: bool
    errors: List[str] = Field(default_factory=list)
    processed_answers: Dict[str, Any] = Field(default_factory=dict)


class ConfigValidationResult(BaseModel):
    """Outcome of validating a stored form configuration"""

    success: bool
    errors: List[str] = Field(default_factory=list)


# Scoring
class ScoreComponents(BaseModel):
    """Intermediate values behind a feedback score"""

    sentiment: int = Field(..., ge=-100, le=100)
    engagement: int = Field(..., ge=0, le=100)
    spam: int = Field(..., ge=0)
    word_count: int = Field(..., ge=0)
    char_count: int = Field(0, ge=0)
    positive_count: int = Field(0, ge=0)
    negative_count: int = Field(0, ge=0)
    constructive_count: int = Field(0, ge=0)
    spam_density: float = Field(0.0, ge=0.0)


class ScoreResult(BaseModel):
    """Score and flag for one submission"""

    score: int = Field(..., ge=0, le=100)
    flagged: bool
    components: Optional[ScoreComponents] = None

    @classmethod
    def neutral(cls) -> "ScoreResult":
        """Zero, unflagged result used for empty text and internal faults"""
        return cls(score=0, flagged=False)


# Pipeline
class ContactDetails(BaseModel):
    """Cleaned contact details of a submitter who asked to be contacted"""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class SubmissionOutcome(BaseModel):
    """Result of running a submission through validation, sanitization and scoring"""

    success: bool
    errors: List[str] = Field(default_factory=list)
    answers: Dict[str, Any] = Field(default_factory=dict)
    contact_details: Optional[ContactDetails] = None
    score: int = Field(0, ge=0, le=100)
    flagged: bool = False
    components: Optional[ScoreComponents] = None


# Trends
class SentimentTrend(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class FeedbackTrendSummary(BaseModel):
    """Aggregate view over scored feedback entries"""

    average_score: int = 0
    total_entries: int = 0
    flagged_percentage: int = 0
    sentiment_trend: SentimentTrend = SentimentTrend.NEUTRAL
    high_quality_count: int = 0
