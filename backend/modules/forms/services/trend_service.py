# backend/modules/forms/services/trend_service.py

import math
import logging
from datetime import datetime
from collections.abc import Mapping
from typing import Any, Iterable, List

from modules.forms.schemas.form_schemas import FeedbackTrendSummary, SentimentTrend
from modules.forms.constants import (
    POSITIVE_TREND_THRESHOLD,
    NEGATIVE_TREND_THRESHOLD,
    DEFAULT_TOP_ENTRIES_LIMIT,
)

logger = logging.getLogger(__name__)


def _entry_value(entry: Any, key: str, default: Any = None) -> Any:
    # Entries may be plain rows (dicts) or ORM objects
    if isinstance(entry, Mapping):
        return entry.get(key, default)
    return getattr(entry, key, default)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def analyze_feedback_trends(entries: Iterable[Any]) -> FeedbackTrendSummary:
    """Summarize scores and flags across a form's feedback entries"""

    entries = list(entries or [])
    if not entries:
        return FeedbackTrendSummary()

    total_entries = len(entries)
    total_score = sum(_entry_value(entry, "ai_score") or 0 for entry in entries)
    flagged_count = sum(1 for entry in entries if _entry_value(entry, "is_flagged"))

    average_score = total_score / total_entries
    flagged_percentage = flagged_count / total_entries * 100

    if average_score >= POSITIVE_TREND_THRESHOLD:
        sentiment_trend = SentimentTrend.POSITIVE
    elif average_score <= NEGATIVE_TREND_THRESHOLD:
        sentiment_trend = SentimentTrend.NEGATIVE
    else:
        sentiment_trend = SentimentTrend.NEUTRAL

    return FeedbackTrendSummary(
        average_score=_round_half_up(average_score),
        total_entries=total_entries,
        flagged_percentage=_round_half_up(flagged_percentage),
        sentiment_trend=sentiment_trend,
        high_quality_count=flagged_count,
    )


def get_top_entries(entries: Iterable[Any], limit: int = DEFAULT_TOP_ENTRIES_LIMIT) -> List[Any]:
    """
    Rank entries by score, newest first among equal scores.

    The store is external; this applies the same ordering to rows the caller
    has already loaded.
    """

    if limit <= 0:
        return []

    def sort_key(entry):
        created_at = _entry_value(entry, "created_at")
        return (
            _entry_value(entry, "ai_score") or 0,
            created_at is not None,
            created_at if created_at is not None else datetime.min,
        )

    ranked = sorted(entries, key=sort_key, reverse=True)
    return ranked[:limit]
