# backend/modules/forms/services/scoring_service.py

import re
import json
import math
import logging
from typing import Any, Mapping, Tuple
from dataclasses import dataclass

from modules.forms.schemas.form_schemas import ScoreComponents, ScoreResult
from modules.forms.config.forms_config import get_forms_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextMetrics:
    """Lexical measurements of the combined answer text"""
    word_count: int
    char_count: int
    avg_word_length: float


@dataclass(frozen=True)
class SentimentBreakdown:
    """Keyword counts and the resulting raw sentiment (-100 to 100)"""
    positive_count: int
    negative_count: int
    constructive_count: int
    sentiment_score: int


@dataclass(frozen=True)
class SpamCheck:
    """Spam phrase hits; density is per 1000 characters"""
    spam_count: int
    spam_density: float


def _word_pattern(keywords: Tuple[str, ...]) -> re.Pattern:
    alternation = "|".join(re.escape(keyword) for keyword in keywords)
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)


class ResponseScorer:
    """Heuristic quality, sentiment and spam scoring for form submissions"""

    # Keywords that indicate valuable feedback
    POSITIVE_KEYWORDS: Tuple[str, ...] = (
        "excellent", "great", "amazing", "wonderful", "fantastic", "outstanding",
        "helpful", "useful", "valuable", "appreciate", "love", "perfect",
        "professional", "quick", "fast", "efficient", "friendly", "polite",
        "recommend", "satisfied", "pleased", "impressed", "exceptional",
    )

    NEGATIVE_KEYWORDS: Tuple[str, ...] = (
        "terrible", "awful", "horrible", "worst", "bad", "poor", "disappointing",
        "frustrating", "annoying", "useless", "waste", "rude", "unprofessional",
        "slow", "delayed", "broken", "error", "problem", "issue", "complaint",
        "refund", "cancel", "unsubscribe", "never", "again",
    )

    CONSTRUCTIVE_KEYWORDS: Tuple[str, ...] = (
        "suggest", "improve", "better", "could", "should", "would", "feature",
        "request", "enhancement", "update", "upgrade", "consider", "recommend",
        "feedback", "opinion", "think", "feel", "experience", "journey",
    )

    SPAM_PHRASES: Tuple[str, ...] = (
        "click here", "buy now", "free money", "lottery", "winner", "urgent",
        "congratulations", "limited time", "act now", "call now", "promo",
        "discount", "offer expires", "no obligation", "risk free",
    )

    POSITIVE_PATTERN = _word_pattern(POSITIVE_KEYWORDS)
    NEGATIVE_PATTERN = _word_pattern(NEGATIVE_KEYWORDS)
    CONSTRUCTIVE_PATTERN = _word_pattern(CONSTRUCTIVE_KEYWORDS)
    SENTENCE_SPLIT_PATTERN = re.compile(r"[.!?]+")
    DIGIT_RUN_PATTERN = re.compile(r"[0-9]+")

    # Text shorter than this is treated as empty feedback
    MIN_TEXT_LENGTH = 3

    # Sentiment weights per keyword hit
    POSITIVE_WEIGHT = 20
    NEGATIVE_WEIGHT = 15
    CONSTRUCTIVE_WEIGHT = 10

    # Combination weights
    ENGAGEMENT_WEIGHT = 0.4
    SENTIMENT_WEIGHT = 0.3
    LENGTH_WEIGHT = 0.2

    QUALITY_MULTIPLIER = 1.1
    SPAM_PENALTY = 0.3
    VERY_SHORT_PENALTY = 0.2

    def score(self, answers: Mapping[str, Any]) -> ScoreResult:
        """
        Score a sanitized answer set.

        Never raises. Empty feedback and internal faults both yield a zero,
        unflagged result since scoring is advisory.
        """

        try:
            return self._score(answers)
        except Exception:
            logger.exception("Feedback scoring failed; returning neutral score")
            return ScoreResult.neutral()

    def _score(self, answers: Mapping[str, Any]) -> ScoreResult:
        text = self.extract_text(answers)

        if len(text) < self.MIN_TEXT_LENGTH:
            return ScoreResult.neutral()

        metrics = self.get_text_metrics(text)
        sentiment = self.calculate_sentiment(text)
        engagement = self.calculate_engagement(text, metrics)
        spam = self.check_spam_indicators(text, metrics)

        score = engagement * self.ENGAGEMENT_WEIGHT

        # Sentiment rescaled from -100..100 to 0..100
        normalized_sentiment = max(0.0, (sentiment.sentiment_score + 100) / 2)
        score += normalized_sentiment * self.SENTIMENT_WEIGHT

        length_score = min(100, metrics.word_count * 2)
        score += length_score * self.LENGTH_WEIGHT

        # Multipliers compound in this order: quality, spam, very short
        if metrics.word_count >= 20 and sentiment.constructive_count > 0:
            score *= self.QUALITY_MULTIPLIER
        if spam.spam_count > 0:
            score *= self.SPAM_PENALTY
        if metrics.word_count < 3:
            score *= self.VERY_SHORT_PENALTY

        final_score = self._round_half_up(min(100.0, max(0.0, score)))

        flagged = (
            final_score >= 70
            or (final_score >= 50 and sentiment.constructive_count >= 2)
            or (metrics.word_count >= 50 and sentiment.sentiment_score != 0)
        )

        components = ScoreComponents(
            sentiment=sentiment.sentiment_score,
            engagement=engagement,
            spam=spam.spam_count,
            word_count=metrics.word_count,
            char_count=metrics.char_count,
            positive_count=sentiment.positive_count,
            negative_count=sentiment.negative_count,
            constructive_count=sentiment.constructive_count,
            spam_density=spam.spam_density,
        )

        if get_forms_config().LOG_SCORE_DETAILS:
            logger.debug(
                f"Scored feedback: {final_score} (flagged: {flagged}), "
                f"components: {components.model_dump()}"
            )

        return ScoreResult(score=final_score, flagged=flagged, components=components)

    def extract_text(self, answers: Mapping[str, Any]) -> str:
        """Combine every answer into one lowercase text blob"""

        parts = []
        for value in answers.values():
            if isinstance(value, str):
                parts.append(value)
            else:
                # Compact JSON; None becomes "null"
                parts.append(
                    json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
                )

        return " ".join(parts).lower().strip()

    def get_text_metrics(self, text: str) -> TextMetrics:
        words = text.split()
        word_count = len(words)
        char_count = len(text)
        return TextMetrics(
            word_count=word_count,
            char_count=char_count,
            avg_word_length=char_count / word_count if word_count else 0.0,
        )

    def count_keywords(self, text: str, pattern: re.Pattern) -> int:
        return len(pattern.findall(text))

    def calculate_sentiment(self, text: str) -> SentimentBreakdown:
        positive_count = self.count_keywords(text, self.POSITIVE_PATTERN)
        negative_count = self.count_keywords(text, self.NEGATIVE_PATTERN)
        constructive_count = self.count_keywords(text, self.CONSTRUCTIVE_PATTERN)

        raw_score = (
            positive_count * self.POSITIVE_WEIGHT
            - negative_count * self.NEGATIVE_WEIGHT
            + constructive_count * self.CONSTRUCTIVE_WEIGHT
        )

        return SentimentBreakdown(
            positive_count=positive_count,
            negative_count=negative_count,
            constructive_count=constructive_count,
            sentiment_score=min(100, max(-100, raw_score)),
        )

    def calculate_engagement(self, text: str, metrics: TextMetrics) -> int:
        """Heuristic for how substantive the answer text is (0 to 100)"""

        engagement = 0

        if metrics.word_count >= 50:
            engagement += 30
        elif metrics.word_count >= 20:
            engagement += 20
        elif metrics.word_count >= 10:
            engagement += 10
        elif metrics.word_count >= 5:
            engagement += 5

        if metrics.avg_word_length > 4:
            engagement += 10
        if "?" in text:
            engagement += 5
        if "!" in text:
            engagement += 5

        sentences = [s for s in self.SENTENCE_SPLIT_PATTERN.split(text) if s.strip()]
        if len(sentences) > 1:
            engagement += 10

        if self.DIGIT_RUN_PATTERN.search(text):
            engagement += 10

        return min(100, engagement)

    def check_spam_indicators(self, text: str, metrics: TextMetrics) -> SpamCheck:
        spam_count = sum(text.count(phrase) for phrase in self.SPAM_PHRASES)
        # Density is reported only; the penalty is gated on the count
        spam_density = spam_count / max(1, metrics.char_count) * 1000
        return SpamCheck(spam_count=spam_count, spam_density=spam_density)

    @staticmethod
    def _round_half_up(value: float) -> int:
        return int(math.floor(value + 0.5))


# Global scorer instance
response_scorer = ResponseScorer()
