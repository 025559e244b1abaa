"""Keyword-bag sentiment tagger and per-chatbot aggregation."""
import math
from typing import Iterable

from ..schemas.io_models import SentimentLabel, SentimentResult, SentimentSummary

POSITIVE_WORDS = (
    "good", "great", "excellent", "amazing", "wonderful", "fantastic",
    "love", "perfect", "awesome", "brilliant", "outstanding", "superb",
    "thanks", "thank you", "helpful", "useful", "satisfied", "happy",
    "pleased", "nice", "cool", "impressive", "solid", "works", "working",
)

NEGATIVE_WORDS = (
    "bad", "terrible", "awful", "horrible", "hate", "worst", "useless",
    "frustrated", "angry", "disappointed", "annoyed", "confused", "problem",
    "issue", "error", "broken", "wrong", "failed", "slow", "poor", "sucks",
    "stupid", "dumb", "ridiculous", "waste", "garbage",
)

POSITIVE_SCORE = 0.7
NEGATIVE_SCORE = -0.7


def tag(text: str) -> SentimentResult:
    """Label text by plain substring containment against the two word lists."""
    content = (text or "").lower()
    has_positive = any(word in content for word in POSITIVE_WORDS)
    has_negative = any(word in content for word in NEGATIVE_WORDS)

    if has_positive and not has_negative:
        return SentimentResult(sentiment=SentimentLabel.positive, score=POSITIVE_SCORE)
    if has_negative and not has_positive:
        return SentimentResult(sentiment=SentimentLabel.negative, score=NEGATIVE_SCORE)
    return SentimentResult(sentiment=SentimentLabel.neutral, score=0.0)


def _round_half_up(value: float) -> int:
    """Halves round toward +infinity, so -3.5 becomes -3."""
    return math.floor(value + 0.5)


def summarize_sentiment(records: Iterable) -> SentimentSummary:
    """Aggregate stored sentiment records into label percentages and an overall -10..10 score."""
    records = list(records)
    total = len(records)
    if total == 0:
        return SentimentSummary()

    counts = {label: 0 for label in SentimentLabel}
    total_score = 0.0
    for r in records:
        counts[SentimentLabel(r.sentiment)] += 1
        total_score += r.score or 0

    return SentimentSummary(
        total=total,
        positive_percentage=_round_half_up(counts[SentimentLabel.positive] / total * 100),
        neutral_percentage=_round_half_up(counts[SentimentLabel.neutral] / total * 100),
        negative_percentage=_round_half_up(counts[SentimentLabel.negative] / total * 100),
        overall_sentiment=_round_half_up(total_score / total * 10),
    )
