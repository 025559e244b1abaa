"""Stop-word filtered keyword extraction."""
import re
from typing import List

STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
    "is", "are", "was", "were", "be", "been", "being", "have", "has", "had", "do", "does", "did",
    "will", "would", "could", "should", "may", "might", "can", "this", "that", "these", "those",
    "i", "you", "he", "she", "it", "we", "they", "me", "him", "her", "us", "them",
})

MAX_KEYWORDS = 10
MIN_KEYWORD_LENGTH = 3

_PUNCTUATION = re.compile(r"[^\w\s]")


def extract_keywords(text: str) -> List[str]:
    """Return up to MAX_KEYWORDS lowercase content words in input order.

    Punctuation becomes whitespace, tokens shorter than three characters and
    stop-words are dropped. Duplicates are kept.
    """
    cleaned = _PUNCTUATION.sub(" ", (text or "").lower())
    words = [w for w in cleaned.split() if len(w) >= MIN_KEYWORD_LENGTH and w not in STOP_WORDS]
    return words[:MAX_KEYWORDS]
