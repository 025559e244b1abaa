"""Rule-based intent classifier built on ordered regex groups."""
import enum
import re
from typing import Pattern, Tuple


class Intent(str, enum.Enum):
    greeting = "greeting"
    question = "question"
    help = "help"
    general = "general"


def _compile(*patterns: str) -> Tuple[Pattern[str], ...]:
    return tuple(re.compile(p, re.IGNORECASE) for p in patterns)


GREETING_PATTERNS = _compile(
    r"^(hi|hello|hey|greetings|good\s+(morning|afternoon|evening))",
    r"^(what'?s\s+up|how\s+are\s+you|how\s+do\s+you\s+do)",
    r"^(start|begin|help|assist)",
)

QUESTION_PATTERNS = _compile(
    r"^(what|how|when|where|why|who|which|can\s+you|could\s+you|would\s+you)",
    r"\?$",
    r"^(tell\s+me|show\s+me|explain|describe)",
)

# "help" and "assist" also open GREETING_PATTERNS, so greeting must be tested first.
HELP_PATTERNS = _compile(
    r"^(help|support|assist|guide)",
    r"^(i\s+need|i\s+want|i'm\s+looking\s+for)",
    r"^(how\s+to|how\s+do\s+i|how\s+can\s+i)",
)

# Priority order: first group with a matching pattern wins.
PATTERN_GROUPS = (
    (Intent.greeting, GREETING_PATTERNS),
    (Intent.question, QUESTION_PATTERNS),
    (Intent.help, HELP_PATTERNS),
)


def _matches_any(text: str, patterns) -> bool:
    return any(p.search(text) for p in patterns)


def classify(utterance: str) -> Intent:
    """Map a raw user utterance to an Intent."""
    normalized = (utterance or "").strip().lower()
    for intent, patterns in PATTERN_GROUPS:
        if _matches_any(normalized, patterns):
            return intent
    return Intent.general
