"""Structural cue extraction: topics and capabilities from document text."""
import re
from typing import List

MAX_TOPICS = 5
MAX_CAPABILITIES = 5

HEADER_PATTERN = re.compile(r"^#+\s+(.+)$", re.MULTILINE)
EMPHASIS_PATTERN = re.compile(r"\*\*([^*]+)\*\*|\*([^*]+)\*")
SENTENCE_SPLIT = re.compile(r"[.!?]\s+")

CAPABILITY_PATTERNS = (
    re.compile(r"(?:can|able to|help with|provide|offer|support)\s+([^.!?]{10,80})", re.IGNORECASE),
    re.compile(r"(?:how to|steps to|way to)\s+([^.!?]{10,80})", re.IGNORECASE),
)


def extract_topics(content: str) -> List[str]:
    """Collect headers, emphasized spans and leading sentences, in that order."""
    content = content or ""
    topics: List[str] = []

    topics.extend(m.group(1).strip() for m in HEADER_PATTERN.finditer(content))
    topics.extend(m.group(0).replace("*", "").strip() for m in EMPHASIS_PATTERN.finditer(content))

    leading = [s.strip() for s in SENTENCE_SPLIT.split(content)[:3]]
    topics.extend(s for s in leading if 10 <= len(s) < 100)

    return topics[:MAX_TOPICS]


def extract_capabilities(content: str) -> List[str]:
    """Collect action phrases ("can ...", "how to ...") in pattern-then-occurrence order."""
    content = content or ""
    capabilities: List[str] = []
    for pattern in CAPABILITY_PATTERNS:
        capabilities.extend(m.group(0).strip() for m in pattern.finditer(content))
    return capabilities[:MAX_CAPABILITIES]
