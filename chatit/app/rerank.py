#!/usr/bin/env python3
"""
Keyword scoring for retrieved documents and their sentences.

Document scores count every keyword occurrence; sentence scores count how
many distinct keywords a sentence contains. Ties keep input order.
"""

import re
from typing import List, Optional, Sequence

from ..schemas.io_models import Candidate, DocumentRecord

SENTENCE_SPLIT = re.compile(r"[.!?]\s+")
MIN_SENTENCE_LENGTH = 20
SUMMARY_SENTENCES = 3
FALLBACK_SENTENCES = 2


def score_documents(documents: Sequence[DocumentRecord], keywords: Sequence[str]) -> List[Candidate]:
    """Score each document by total keyword occurrences in its lowercase content."""
    candidates = []
    for doc in documents:
        text = doc.text.lower()
        score = sum(text.count(k.lower()) for k in keywords if k)
        candidates.append(Candidate(document=doc, score=score))
    return candidates


def best_candidate(documents: Sequence[DocumentRecord], keywords: Sequence[str]) -> Optional[Candidate]:
    """Highest scoring candidate, the earliest one on ties."""
    best = None
    for candidate in score_documents(documents, keywords):
        if best is None or candidate.score > best.score:
            best = candidate
    return best


def best_match(documents: Sequence[DocumentRecord], keywords: Sequence[str]) -> Optional[DocumentRecord]:
    """Best scoring document; the first document when nothing scores."""
    if not documents:
        return None
    if not keywords:
        return documents[0]
    best = best_candidate(documents, keywords)
    return best.document if best.score > 0 else documents[0]


def split_sentences(content: str) -> List[str]:
    return [s for s in SENTENCE_SPLIT.split(content or "") if len(s) > MIN_SENTENCE_LENGTH]


def summarize(content: str, keywords: Sequence[str]) -> str:
    """Extractive summary: up to three keyword-bearing sentences, else the first two."""
    sentences = split_sentences(content)
    distinct = list(dict.fromkeys(k.lower() for k in keywords if k))

    if not distinct:
        return ". ".join(sentences[:FALLBACK_SENTENCES]) + "."

    scored = []
    for sentence in sentences:
        lower = sentence.lower()
        scored.append((sum(1 for k in distinct if k in lower), sentence))

    # sorted() is stable, so equal scores stay in document order
    scored = sorted(scored, key=lambda pair: pair[0], reverse=True)
    top = [sentence for score, sentence in scored[:SUMMARY_SENTENCES] if score > 0]

    if not top:
        return ". ".join(sentences[:FALLBACK_SENTENCES]) + "."
    return ". ".join(top) + "."
