"""
CHATIT: System Documentation
============================

This module-style README documents the architecture, components, data flows
and operational practices of the ChatIt support bot backend. It mirrors the
live codebase and can be imported to surface sections programmatically or
printed for human consumption.

How to use this file
--------------------
- View in an editor for structured reading.
- Run `python README.py` to print the outline.
- Import `README` in tools or scripts to surface sections.

Table of Contents
-----------------
1. System Overview
2. Architecture
3. Backend Components
4. Data & Persistence
5. NLU & Agent Routing
6. Fallback Chain
7. Sentiment
8. Configuration & Environment
9. Data Lifecycle
10. Testing Strategy
11. Observability
12. Deployment
"""

from __future__ import annotations

import textwrap


def section(title: str, body: str) -> str:
    return f"\n{title}\n{'-' * len(title)}\n{textwrap.dedent(body).strip()}\n"


SYSTEM_OVERVIEW = section(
    "1. System Overview",
    """
    ChatIt hosts customer-support chatbots that answer from the documents each
    bot owner has uploaded. Replies are produced by deterministic rules: intent
    regexes, keyword extraction, substring retrieval and extractive summaries.
    There is no model inference anywhere in the reply path, so the same message
    against the same documents always yields the same reply.
    """,
)


ARCHITECTURE = section(
    "2. Architecture",
    """
    - Widget / chat UI: talk to the FastAPI backend over JSON.
    - Backend: FastAPI app exposing `/api/chat` (widget) and `/conversations/*`.
    - Orchestrator: persists messages, calls the fallback chain, queues sentiment.
    - Agents: `greeting`, `question`, `help`, `general`.
    - Data: SQLAlchemy (async) over SQLite by default (`chatit.db`).
    """,
)


BACKEND_COMPONENTS = section(
    "3. Backend Components",
    """
    app/
      - main.py: FastAPI app, routes, CORS, background tasks.
      - controller.py: ConversationOrchestrator (chat UI + widget flows).
      - fallback.py: native -> instruction -> generic reply tiers.
      - retrieval.py / rerank.py: substring retrieval and keyword scoring.
      - scheduler.py: per-request task queue drained after the response.
      - config.py / errors.py: env-driven settings, domain exceptions.

    agents/
      - base_agent.py: interface shared by the four reply composers.

    nlu/
      - rules.py: regex intent classifier.
      - keywords.py / topics.py: keyword, topic and capability extraction.
      - sentiment.py: keyword-bag sentiment tagger and aggregation.
    """,
)


DATA_AND_PERSISTENCE = section(
    "4. Data & Persistence",
    """
    - Tables: chatbots, documents, conversations, messages, sentiment_records.
    - `data/store.py` is the only module issuing queries; each call opens its
      own AsyncSession.
    - Only documents with status `processed` are visible to retrieval, and only
      the first DOCUMENT_FETCH_LIMIT of them per chatbot.
    """,
)


NLU_AND_ROUTING = section(
    "5. NLU & Agent Routing",
    """
    - Intent groups are tried in the order greeting, question, help; the first
      group with a matching regex wins, otherwise `general`.
    - "help me" therefore lands on the greeting agent.
    - Each intent maps to one agent in `fallback.AGENT_MAP`.
    """,
)


FALLBACK_CHAIN = section(
    "6. Fallback Chain",
    """
    - native (agents, confidence 0.2-0.9), instruction (0.6), generic (0.4).
    - A tier is skipped only when it raises or returns blank text.
    - A missing chatbot is answered by the native tier with a fixed apology.
    """,
)


SENTIMENT = section(
    "7. Sentiment",
    """
    - Every user message is tagged positive/negative/neutral after the reply.
    - Tagging runs at most once per message and never affects the reply.
    - `GET /chatbots/{id}/sentiment` aggregates percentages and a -10..10 score.
    """,
)


CONFIG_ENV = section(
    "8. Configuration & Environment",
    """
    - `.env` compatible; keys: DATABASE_URL, LOG_LEVEL, CORS_ORIGINS,
      DOCUMENT_FETCH_LIMIT, SEARCH_RESULT_LIMIT, SENTIMENT_DELAY_MS.
    - Defaults defined in `chatit/app/config.py`.
    """,
)


DATA_LIFECYCLE = section(
    "9. Data Lifecycle",
    """
    - Seed a demo bot: `python -m chatit.scripts.seed_demo --owner <user>`.
    - Ingest text/markdown: `python -m chatit.scripts.ingest_documents --chatbot-id N --input-dir docs/`.
    - Deleting a conversation removes its messages and sentiment records.
    """,
)


TESTING = section(
    "10. Testing Strategy",
    """
    - unittest-style cases under `/tests`, collected by pytest.
    - Store-backed tests run against in-memory SQLite; API tests use a
      throwaway SQLite file and FastAPI's TestClient.
    - `python tests/run_tests.py --all` wraps the pytest invocation.
    """,
)


OBSERVABILITY = section(
    "11. Observability",
    """
    - Logs via `utils/logger.py`, tagged [WORKFLOW], [FALLBACK], [SENTIMENT],
      [SCHEDULER], [WIDGET] and [RETRIEVAL].
    - Tier failures are logged as warnings; background failures as errors.
    """,
)


DEPLOYMENT = section(
    "12. Deployment",
    """
    - Run locally via `uvicorn chatit.app.main:app --reload`.
    - Identity is read from the `X-User-Id` header set by the auth proxy.
    """,
)


def as_text() -> str:
    return "\n".join(
        [
            SYSTEM_OVERVIEW,
            ARCHITECTURE,
            BACKEND_COMPONENTS,
            DATA_AND_PERSISTENCE,
            NLU_AND_ROUTING,
            FALLBACK_CHAIN,
            SENTIMENT,
            CONFIG_ENV,
            DATA_LIFECYCLE,
            TESTING,
            OBSERVABILITY,
            DEPLOYMENT,
        ]
    )


def main() -> None:
    print(as_text())


if __name__ == "__main__":
    main()
