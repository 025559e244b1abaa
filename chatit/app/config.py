#!/usr/bin/env python3
"""
Configuration management for the ChatIt backend.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

class Config:
    """Configuration class for the application."""

    # Database Configuration
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./chatit.db")
    DATABASE_ECHO = os.getenv("DATABASE_ECHO", "false").lower() in ("1", "true", "yes")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Retrieval Configuration
    DOCUMENT_FETCH_LIMIT = int(os.getenv("DOCUMENT_FETCH_LIMIT", 100))
    SEARCH_RESULT_LIMIT = int(os.getenv("SEARCH_RESULT_LIMIT", 10))
    RELEVANT_CONTENT_LIMIT = 3
    MIN_CONTENT_LENGTH = 20

    # Persona defaults used when a chatbot leaves these fields blank
    DEFAULT_BOT_NAME = "AI Assistant"
    DEFAULT_INSTRUCTIONS = "Be helpful and friendly"

    # Sentiment tagging runs after the reply is sent
    SENTIMENT_DELAY_MS = int(os.getenv("SENTIMENT_DELAY_MS", 0))

    # Widget embedding (comma separated, "*" for any origin)
    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    @classmethod
    def validate(cls):
        """Validate that all required configuration is present."""
        problems = []

        if not cls.DATABASE_URL:
            problems.append("DATABASE_URL")
        if cls.DOCUMENT_FETCH_LIMIT < 1:
            problems.append("DOCUMENT_FETCH_LIMIT must be positive")
        if cls.SEARCH_RESULT_LIMIT < 1:
            problems.append("SEARCH_RESULT_LIMIT must be positive")
        if cls.SENTIMENT_DELAY_MS < 0:
            problems.append("SENTIMENT_DELAY_MS must not be negative")

        if problems:
            raise ValueError(f"Invalid configuration: {', '.join(problems)}")

        return True

# Validate configuration on import
Config.validate()
