"""Exceptions raised across the chat backend."""


class ChatitError(Exception):
    """Base class for errors raised by this package."""


class NotFound(ChatitError):
    pass


class AccessDenied(ChatitError):
    """Caller does not own the chatbot or conversation it asked for."""


class FallbackExhausted(ChatitError):
    """Every response tier failed, including the generic one."""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__("All response tiers failed: " + "; ".join(self.errors))
