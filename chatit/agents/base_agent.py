"""BaseAgent interface for all reply composers."""
from abc import ABC, abstractmethod
from typing import List, Sequence

from ..app.config import Config
from ..schemas.io_models import ChatbotRecord, ComposedReply, DocumentRecord

class BaseAgent(ABC):
    name: str = "base"

    @abstractmethod
    def handle(self, message: str, chatbot: ChatbotRecord, documents: Sequence[DocumentRecord]) -> ComposedReply:
        """Render the reply for one intent from the retrieved documents."""
        ...

    @staticmethod
    def relevant_content(documents: Sequence[DocumentRecord]) -> List[DocumentRecord]:
        """Documents with usable text, capped to the few a reply draws on."""
        usable = [d for d in documents if len(d.text) > Config.MIN_CONTENT_LENGTH]
        return usable[:Config.RELEVANT_CONTENT_LIMIT]

    @staticmethod
    def bot_name(chatbot: ChatbotRecord) -> str:
        return chatbot.name or Config.DEFAULT_BOT_NAME

    @staticmethod
    def _sources(documents: Sequence[DocumentRecord]) -> List[str]:
        return [d.display_name for d in documents]

    def _reply(self, text: str, confidence: float, sources: Sequence[str] = ()) -> ComposedReply:
        return ComposedReply(text=text, confidence=confidence, sources=list(sources))
