"""Greeting Agent: introduces the bot and a few topics from its documents."""
from typing import Sequence

from ..nlu.topics import extract_topics
from ..schemas.io_models import ChatbotRecord, ComposedReply, DocumentRecord
from .base_agent import BaseAgent

DEFAULT_DESCRIPTION = "I'm here to help you!"
GREETING_TOPICS = 3


class GreetingAgent(BaseAgent):
    name = "greeting"

    def handle(self, message: str, chatbot: ChatbotRecord, documents: Sequence[DocumentRecord]) -> ComposedReply:
        relevant = self.relevant_content(documents)
        description = chatbot.description or DEFAULT_DESCRIPTION

        response = f"Hello! I'm {self.bot_name(chatbot)}. {description}"

        topics = [t for doc in relevant for t in extract_topics(doc.text)][:GREETING_TOPICS]
        if topics:
            response += f"\n\nI can help you with topics like: {', '.join(topics)}."

        response += "\n\nWhat would you like to know?"
        return self._reply(response, 0.9, self._sources(relevant))
