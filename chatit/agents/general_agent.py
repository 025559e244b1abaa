"""General Agent: summarizes the first retrieved document for free-form messages."""
from typing import Sequence

from ..app.rerank import summarize
from ..nlu.keywords import extract_keywords
from ..schemas.io_models import ChatbotRecord, ComposedReply, DocumentRecord
from .base_agent import BaseAgent

NO_INFORMATION = (
    "I understand what you're saying, but I don't have specific information about that "
    "in my current knowledge base. Is there something else I can help you with?"
)


class GeneralAgent(BaseAgent):
    name = "general"

    def handle(self, message: str, chatbot: ChatbotRecord, documents: Sequence[DocumentRecord]) -> ComposedReply:
        relevant = self.relevant_content(documents)
        if not relevant:
            return self._reply(NO_INFORMATION, 0.2)

        # Retrieval order decides; no re-scoring here
        top = relevant[0]
        summary = summarize(top.text, extract_keywords(message))
        response = f"Here's some relevant information I found:\n\n{summary}"

        if len(relevant) > 1:
            response += "\n\nI also have information about related topics if you'd like to explore further."

        return self._reply(response, 0.7, [top.display_name])
