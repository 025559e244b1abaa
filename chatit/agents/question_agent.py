"""Question Agent: answers from the best keyword match in the retrieved documents."""
from typing import Sequence

from ..app.rerank import best_candidate, summarize
from ..nlu.keywords import extract_keywords
from ..schemas.io_models import ChatbotRecord, ComposedReply, DocumentRecord
from .base_agent import BaseAgent

NO_INFORMATION = (
    "I understand you're asking about something, but I don't have specific information "
    "about that topic in my knowledge base. Could you provide more details or ask about "
    "something else I might be able to help with?"
)
UNSURE = (
    "I found some related information, but I'm not sure if it directly answers your "
    "question. Could you be more specific about what you're looking for?"
)
RELATED_TOPICS = 2


class QuestionAgent(BaseAgent):
    name = "question"

    def handle(self, message: str, chatbot: ChatbotRecord, documents: Sequence[DocumentRecord]) -> ComposedReply:
        relevant = self.relevant_content(documents)
        if not relevant:
            return self._reply(NO_INFORMATION, 0.3)

        keywords = extract_keywords(message)
        best = best_candidate(relevant, keywords)
        if best is None or best.score <= 0:
            return self._reply(UNSURE, 0.5, self._sources(relevant[:RELATED_TOPICS]))

        match = best.document
        summary = summarize(match.text, keywords)
        response = f"Based on my knowledge base, here's what I found:\n\n{summary}"

        if match.url:
            response += f"\n\nFor more details, you can check: {match.url}"

        related = [d.name or "related topic" for d in relevant if d.id != match.id][:RELATED_TOPICS]
        if related:
            response += f"\n\nYou might also be interested in: {', '.join(related)}."

        return self._reply(response, 0.8, [match.display_name])
