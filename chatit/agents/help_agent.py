"""Help Agent: lists what the bot can do, drawn from its documents."""
from typing import Sequence

from ..nlu.topics import extract_capabilities
from ..schemas.io_models import ChatbotRecord, ComposedReply, DocumentRecord
from .base_agent import BaseAgent

MAX_CAPABILITIES = 5


class HelpAgent(BaseAgent):
    name = "help"

    def handle(self, message: str, chatbot: ChatbotRecord, documents: Sequence[DocumentRecord]) -> ComposedReply:
        relevant = self.relevant_content(documents)
        response = f"I'm {self.bot_name(chatbot)} and I'm here to help! "

        if relevant:
            capabilities = [c for doc in relevant for c in extract_capabilities(doc.text)][:MAX_CAPABILITIES]
            if capabilities:
                response += "Here are some things I can help you with:\n\n"
                for index, capability in enumerate(capabilities, 1):
                    response += f"{index}. {capability}\n"
            else:
                response += "I have access to information about various topics in my knowledge base."
        else:
            response += "I'm ready to answer your questions and provide assistance based on my knowledge."

        response += "\n\nFeel free to ask me anything, and I'll do my best to help!"
        return self._reply(response, 0.9, self._sources(relevant))
