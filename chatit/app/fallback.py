#!/usr/bin/env python3
"""
Tiered response generation.

Tiers run in a fixed order and a tier only hands over to the next one when it
raises or produces empty text; low confidence never triggers a fallback.

    native       classify -> retrieve -> compose with the intent's agent
    instruction  template built from the chatbot's instructions
    generic      canned contextual reply, needs no I/O
"""

import enum
from dataclasses import dataclass
from typing import Optional

from ..agents.general_agent import GeneralAgent
from ..agents.greeting_agent import GreetingAgent
from ..agents.help_agent import HelpAgent
from ..agents.question_agent import QuestionAgent
from ..nlu.keywords import extract_keywords
from ..nlu.rules import Intent, classify
from ..schemas.io_models import ChatbotRecord, ComposedReply, GeneratedResponse, TierResult
from ..utils.logger import get_logger
from .config import Config
from .errors import FallbackExhausted
from .retrieval import DocumentRetriever

logger = get_logger()

AGENT_MAP = {
    Intent.greeting: GreetingAgent(),
    Intent.question: QuestionAgent(),
    Intent.help: HelpAgent(),
    Intent.general: GeneralAgent(),
}

MISSING_CHATBOT = (
    "I'm sorry, but I couldn't find the chatbot configuration. Please contact support."
)


class Tier(str, enum.Enum):
    native = "native"
    instruction = "instruction"
    generic = "generic"


TIER_METHODS = {
    Tier.native: "native_search",
    Tier.instruction: "instruction_based",
    Tier.generic: "generic_fallback",
}
INSTRUCTION_CONFIDENCE = 0.6
GENERIC_CONFIDENCE = 0.4


def compose_instruction_reply(message: str, instructions: str, bot_name: str) -> str:
    """Template reply driven by the chatbot's instructions and the message intent."""
    intent = classify(message)

    instruction_concepts = extract_keywords(instructions)
    message_concepts = extract_keywords(message)
    overlap = [
        concept for concept in instruction_concepts
        if any(m in concept or concept in m for m in message_concepts)
    ]

    response = f"Hi! I'm {bot_name}. "

    if intent == Intent.greeting:
        response += f"Nice to meet you! {instructions.split('.')[0]}."
    elif intent == Intent.question:
        if overlap:
            response += f"Great question about {overlap[0]}! Based on my guidelines: {instructions}"
        else:
            response += (
                f"That's an interesting question. While I'm designed to {instructions.lower()}, "
                "I'd be happy to help you with that topic."
            )
    elif intent == Intent.help:
        response += f"I'm here to help! {instructions}"
    elif overlap:
        response += f"I understand you're asking about {overlap[0]}. {instructions}"
    else:
        response += f"Thanks for your message. {instructions} How can I assist you today?"

    return response


def compose_generic_reply(message: str, instructions: str, bot_name: str) -> str:
    """Canned reply picked by domain words in the instructions (case-sensitive)."""
    response = f"Hello! I'm {bot_name}. "

    if "customer service" in instructions or "support" in instructions:
        response += (
            "I'm here to help you with any questions or issues you might have. "
            f"You mentioned: \"{message}\". Could you provide more details so I can assist you better?"
        )
    elif "sales" in instructions or "product" in instructions:
        response += (
            "I'm here to help you learn about our products and services. "
            f"Regarding \"{message}\", I'd be happy to provide more information. "
            "What specific details would you like to know?"
        )
    elif "technical" in instructions:
        response += (
            "I can help you with technical questions and troubleshooting. "
            f"About \"{message}\", let me help you find the right solution. "
            "Can you describe what you're trying to accomplish?"
        )
    else:
        response += (
            f"I understand you're asking about \"{message}\". I'm designed to be helpful and "
            "provide useful information. Could you tell me more about what you're looking for?"
        )

    return response


@dataclass
class _ChainContext:
    chatbot_id: int
    message: str
    chatbot: Optional[ChatbotRecord] = None
    chatbot_loaded: bool = False


class FallbackChain:
    """Runs the tiers in order until one yields non-empty text."""

    def __init__(self, store, retriever: DocumentRetriever = None):
        self.store = store
        self.retriever = retriever or DocumentRetriever(store)
        self.tiers = (
            (Tier.native, self._native),
            (Tier.instruction, self._instruction),
            (Tier.generic, self._generic),
        )

    async def generate(self, chatbot_id, message: str) -> GeneratedResponse:
        ctx = _ChainContext(chatbot_id=chatbot_id, message=message)
        errors = []

        for tier, run in self.tiers:
            result = await self._run_tier(tier, run, ctx)
            if result.ok:
                if errors:
                    logger.info(f"[FALLBACK] chatbot={chatbot_id} answered by tier '{tier.value}'")
                return GeneratedResponse(
                    text=result.reply.text,
                    confidence=result.reply.confidence,
                    sources=result.reply.sources,
                    tier=tier.value,
                    method=result.method,
                )
            errors.append(f"{tier.value}: {result.error or 'empty reply'}")

        raise FallbackExhausted(errors)

    async def _run_tier(self, tier: Tier, run, ctx: _ChainContext) -> TierResult:
        try:
            reply = await run(ctx)
        except Exception as e:
            logger.warning(f"[FALLBACK] tier '{tier.value}' failed: {e!r}")
            return TierResult(tier=tier.value, error=repr(e))
        return TierResult(tier=tier.value, reply=reply, method=TIER_METHODS[tier])

    async def _load_chatbot(self, ctx: _ChainContext) -> Optional[ChatbotRecord]:
        if not ctx.chatbot_loaded:
            ctx.chatbot = await self.store.get_chatbot(ctx.chatbot_id)
            ctx.chatbot_loaded = True
        return ctx.chatbot

    async def _native(self, ctx: _ChainContext) -> ComposedReply:
        chatbot = await self._load_chatbot(ctx)
        if chatbot is None:
            return ComposedReply(text=MISSING_CHATBOT, confidence=0.0)

        documents = await self.retriever.search(ctx.chatbot_id, ctx.message, limit=Config.SEARCH_RESULT_LIMIT)
        intent = classify(ctx.message)
        logger.info(f"[WORKFLOW] intent={intent.value} documents={len(documents)}")
        return AGENT_MAP[intent].handle(ctx.message, chatbot, documents)

    async def _instruction(self, ctx: _ChainContext) -> ComposedReply:
        chatbot = await self._load_chatbot(ctx)
        instructions, bot_name = self._persona(chatbot)
        text = compose_instruction_reply(ctx.message, instructions, bot_name)
        return ComposedReply(text=text, confidence=INSTRUCTION_CONFIDENCE)

    async def _generic(self, ctx: _ChainContext) -> ComposedReply:
        # Uses only what earlier tiers already loaded
        chatbot = ctx.chatbot
        bot_name = (chatbot.name if chatbot else None) or Config.DEFAULT_BOT_NAME
        instructions = (chatbot.instructions if chatbot else None) or ""
        text = compose_generic_reply(ctx.message, instructions, bot_name)
        return ComposedReply(text=text, confidence=GENERIC_CONFIDENCE)

    @staticmethod
    def _persona(chatbot: Optional[ChatbotRecord]):
        if chatbot is None:
            return Config.DEFAULT_INSTRUCTIONS, Config.DEFAULT_BOT_NAME
        return (
            chatbot.instructions or Config.DEFAULT_INSTRUCTIONS,
            chatbot.name or Config.DEFAULT_BOT_NAME,
        )
