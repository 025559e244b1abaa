"""Controller / Orchestrator for conversations.

Persists the user message, asks the fallback chain for a reply, persists the
reply and queues sentiment tagging for after the reply has gone out. Serves
both the authenticated chat UI (explicit conversation ids) and the embeddable
widget (conversations looked up by session id).
"""
import asyncio
from typing import Optional

from ..data.models import Conversation, Message, SentimentRecord
from ..nlu.sentiment import summarize_sentiment, tag
from ..schemas.io_models import ConversationThread, MessageOut, MessageRole, SentimentSummary
from ..utils.logger import get_logger
from .config import Config
from .errors import AccessDenied, ChatitError, NotFound
from .fallback import FallbackChain
from .scheduler import TaskQueue

logger = get_logger()

CANNOT_PROCESS = "I'm sorry, I couldn't process your request."
GENERATION_TROUBLE = (
    "I'm sorry, I'm having trouble processing your request right now. Please try again in a moment."
)
WIDGET_TROUBLE = (
    "I'm sorry, I'm having trouble processing your request right now. Please try again."
)
ANONYMOUS_SESSION = "anonymous"


async def analyze_sentiment(store, conversation_id, message_id, content: str):
    """Tag one user message and store the result. Never raises."""
    try:
        result = tag(content)
        await store.insert(
            SentimentRecord,
            conversation_id=conversation_id,
            message_id=message_id,
            sentiment=result.sentiment,
            score=result.score,
        )
        logger.info(f"[SENTIMENT] message={message_id} -> {result.sentiment.value} ({result.score})")
    except Exception:
        logger.exception(f"[SENTIMENT] analysis failed for message {message_id}")


class ConversationOrchestrator:
    def __init__(self, store, chain: FallbackChain = None):
        self.store = store
        self.chain = chain or FallbackChain(store)
        self._background = set()

    async def handle_message(self, chatbot_id, text: str, conversation_id=None,
                             session_id: Optional[str] = None, scheduler: TaskQueue = None) -> str:
        """Single entry point: explicit conversation for the chat UI, session lookup for the widget."""
        if conversation_id is not None:
            return await self._send_guarded(conversation_id, text, scheduler=scheduler, chatbot_id=chatbot_id)
        return await self.handle_widget_message(chatbot_id, text, session_id=session_id, scheduler=scheduler)

    async def send_message(self, conversation_id, content: str, scheduler: TaskQueue = None,
                           chatbot_id=None) -> str:
        if not content:
            raise ValueError("Message content must not be empty")

        conversation = await self.store.get_conversation(conversation_id)
        if conversation is None or (chatbot_id is not None and conversation.chatbot_id != chatbot_id):
            return CANNOT_PROCESS

        logger.info(f"[WORKFLOW] 1. conversation={conversation_id} received: '{content}'")
        user_message_id = await self.store.insert(
            Message, conversation_id=conversation_id, role=MessageRole.user, content=content
        )

        logger.info("[WORKFLOW] 2. generating reply...")
        reply = await self.generate_reply(conversation.chatbot_id, content)

        await self.store.insert(
            Message, conversation_id=conversation_id, role=MessageRole.assistant, content=reply
        )
        logger.info("[WORKFLOW] 3. reply stored, scheduling sentiment")

        self._schedule_sentiment(scheduler, conversation_id, user_message_id, content)
        return reply

    async def _send_guarded(self, conversation_id, content: str, scheduler: TaskQueue = None,
                            chatbot_id=None) -> str:
        """send_message for the authenticated flow; only caller errors propagate."""
        try:
            return await self.send_message(conversation_id, content, scheduler=scheduler, chatbot_id=chatbot_id)
        except (ValueError, ChatitError):
            raise
        except Exception:
            logger.exception(f"[WORKFLOW] error handling message for conversation {conversation_id}")
            return GENERATION_TROUBLE

    async def generate_reply(self, chatbot_id, content: str) -> str:
        try:
            response = await self.chain.generate(chatbot_id, content)
        except Exception:
            logger.exception(f"[WORKFLOW] reply generation failed for chatbot {chatbot_id}")
            return GENERATION_TROUBLE

        logger.info(
            f"[WORKFLOW] reply confidence={response.confidence} tier={response.tier} method={response.method}"
        )
        return response.text

    async def handle_widget_message(self, chatbot_id, message: str, session_id: Optional[str] = None,
                                    scheduler: TaskQueue = None) -> str:
        session_id = session_id or ANONYMOUS_SESSION
        try:
            conversation = await self.store.conversation_by_session(session_id, chatbot_id=chatbot_id)
            if conversation is None:
                conversation_id = await self._create_widget_conversation(chatbot_id, session_id)
            else:
                conversation_id = conversation.id
            return await self.send_message(conversation_id, message, scheduler=scheduler)
        except Exception:
            logger.exception(f"[WIDGET] error handling message for chatbot {chatbot_id}")
            return WIDGET_TROUBLE

    async def _create_widget_conversation(self, chatbot_id, session_id: str):
        chatbot = await self.store.get_chatbot(chatbot_id)
        if chatbot is None:
            raise NotFound("Chatbot not found")
        return await self.store.insert(
            Conversation,
            chatbot_id=chatbot_id,
            user_id=chatbot.user_id,
            title="Widget Conversation",
            status="active",
            session_id=session_id,
            source="widget",
        )

    def _schedule_sentiment(self, scheduler: Optional[TaskQueue], conversation_id, message_id, content: str):
        owns_queue = scheduler is None
        queue = TaskQueue() if owns_queue else scheduler
        queue.run_after(
            Config.SENTIMENT_DELAY_MS,
            analyze_sentiment,
            store=self.store,
            conversation_id=conversation_id,
            message_id=message_id,
            content=content,
        )
        if owns_queue:
            # No caller-provided queue: drain detached from the reply path
            task = asyncio.get_running_loop().create_task(queue.drain())
            self._background.add(task)
            task.add_done_callback(self._background.discard)

    # --- authenticated conversation management ---

    async def create_conversation(self, chatbot_id, user_id: str, title: Optional[str] = None):
        chatbot = await self.store.get_chatbot(chatbot_id)
        if chatbot is None or chatbot.user_id != user_id:
            raise AccessDenied("Chatbot not found or access denied")
        return await self.store.insert(
            Conversation,
            chatbot_id=chatbot_id,
            user_id=user_id,
            title=title or "New Conversation",
            status="active",
            source="chat_ui",
        )

    async def _owned_conversation(self, conversation_id, user_id: str) -> Conversation:
        conversation = await self.store.get_conversation(conversation_id)
        if conversation is None or conversation.user_id != user_id:
            raise AccessDenied("Conversation not found or access denied")
        return conversation

    async def get_thread(self, conversation_id, user_id: str) -> ConversationThread:
        conversation = await self._owned_conversation(conversation_id, user_id)
        messages = await self.store.messages_for_conversation(conversation_id)
        return ConversationThread(
            id=conversation.id,
            chatbot_id=conversation.chatbot_id,
            title=conversation.title,
            status=conversation.status,
            source=conversation.source,
            messages=[MessageOut.model_validate(m) for m in messages],
        )

    async def send_user_message(self, conversation_id, user_id: str, content: str,
                                scheduler: TaskQueue = None) -> str:
        await self._owned_conversation(conversation_id, user_id)
        return await self._send_guarded(conversation_id, content, scheduler=scheduler)

    async def delete_conversation(self, conversation_id, user_id: str) -> int:
        await self._owned_conversation(conversation_id, user_id)
        removed = await self.store.delete_messages(conversation_id)
        await self.store.delete(Conversation, conversation_id)
        logger.info(f"[WORKFLOW] deleted conversation {conversation_id} with {removed} messages")
        return removed

    async def sentiment_summary(self, chatbot_id, user_id: str) -> SentimentSummary:
        chatbot = await self.store.get_chatbot(chatbot_id)
        if chatbot is None or chatbot.user_id != user_id:
            raise AccessDenied("Chatbot not found or access denied")
        return summarize_sentiment(await self.store.sentiments_for_chatbot(chatbot_id))
