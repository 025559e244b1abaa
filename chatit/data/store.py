"""Async document-store facade over SQLAlchemy.

Exposes the get/insert/patch/delete primitives plus the handful of indexed
queries the chat pipeline needs. Every call opens its own short session, so a
store instance can be shared by concurrent requests without locking.
"""
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import async_sessionmaker

from ..app.errors import NotFound
from ..schemas.io_models import ChatbotRecord, DocumentRecord, DocumentStatus
from .database import SessionLocal
from .models import Chatbot, Conversation, Document, Message, SentimentRecord


class DataStore:
    def __init__(self, sessionmaker: Optional[async_sessionmaker] = None):
        self._sessionmaker = sessionmaker or SessionLocal

    # --- primitives ---

    async def get(self, model, record_id):
        async with self._sessionmaker() as session:
            return await session.get(model, record_id)

    async def insert(self, model, **fields) -> int:
        async with self._sessionmaker() as session:
            row = model(**fields)
            session.add(row)
            await session.commit()
            return row.id

    async def patch(self, model, record_id, **fields):
        async with self._sessionmaker() as session:
            row = await session.get(model, record_id)
            if row is None:
                raise NotFound(f"{model.__tablename__} {record_id} not found")
            for key, value in fields.items():
                setattr(row, key, value)
            await session.commit()
            return row

    async def delete(self, model, record_id) -> bool:
        async with self._sessionmaker() as session:
            row = await session.get(model, record_id)
            if row is None:
                return False
            await session.delete(row)
            await session.commit()
            return True

    # --- chatbots & documents ---

    async def get_chatbot(self, chatbot_id) -> Optional[ChatbotRecord]:
        row = await self.get(Chatbot, chatbot_id)
        return ChatbotRecord.model_validate(row) if row is not None else None

    async def processed_documents(self, chatbot_id, take: int) -> List[DocumentRecord]:
        """Up to `take` processed documents of one chatbot, in insertion order."""
        stmt = (
            select(Document)
            .where(Document.chatbot_id == chatbot_id)
            .where(Document.status == DocumentStatus.processed)
            .order_by(Document.id)
            .limit(take)
        )
        async with self._sessionmaker() as session:
            rows = (await session.scalars(stmt)).all()
        return [DocumentRecord.model_validate(r) for r in rows]

    async def mark_document_processed(self, document_id, content: str):
        return await self.patch(
            Document, document_id,
            content=content,
            size=len(content),
            status=DocumentStatus.processed,
        )

    # --- conversations & messages ---

    async def get_conversation(self, conversation_id) -> Optional[Conversation]:
        return await self.get(Conversation, conversation_id)

    async def conversation_by_session(self, session_id: str, chatbot_id=None) -> Optional[Conversation]:
        stmt = select(Conversation).where(Conversation.session_id == session_id)
        if chatbot_id is not None:
            stmt = stmt.where(Conversation.chatbot_id == chatbot_id)
        stmt = stmt.order_by(Conversation.id).limit(1)
        async with self._sessionmaker() as session:
            return (await session.scalars(stmt)).first()

    async def messages_for_conversation(self, conversation_id) -> List[Message]:
        stmt = (
            select(Message)
            .where(Message.conversation_id == conversation_id)
            .order_by(Message.timestamp, Message.id)
        )
        async with self._sessionmaker() as session:
            return list((await session.scalars(stmt)).all())

    async def delete_messages(self, conversation_id) -> int:
        """Bulk delete a conversation's messages and the sentiment records pointing at them."""
        async with self._sessionmaker() as session:
            await session.execute(
                delete(SentimentRecord).where(SentimentRecord.conversation_id == conversation_id)
            )
            result = await session.execute(
                delete(Message).where(Message.conversation_id == conversation_id)
            )
            await session.commit()
            return result.rowcount or 0

    # --- sentiment ---

    async def sentiments_for_chatbot(self, chatbot_id) -> List[SentimentRecord]:
        stmt = (
            select(SentimentRecord)
            .join(Conversation, SentimentRecord.conversation_id == Conversation.id)
            .where(Conversation.chatbot_id == chatbot_id)
            .order_by(SentimentRecord.id)
        )
        async with self._sessionmaker() as session:
            return list((await session.scalars(stmt)).all())
