"""Shared fixtures for tests that need a real (in-memory) store."""
import unittest

from chatit.data.database import create_tables, make_engine, make_sessionmaker
from chatit.data.models import Chatbot, Document
from chatit.data.store import DataStore
from chatit.schemas.io_models import ChatbotRecord, DocumentRecord, DocumentStatus

OWNER = "owner-1"


def make_doc(doc_id, content, name=None, url=None, chatbot_id=1):
    return DocumentRecord(
        id=doc_id,
        chatbot_id=chatbot_id,
        name=name if name is not None else f"doc-{doc_id}",
        url=url,
        content=content,
        status=DocumentStatus.processed,
    )


def make_bot(name="HelpBot", description=None, instructions="Be helpful and friendly"):
    return ChatbotRecord(id=1, user_id=OWNER, name=name, description=description, instructions=instructions)


class StoreTestCase(unittest.IsolatedAsyncioTestCase):
    """Fresh in-memory database per test."""

    async def asyncSetUp(self):
        self.engine = make_engine("sqlite+aiosqlite://", echo=False)
        await create_tables(self.engine)
        self.store = DataStore(make_sessionmaker(self.engine))

    async def asyncTearDown(self):
        await self.engine.dispose()

    async def add_chatbot(self, name="HelpBot", instructions="Be helpful and friendly",
                          description=None, user_id=OWNER, is_active=True, **extra):
        return await self.store.insert(
            Chatbot,
            user_id=user_id,
            name=name,
            description=description,
            instructions=instructions,
            is_active=is_active,
            **extra,
        )

    async def add_document(self, chatbot_id, content, name="faq.txt", url=None,
                           status=DocumentStatus.processed):
        return await self.store.insert(
            Document,
            chatbot_id=chatbot_id,
            user_id=OWNER,
            name=name,
            url=url,
            content=content,
            status=status,
        )
