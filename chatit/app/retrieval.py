#!/usr/bin/env python3
"""
Retrieval module for the chat backend.

Plain case-insensitive substring search over a chatbot's processed documents.
Only the first Config.DOCUMENT_FETCH_LIMIT processed documents are examined;
matches beyond that window are never returned.
"""

from typing import List

from ..schemas.io_models import DocumentRecord
from ..utils.logger import get_logger
from .config import Config

logger = get_logger()


class DocumentRetriever:
    """Substring retriever backed by the document store."""

    def __init__(self, store, fetch_limit: int = None):
        self.store = store
        self.fetch_limit = fetch_limit or Config.DOCUMENT_FETCH_LIMIT

    async def search(self, chatbot_id, query: str, limit: int = None) -> List[DocumentRecord]:
        """
        Find documents whose content contains the whole query.

        Args:
            chatbot_id: Chatbot whose corpus is searched
            query: Raw user text, matched as one lowercase substring
            limit: Maximum number of documents to return

        Returns:
            Matching documents in store order
        """
        limit = limit or Config.SEARCH_RESULT_LIMIT
        documents = await self.store.processed_documents(chatbot_id, take=self.fetch_limit)

        query_lower = (query or "").lower()
        matches = [
            doc for doc in documents
            if doc.content and query_lower in doc.content.lower()
        ]
        logger.debug(
            f"[RETRIEVAL] chatbot={chatbot_id} scanned={len(documents)} matched={len(matches)}"
        )
        return matches[:limit]
