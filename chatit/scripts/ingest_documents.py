#!/usr/bin/env python3
"""
Document ingestion script for ChatIt.

Loads plain text and markdown files from a directory into one chatbot's
knowledge base and marks them processed so retrieval can see them.

Usage:
    python -m chatit.scripts.ingest_documents --chatbot-id 1 --input-dir docs/
"""

import argparse
import asyncio
import os
from typing import List, Tuple

from ..app.errors import NotFound
from ..data.database import create_tables
from ..data.models import Document
from ..data.store import DataStore
from ..schemas.io_models import DocumentStatus

SUPPORTED_EXTENSIONS = (".txt", ".md")


def collect_files(input_dir: str) -> List[Tuple[str, str]]:
    """
    Read every supported file in a directory, sorted by file name.

    Args:
        input_dir: Directory to scan (not recursive)

    Returns:
        List of (file name, content) pairs; empty files are skipped
    """
    files = []
    for name in sorted(os.listdir(input_dir)):
        path = os.path.join(input_dir, name)
        if not os.path.isfile(path) or not name.lower().endswith(SUPPORTED_EXTENSIONS):
            continue
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
        if content.strip():
            files.append((name, content))
    return files


async def ingest(store: DataStore, chatbot_id: int, files: List[Tuple[str, str]], user_id: str = None) -> List[int]:
    chatbot = await store.get_chatbot(chatbot_id)
    if chatbot is None:
        raise NotFound(f"Chatbot {chatbot_id} not found")

    document_ids = []
    for name, content in files:
        # Insert as processing first, the same path an upload takes
        document_id = await store.insert(
            Document,
            chatbot_id=chatbot_id,
            user_id=user_id or chatbot.user_id,
            name=name,
            content="",
            status=DocumentStatus.processing,
        )
        await store.mark_document_processed(document_id, content)
        document_ids.append(document_id)
        print(f"Ingested {name} as document {document_id} ({len(content)} chars)")
    return document_ids


def main():
    parser = argparse.ArgumentParser(description="Load text documents into a chatbot's knowledge base")
    parser.add_argument("--chatbot-id", type=int, required=True, help="Target chatbot id")
    parser.add_argument("--input-dir", required=True, help="Directory of .txt/.md files")
    args = parser.parse_args()

    files = collect_files(args.input_dir)
    if not files:
        print(f"No {'/'.join(SUPPORTED_EXTENSIONS)} files found in {args.input_dir}")
        return

    async def run():
        await create_tables()
        ids = await ingest(DataStore(), args.chatbot_id, files)
        print(f"Done: {len(ids)} documents ingested")

    try:
        asyncio.run(run())
    except NotFound as e:
        raise SystemExit(str(e))


if __name__ == "__main__":
    main()
