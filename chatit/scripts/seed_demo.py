#!/usr/bin/env python3
"""
Create the demo support chatbot used for widget demonstrations.

Usage:
    python -m chatit.scripts.seed_demo --owner demo-user
"""

import argparse
import asyncio

from ..data.database import create_tables
from ..data.models import Chatbot
from ..data.store import DataStore

DEMO_NAME = "Demo Support Bot"
DEMO_DESCRIPTION = "A helpful customer support chatbot for demonstrations"
DEMO_INSTRUCTIONS = """You are a friendly and helpful customer support assistant for ChatIt, a chatbot platform. Your role is to:

1. Greet users warmly and professionally
2. Answer questions about our chatbot platform and services
3. Help with integration, setup, and technical questions
4. Provide information about pricing and features
5. Assist with widget customization and embedding
6. If you don't know something specific, offer to connect them with our team

Maintain a friendly, professional tone and be concise in your responses."""


async def seed(store: DataStore, owner: str) -> int:
    return await store.insert(
        Chatbot,
        user_id=owner,
        name=DEMO_NAME,
        description=DEMO_DESCRIPTION,
        instructions=DEMO_INSTRUCTIONS,
        is_active=True,
    )


def main():
    parser = argparse.ArgumentParser(description="Create the demo chatbot")
    parser.add_argument("--owner", default="demo-user", help="Owning account id")
    args = parser.parse_args()

    async def run():
        await create_tables()
        chatbot_id = await seed(DataStore(), args.owner)
        print(f"Demo chatbot created with id {chatbot_id}")
        print(f'<div data-chatit-widget="{chatbot_id}"></div>')

    asyncio.run(run())


if __name__ == "__main__":
    main()
