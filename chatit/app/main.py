#!/usr/bin/env python3
"""
Main FastAPI application for the ChatIt backend.
"""

import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import BackgroundTasks, Depends, FastAPI, Header, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from ..data.database import create_tables
from ..data.store import DataStore
from ..schemas.io_models import (
    ChatRequest,
    ChatResponse,
    ConversationCreateRequest,
    ConversationCreateResponse,
    ConversationThread,
    MessageRequest,
    MessageResponse,
    PublicChatbotInfo,
    SentimentSummary,
    WidgetConfig,
)
from ..utils.logger import get_logger
from .config import Config
from .controller import ConversationOrchestrator
from .errors import AccessDenied, NotFound
from .scheduler import TaskQueue

logger = get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await create_tables()
    logger.info("Database tables ready")
    yield


# Initialize FastAPI app
app = FastAPI(
    title="ChatIt API",
    description="Rule-based customer support chatbot with an embeddable widget",
    version="1.0.0",
    lifespan=lifespan,
)

# Widgets are embedded on arbitrary customer sites
app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize components
store = DataStore()
orchestrator = ConversationOrchestrator(store)


def get_store() -> DataStore:
    return store


def get_orchestrator() -> ConversationOrchestrator:
    return orchestrator


def current_user(x_user_id: Optional[str] = Header(None)) -> str:
    """Identity forwarded by the auth layer in front of this service."""
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return x_user_id


@app.get("/health")
async def health_check():
    """Health check endpoint for widget connection testing."""
    return {"status": "healthy", "timestamp": int(time.time() * 1000), "service": "chatit-widget"}


@app.post("/api/chat", response_model=ChatResponse)
async def widget_chat(
    request: ChatRequest,
    background: BackgroundTasks,
    orchestrator: ConversationOrchestrator = Depends(get_orchestrator),
):
    """
    Handle one widget message.

    Sentiment tagging is queued per request and drained after the
    response has been sent.
    """
    if request.chatbotId is None or not request.message:
        raise HTTPException(status_code=400, detail="Missing required fields: chatbotId and message")

    queue = TaskQueue()
    reply = await orchestrator.handle_widget_message(
        request.chatbotId, request.message, session_id=request.sessionId, scheduler=queue
    )
    background.add_task(queue.drain)
    return ChatResponse(message=reply, success=True, timestamp=int(time.time() * 1000))


@app.get("/api/chatbot", response_model=PublicChatbotInfo)
async def public_chatbot_info(id: int, store: DataStore = Depends(get_store)):
    """Public chatbot info for widget configuration."""
    chatbot = await store.get_chatbot(id)
    if chatbot is None or not chatbot.is_active:
        raise HTTPException(status_code=404, detail="Chatbot not found")
    widget = WidgetConfig(**chatbot.widget_config) if chatbot.widget_config else WidgetConfig()
    return PublicChatbotInfo(id=chatbot.id, name=chatbot.name, description=chatbot.description, widgetConfig=widget)


@app.post("/conversations", response_model=ConversationCreateResponse)
async def create_conversation(
    request: ConversationCreateRequest,
    user_id: str = Depends(current_user),
    orchestrator: ConversationOrchestrator = Depends(get_orchestrator),
):
    try:
        conversation_id = await orchestrator.create_conversation(request.chatbot_id, user_id, request.title)
    except (AccessDenied, NotFound) as e:
        raise HTTPException(status_code=404, detail=str(e))
    return ConversationCreateResponse(conversation_id=conversation_id)


@app.get("/conversations/{conversation_id}", response_model=ConversationThread)
async def get_conversation(
    conversation_id: int,
    user_id: str = Depends(current_user),
    orchestrator: ConversationOrchestrator = Depends(get_orchestrator),
):
    try:
        return await orchestrator.get_thread(conversation_id, user_id)
    except (AccessDenied, NotFound) as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.post("/conversations/{conversation_id}/messages", response_model=MessageResponse)
async def send_message(
    conversation_id: int,
    request: MessageRequest,
    background: BackgroundTasks,
    user_id: str = Depends(current_user),
    orchestrator: ConversationOrchestrator = Depends(get_orchestrator),
):
    queue = TaskQueue()
    try:
        reply = await orchestrator.send_user_message(conversation_id, user_id, request.content, scheduler=queue)
    except (AccessDenied, NotFound) as e:
        raise HTTPException(status_code=404, detail=str(e))
    background.add_task(queue.drain)
    return MessageResponse(conversation_id=conversation_id, response=reply)


@app.delete("/conversations/{conversation_id}")
async def delete_conversation(
    conversation_id: int,
    user_id: str = Depends(current_user),
    orchestrator: ConversationOrchestrator = Depends(get_orchestrator),
):
    try:
        removed = await orchestrator.delete_conversation(conversation_id, user_id)
    except (AccessDenied, NotFound) as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"deleted": True, "messages_removed": removed}


@app.get("/chatbots/{chatbot_id}/sentiment", response_model=SentimentSummary)
async def chatbot_sentiment(
    chatbot_id: int,
    user_id: str = Depends(current_user),
    orchestrator: ConversationOrchestrator = Depends(get_orchestrator),
):
    try:
        return await orchestrator.sentiment_summary(chatbot_id, user_id)
    except (AccessDenied, NotFound) as e:
        raise HTTPException(status_code=404, detail=str(e))


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
