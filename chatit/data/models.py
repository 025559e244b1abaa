import time

from sqlalchemy import JSON, Boolean, Column, Enum, Float, ForeignKey, Integer, String, Text

from ..schemas.io_models import DocumentStatus, MessageRole, SentimentLabel
from .database import Base


def now_ms() -> int:
    return int(time.time() * 1000)


class Chatbot(Base):
    __tablename__ = "chatbots"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, index=True, nullable=False)  # owning account
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    instructions = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    widget_config = Column(JSON, nullable=True)


class Document(Base):
    __tablename__ = "documents"

    id = Column(Integer, primary_key=True, index=True)
    # Soft reference, no FK: documents are deleted independently of their chatbot
    chatbot_id = Column(Integer, index=True, nullable=False)
    user_id = Column(String, nullable=True)
    name = Column(String, nullable=False, default="Uploaded Document")
    url = Column(String, nullable=True)
    content = Column(Text, nullable=True)
    type = Column(String, nullable=False, default="text")
    size = Column(Integer, nullable=True)
    status = Column(Enum(DocumentStatus), nullable=False, default=DocumentStatus.processing)
    uploaded_at = Column(Integer, nullable=False, default=now_ms)


class Conversation(Base):
    __tablename__ = "conversations"

    id = Column(Integer, primary_key=True, index=True)
    chatbot_id = Column(Integer, index=True, nullable=False)
    user_id = Column(String, index=True, nullable=True)
    session_id = Column(String, index=True, nullable=True)
    title = Column(String, nullable=False, default="New Conversation")
    status = Column(String, nullable=True, default="active")
    source = Column(String, nullable=True)
    created_at = Column(Integer, nullable=False, default=now_ms)


class Message(Base):
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, index=True)
    conversation_id = Column(Integer, ForeignKey("conversations.id"), index=True, nullable=False)
    role = Column(Enum(MessageRole), nullable=False)
    content = Column(Text, nullable=False)
    timestamp = Column(Integer, nullable=False, default=now_ms)


class SentimentRecord(Base):
    __tablename__ = "sentiment_records"

    id = Column(Integer, primary_key=True, index=True)
    conversation_id = Column(Integer, ForeignKey("conversations.id"), index=True, nullable=False)
    message_id = Column(Integer, ForeignKey("messages.id"), nullable=False)
    sentiment = Column(Enum(SentimentLabel), nullable=False)
    score = Column(Float, nullable=False, default=0.0)
    analyzed_at = Column(Integer, nullable=False, default=now_ms)
