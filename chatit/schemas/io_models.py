"""Pydantic models for API I/O and the response-generation contracts.

Pipeline stages exchange these plain records instead of ORM rows so the
classifier, scorer and composers stay free of database sessions.
"""
import enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

KNOWLEDGE_BASE_SOURCE = "Knowledge base"


class DocumentStatus(str, enum.Enum):
    processing = "processing"
    processed = "processed"
    failed = "failed"


class MessageRole(str, enum.Enum):
    user = "user"
    assistant = "assistant"
    system = "system"


class SentimentLabel(str, enum.Enum):
    positive = "positive"
    negative = "negative"
    neutral = "neutral"


class DocumentRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    chatbot_id: int
    name: Optional[str] = None
    url: Optional[str] = None
    content: Optional[str] = None
    status: DocumentStatus = DocumentStatus.processing

    @property
    def text(self) -> str:
        return self.content or ""

    @property
    def display_name(self) -> str:
        return self.name or self.url or KNOWLEDGE_BASE_SOURCE


class WidgetConfig(BaseModel):
    primaryColor: str = "#e74c3c"
    position: str = "bottom-right"
    size: str = "medium"
    welcomeMessage: str = "Hi! How can I help you today?"
    placeholder: str = "Type your message..."
    showBranding: bool = True
    borderRadius: int = 12
    fontFamily: str = "system-ui"
    animation: str = "bounce"
    theme: str = "light"


class ChatbotRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    name: Optional[str] = None
    description: Optional[str] = None
    instructions: Optional[str] = None
    is_active: bool = True
    widget_config: Optional[Dict[str, Any]] = None


class Candidate(BaseModel):
    document: DocumentRecord
    score: int = 0


class ComposedReply(BaseModel):
    text: str
    confidence: float = Field(ge=0.0, le=1.0)
    sources: List[str] = Field(default_factory=list)


class TierResult(BaseModel):
    """Outcome of one fallback tier: a reply, or the error that ended it."""
    tier: str
    reply: Optional[ComposedReply] = None
    method: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.reply is not None and bool(self.reply.text.strip())


class GeneratedResponse(BaseModel):
    text: str
    confidence: float
    sources: List[str] = Field(default_factory=list)
    tier: str
    method: str


class SentimentResult(BaseModel):
    sentiment: SentimentLabel
    score: float = Field(ge=-1.0, le=1.0)


class SentimentSummary(BaseModel):
    total: int = 0
    positive_percentage: int = 0
    neutral_percentage: int = 0
    negative_percentage: int = 0
    overall_sentiment: int = 0


# --- HTTP boundary ---

class ChatRequest(BaseModel):
    """Widget chat payload; field names follow the embed script."""
    chatbotId: Optional[int] = None
    message: Optional[str] = None
    sessionId: Optional[str] = None


class ChatResponse(BaseModel):
    message: str
    success: bool = True
    timestamp: int


class ConversationCreateRequest(BaseModel):
    chatbot_id: int
    title: Optional[str] = None


class ConversationCreateResponse(BaseModel):
    conversation_id: int


class MessageRequest(BaseModel):
    content: str = Field(min_length=1)


class MessageResponse(BaseModel):
    conversation_id: int
    response: str


class MessageOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    role: MessageRole
    content: str
    timestamp: int


class ConversationThread(BaseModel):
    id: int
    chatbot_id: int
    title: str
    status: Optional[str] = None
    source: Optional[str] = None
    messages: List[MessageOut] = Field(default_factory=list)


class PublicChatbotInfo(BaseModel):
    id: int
    name: Optional[str] = None
    description: Optional[str] = None
    widgetConfig: WidgetConfig = Field(default_factory=WidgetConfig)
