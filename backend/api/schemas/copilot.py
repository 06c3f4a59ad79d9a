"""
Copilot conversation, chat and feedback schemas.
"""

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from .common import CamelRequest, ORMResponse


class ChatMessage(BaseModel):
    role: Literal["user", "assistant", "system", "tool"]
    content: Any = ""


class ChatRequest(CamelRequest):
    messages: List[ChatMessage] = Field(..., min_length=1)
    conversation_id: Optional[str] = None


class AdvancedChatRequest(ChatRequest):
    context: Dict[str, Any] = Field(default_factory=dict)


class NewspaperRequest(BaseModel):
    messages: List[ChatMessage] = Field(..., min_length=1)


class ConversationCreateRequest(CamelRequest):
    title: str = Field(default="New conversation", min_length=1, max_length=500)
    description: Optional[str] = None
    context_type: Optional[str] = Field(None, max_length=100)


class ConversationResponse(ORMResponse):
    id: str
    user_id: str
    title: str
    description: Optional[str] = None
    context_type: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class ConversationListResponse(BaseModel):
    conversations: List[ConversationResponse]


class ConversationSaveResponse(BaseModel):
    conversation: ConversationResponse


class MessageResponse(ORMResponse):
    id: str
    conversation_id: str
    role: str
    content: str
    tool_calls: Optional[List[Dict[str, Any]]] = None
    created_at: datetime


class MessageListResponse(BaseModel):
    messages: List[MessageResponse]


class FeedbackRequest(CamelRequest):
    message_id: str
    is_positive: bool
    feedback_text: Optional[str] = None
    context: Dict[str, Any] = Field(default_factory=dict)


class FeedbackResponse(BaseModel):
    success: bool = True
    learned: bool
