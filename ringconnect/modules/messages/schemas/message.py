from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ringconnect.modules.profiles.schemas.user import UserSummary

class MessageCreate(BaseModel):
    receiver_id: str
    message: str = Field(min_length=1, max_length=5000)
    gym_id: Optional[str] = None

    @field_validator("message")
    @classmethod
    def message_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Message cannot be empty")
        return v

class ChatMessage(BaseModel):
    """Chat message model returned to client"""
    id: str
    sender_id: str
    receiver_id: str
    gym_id: Optional[str] = None
    message: str
    read_at: Optional[datetime] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

class Conversation(BaseModel):
    """Latest message exchanged with one counterpart"""
    user: Optional[UserSummary] = None
    last_message: ChatMessage
    unread_count: int = 0

class ConversationList(BaseModel):
    items: List[Conversation]

class UnreadCount(BaseModel):
    count: int
