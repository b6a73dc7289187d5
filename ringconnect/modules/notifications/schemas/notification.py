from typing import Literal, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict

from ringconnect.modules.profiles.schemas.user import UserSummary

NotificationType = Literal[
    "post_reaction",
    "post_comment",
    "comment_reply",
    "comment_like",
    "user_follow",
    "chat_message",
    "booking_request",
    "booking_update",
    "sparring_request",
    "sparring_update",
]

class NotificationBase(BaseModel):
    type: NotificationType
    content: str
    related_post_id: Optional[str] = None
    related_comment_id: Optional[str] = None
    related_user_id: Optional[str] = None
    related_booking_id: Optional[str] = None
    related_sparring_id: Optional[str] = None

class NotificationCreate(NotificationBase):
    user_id: str
    actor_id: Optional[str] = None  # ID of the user who triggered the notification

class NotificationUpdate(BaseModel):
    read: bool = True

class Notification(NotificationBase):
    """Notification model returned to client"""
    id: str
    user_id: str
    actor_id: Optional[str] = None
    read: bool
    created_at: datetime
    actor: Optional[UserSummary] = None  # User object of the actor

    model_config = ConfigDict(from_attributes=True)

class NotificationCount(BaseModel):
    message: str
    count: int
