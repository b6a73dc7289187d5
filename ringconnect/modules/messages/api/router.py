from typing import Any, List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ringconnect.core.exceptions import RingConnectError, to_http_exception
from ringconnect.db.session import get_db
from ringconnect.deps import get_current_user
from ringconnect.modules.profiles.models.user import User
from ringconnect.modules.messages.schemas.message import (
    ChatMessage as ChatMessageSchema, ConversationList, MessageCreate, UnreadCount
)
from ringconnect.modules.messages.services.message import (
    count_unread_messages, get_conversation, get_conversations, send_message
)

router = APIRouter()

@router.post("", response_model=ChatMessageSchema, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=ChatMessageSchema, status_code=status.HTTP_201_CREATED)
def create_message(
    *,
    db: Session = Depends(get_db),
    message_in: MessageCreate,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Send a direct message"""
    try:
        return send_message(db, message_in, current_user.id)
    except RingConnectError as e:
        raise to_http_exception(e)

@router.get("/conversations", response_model=ConversationList)
def read_conversations(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    return ConversationList(items=get_conversations(db, current_user.id))

@router.get("/unread-count", response_model=UnreadCount)
def read_unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    return UnreadCount(count=count_unread_messages(db, current_user.id))

@router.get("/with/{user_id}", response_model=List[ChatMessageSchema])
def read_conversation(
    *,
    db: Session = Depends(get_db),
    user_id: str,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    current_user: User = Depends(get_current_user),
) -> Any:
    """Conversation with a user, oldest first; marks received messages as read"""
    return get_conversation(db, current_user.id, user_id, skip, limit)
