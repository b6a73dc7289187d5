from typing import Dict, List
import uuid
import logging
from sqlalchemy import or_, and_
from sqlalchemy.orm import Session

from ringconnect.core.exceptions import InvalidOperationError, NotFoundError
from ringconnect.db.time import utcnow
from ringconnect.modules.messages.models.message import ChatMessage
from ringconnect.modules.messages.schemas.message import (
    ChatMessage as ChatMessageSchema, Conversation, MessageCreate
)
from ringconnect.modules.notifications.services.notification_events import create_chat_message_notification
from ringconnect.modules.profiles.services.user import get_user, get_user_summaries
from ringconnect.modules.realtime.hub import realtime_hub

logger = logging.getLogger(__name__)

def send_message(db: Session, message_in: MessageCreate, sender_id: str) -> ChatMessage:
    """
    Store a direct message and push it to the receiver's live channel.

    Raises:
        InvalidOperationError: messaging yourself
        NotFoundError: the receiver does not exist
    """
    if message_in.receiver_id == sender_id:
        raise InvalidOperationError("You cannot send a message to yourself")
    if not get_user(db, message_in.receiver_id):
        raise NotFoundError("User", message_in.receiver_id)

    message = ChatMessage(
        id=str(uuid.uuid4()),
        sender_id=sender_id,
        **message_in.model_dump(),
    )
    db.add(message)
    db.commit()
    db.refresh(message)
    logger.info(f"User {sender_id} sent message {message.id} to {message.receiver_id}")

    realtime_hub.publish("chat_messages", ChatMessageSchema.model_validate(message))
    create_chat_message_notification(db, message.receiver_id, sender_id)
    return message

def _between(user_a: str, user_b: str):
    return or_(
        and_(ChatMessage.sender_id == user_a, ChatMessage.receiver_id == user_b),
        and_(ChatMessage.sender_id == user_b, ChatMessage.receiver_id == user_a),
    )

def get_conversation(db: Session, viewer_id: str, other_id: str, skip: int = 0, limit: int = 100) -> List[ChatMessage]:
    """
    Messages between two users, oldest first. Unread messages the viewer
    received in this conversation are marked read.
    """
    marked = (
        db.query(ChatMessage)
        .filter(
            ChatMessage.sender_id == other_id,
            ChatMessage.receiver_id == viewer_id,
            ChatMessage.read_at.is_(None),
        )
        .update({"read_at": utcnow()}, synchronize_session=False)
    )
    if marked:
        db.commit()
        logger.debug(f"Marked {marked} messages from {other_id} to {viewer_id} as read")

    return (
        db.query(ChatMessage)
        .filter(_between(viewer_id, other_id))
        .order_by(ChatMessage.created_at.asc(), ChatMessage.id)
        .offset(skip)
        .limit(limit)
        .all()
    )

def get_conversations(db: Session, viewer_id: str) -> List[Conversation]:
    """Latest message per counterpart, most recent conversation first"""
    messages = (
        db.query(ChatMessage)
        .filter(or_(ChatMessage.sender_id == viewer_id, ChatMessage.receiver_id == viewer_id))
        .order_by(ChatMessage.created_at.desc(), ChatMessage.id.desc())
        .all()
    )

    latest: Dict[str, ChatMessage] = {}
    unread: Dict[str, int] = {}
    for message in messages:
        other_id = message.receiver_id if message.sender_id == viewer_id else message.sender_id
        latest.setdefault(other_id, message)
        if message.receiver_id == viewer_id and message.read_at is None:
            unread[other_id] = unread.get(other_id, 0) + 1

    users = get_user_summaries(db, latest.keys())
    return [
        Conversation(
            user=users.get(other_id),
            last_message=ChatMessageSchema.model_validate(message),
            unread_count=unread.get(other_id, 0),
        )
        for other_id, message in latest.items()
    ]

def count_unread_messages(db: Session, viewer_id: str) -> int:
    return db.query(ChatMessage).filter(
        ChatMessage.receiver_id == viewer_id,
        ChatMessage.read_at.is_(None),
    ).count()
