from typing import List, Optional
import uuid
import logging
from sqlalchemy.orm import Session

from ringconnect.modules.notifications.models.notification import Notification
from ringconnect.modules.notifications.schemas.notification import NotificationCreate, NotificationUpdate, Notification as NotificationSchema
from ringconnect.modules.profiles.services.user import get_user_summaries
from ringconnect.modules.realtime.hub import realtime_hub

logger = logging.getLogger(__name__)

def get_notification(db: Session, notification_id: str) -> Optional[Notification]:
    """Get notification by ID"""
    return db.query(Notification).filter(Notification.id == notification_id).first()

def get_user_notifications(db: Session, user_id: str, skip: int = 0, limit: int = 20, unread_only: bool = False) -> List[NotificationSchema]:
    """Get notifications for a user, newest first, with actor summaries"""
    query = db.query(Notification).filter(Notification.user_id == user_id)

    if unread_only:
        query = query.filter(Notification.read == False)  # noqa: E712

    notifications = query.order_by(Notification.created_at.desc()).offset(skip).limit(limit).all()
    actors = get_user_summaries(db, (n.actor_id for n in notifications if n.actor_id))

    result = []
    for notification in notifications:
        item = NotificationSchema.model_validate(notification)
        item.actor = actors.get(notification.actor_id)
        result.append(item)
    return result

def count_unread(db: Session, user_id: str) -> int:
    """Number of unread notifications for a user"""
    return db.query(Notification).filter(
        Notification.user_id == user_id,
        Notification.read == False,  # noqa: E712
    ).count()

def create_notification(db: Session, notification_in: NotificationCreate) -> Notification:
    """Create a new notification and push it to the recipient's live feed"""
    notification = Notification(
        id=str(uuid.uuid4()),
        **notification_in.model_dump(),
    )

    db.add(notification)
    db.commit()
    db.refresh(notification)

    realtime_hub.publish("notifications", NotificationSchema.model_validate(notification))
    return notification

def update_notification(db: Session, notification: Notification, notification_in: NotificationUpdate) -> Notification:
    """Update a notification"""
    notification.read = notification_in.read

    db.add(notification)
    db.commit()
    db.refresh(notification)

    return notification

def mark_all_as_read(db: Session, user_id: str) -> int:
    """Mark all notifications as read for a user"""
    result = db.query(Notification).filter(
        Notification.user_id == user_id,
        Notification.read == False,  # noqa: E712
    ).update({"read": True}, synchronize_session=False)

    db.commit()

    return result

def delete_notification(db: Session, notification: Notification) -> Notification:
    """Delete a notification"""
    db.delete(notification)
    db.commit()

    return notification

def delete_all_notifications(db: Session, user_id: str) -> int:
    """Delete all notifications for a user"""
    result = db.query(Notification).filter(Notification.user_id == user_id).delete(synchronize_session=False)
    db.commit()

    return result
