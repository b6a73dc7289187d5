from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session

from ringconnect.db.session import get_db
from ringconnect.deps import get_current_user
from ringconnect.modules.profiles.models.user import User
from ringconnect.modules.notifications.models.notification import Notification
from ringconnect.modules.notifications.schemas.notification import (
    Notification as NotificationSchema,
    NotificationCount,
    NotificationUpdate
)
from ringconnect.modules.notifications.services.notification import (
    count_unread,
    get_notification,
    get_user_notifications,
    update_notification,
    mark_all_as_read,
    delete_notification,
    delete_all_notifications
)

router = APIRouter()

def _get_own_notification(db: Session, notification_id: str, user: User) -> Notification:
    notification = get_notification(db, notification_id=notification_id)
    if not notification:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Notification not found"
        )

    if notification.user_id != user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions"
        )
    return notification

@router.get("", response_model=List[NotificationSchema])
@router.get("/", response_model=List[NotificationSchema])
def read_notifications(
    db: Session = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    unread_only: bool = False,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Get user's notifications with pagination and filter options"""
    return get_user_notifications(db, current_user.id, skip, limit, unread_only)

@router.get("/unread-count", response_model=NotificationCount)
def read_unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    count = count_unread(db, current_user.id)
    return {"message": f"{count} unread notifications", "count": count}

@router.put("/mark-all-read", response_model=NotificationCount)
def mark_all_notifications_as_read(
    *,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """Mark all of the user's notifications as read"""
    count = mark_all_as_read(db, current_user.id)

    return {
        "message": f"Marked {count} notifications as read",
        "count": count
    }

@router.put("/{notification_id}", response_model=NotificationSchema)
def mark_notification_as_read(
    *,
    db: Session = Depends(get_db),
    notification_id: str,
    notification_in: NotificationUpdate,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Mark a specific notification as read"""
    notification = _get_own_notification(db, notification_id, current_user)
    return update_notification(db, notification, notification_in)

@router.delete("", response_model=NotificationCount)
@router.delete("/", response_model=NotificationCount)
def delete_all_user_notifications(
    *,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """Delete all notifications for the current user"""
    count = delete_all_notifications(db, current_user.id)

    return {
        "message": f"Deleted {count} notifications",
        "count": count
    }

@router.delete("/{notification_id}", response_model=NotificationSchema)
def delete_notification_by_id(
    *,
    db: Session = Depends(get_db),
    notification_id: str,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Delete a specific notification"""
    notification = _get_own_notification(db, notification_id, current_user)
    result = NotificationSchema.model_validate(notification)
    delete_notification(db, notification)
    return result
