from typing import List, Optional, Tuple
import uuid
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ringconnect.core.exceptions import ConflictError, InvalidOperationError, NotFoundError
from ringconnect.modules.follows.models.follow import Follow
from ringconnect.modules.notifications.services.notification_events import create_follow_notification
from ringconnect.modules.profiles.models.user import User
from ringconnect.modules.profiles.services.user import get_user

logger = logging.getLogger(__name__)

def get_follow(db: Session, follower_id: str, followed_id: str) -> Optional[Follow]:
    """Get the follow row for a (follower, followed) pair"""
    return db.query(Follow).filter(
        Follow.follower_id == follower_id,
        Follow.followed_id == followed_id
    ).first()

def is_following(db: Session, follower_id: Optional[str], followed_id: str) -> bool:
    if not follower_id:
        return False
    return get_follow(db, follower_id, followed_id) is not None

def follow_user(db: Session, follower_id: str, followed_id: str) -> Follow:
    """
    Join a user's torcida.

    Raises:
        InvalidOperationError: following yourself
        NotFoundError: the target user does not exist
        ConflictError: already following
    """
    if follower_id == followed_id:
        raise InvalidOperationError("You cannot follow yourself")
    if not get_user(db, followed_id):
        raise NotFoundError("User", followed_id)
    if get_follow(db, follower_id, followed_id):
        raise ConflictError("Already following this user")

    follow = Follow(id=str(uuid.uuid4()), follower_id=follower_id, followed_id=followed_id)
    db.add(follow)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with an identical request
        db.rollback()
        raise ConflictError("Already following this user")
    db.refresh(follow)
    logger.info(f"User {follower_id} now follows {followed_id}")

    create_follow_notification(db, followed_id, follower_id)
    return follow

def unfollow_user(db: Session, follower_id: str, followed_id: str) -> Follow:
    """Leave a user's torcida; raises NotFoundError when not following"""
    follow = get_follow(db, follower_id, followed_id)
    if not follow:
        raise NotFoundError("Follow")
    db.delete(follow)
    db.commit()
    logger.info(f"User {follower_id} unfollowed {followed_id}")
    return follow

def get_follow_stats(db: Session, user_id: str) -> Tuple[int, int]:
    """(followers, following) counts for a user"""
    followers = db.query(Follow).filter(Follow.followed_id == user_id).count()
    following = db.query(Follow).filter(Follow.follower_id == user_id).count()
    return followers, following

def get_followers(db: Session, user_id: str, skip: int = 0, limit: int = 50) -> List[User]:
    """Users who follow ``user_id``, most recent first"""
    return (
        db.query(User)
        .join(Follow, Follow.follower_id == User.id)
        .filter(Follow.followed_id == user_id)
        .order_by(Follow.created_at.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )

def get_following(db: Session, user_id: str, skip: int = 0, limit: int = 50) -> List[User]:
    """Users ``user_id`` follows, most recent first"""
    return (
        db.query(User)
        .join(Follow, Follow.followed_id == User.id)
        .filter(Follow.follower_id == user_id)
        .order_by(Follow.created_at.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )
