from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
import logging

from ringconnect.core.exceptions import RingConnectError, to_http_exception
from ringconnect.db.session import get_db
from ringconnect.deps import get_current_user, get_optional_user
from ringconnect.modules.profiles.models.user import User
from ringconnect.modules.profiles.schemas.user import UserSummary
from ringconnect.modules.profiles.services.user import get_user
from ringconnect.modules.follows.schemas.follow import (
    Follow as FollowSchema,
    FollowList,
    FollowStats,
    FollowStatus,
)
from ringconnect.modules.follows.services.follow import (
    follow_user,
    unfollow_user,
    is_following,
    get_follow_stats,
    get_followers,
    get_following,
)

router = APIRouter()
logger = logging.getLogger(__name__)

def _check_user_exists(db: Session, user_id: str) -> User:
    """Validate user exists, raise HTTP 404 if not"""
    user = get_user(db, user_id=user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return user

@router.post("/{user_id}", response_model=FollowSchema, status_code=status.HTTP_201_CREATED)
def follow(
    *,
    db: Session = Depends(get_db),
    user_id: str,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Join a user's torcida"""
    try:
        return follow_user(db, current_user.id, user_id)
    except RingConnectError as e:
        raise to_http_exception(e)

@router.delete("/{user_id}", response_model=FollowSchema)
def unfollow(
    *,
    db: Session = Depends(get_db),
    user_id: str,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Leave a user's torcida"""
    try:
        follow_row = unfollow_user(db, current_user.id, user_id)
    except RingConnectError as e:
        raise to_http_exception(e)
    return FollowSchema.model_validate(follow_row)

@router.get("/{user_id}/status", response_model=FollowStatus)
def read_follow_status(
    *,
    db: Session = Depends(get_db),
    user_id: str,
    current_user: Optional[User] = Depends(get_optional_user),
) -> Any:
    """Whether the viewer follows the user (always false without a session)"""
    return FollowStatus(is_following=is_following(db, current_user.id if current_user else None, user_id))

@router.get("/{user_id}/stats", response_model=FollowStats)
def read_follow_stats(
    *,
    db: Session = Depends(get_db),
    user_id: str,
) -> Any:
    _check_user_exists(db, user_id)
    followers, following = get_follow_stats(db, user_id)
    return FollowStats(followers=followers, following=following)

@router.get("/{user_id}/followers", response_model=FollowList)
def read_followers(
    *,
    db: Session = Depends(get_db),
    user_id: str,
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
) -> Any:
    """The user's torcida"""
    _check_user_exists(db, user_id)
    followers, _ = get_follow_stats(db, user_id)
    users = get_followers(db, user_id, skip, limit)
    return FollowList(items=[UserSummary.model_validate(u) for u in users], total=followers)

@router.get("/{user_id}/following", response_model=FollowList)
def read_following(
    *,
    db: Session = Depends(get_db),
    user_id: str,
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
) -> Any:
    """Users whose torcida this user is part of"""
    _check_user_exists(db, user_id)
    _, following = get_follow_stats(db, user_id)
    users = get_following(db, user_id, skip, limit)
    return FollowList(items=[UserSummary.model_validate(u) for u in users], total=following)
