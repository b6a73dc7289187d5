from typing import Any, List, Optional
import logging
from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File, Query
from sqlalchemy.orm import Session

from ringconnect.core.exceptions import RingConnectError, to_http_exception
from ringconnect.db.session import get_db
from ringconnect.deps import get_current_user, get_optional_user
from ringconnect.modules.profiles.models.user import User
from ringconnect.modules.profiles.schemas.user import User as UserSchema, PublicUser, UserUpdate
from ringconnect.modules.profiles.services.user import get_user, get_user_by_username, search_users, set_avatar, update_user
from ringconnect.modules.media.service import AVATARS, MediaService, get_media_service

router = APIRouter()
logger = logging.getLogger("app")

def _validate_user(db: Session, user_id: str) -> User:
    """Validate user exists and return user object or raise HTTPException"""
    user = get_user(db, user_id=user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return user

@router.get("/me", response_model=UserSchema)
def read_user_me(
    current_user: User = Depends(get_current_user),
) -> Any:
    """Get current user"""
    return current_user

@router.put("/me", response_model=UserSchema)
def update_user_me(
    *,
    db: Session = Depends(get_db),
    user_in: UserUpdate,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Update current user"""
    return update_user(db, current_user, user_in)

@router.post("/me/avatar", response_model=UserSchema)
def upload_avatar(
    *,
    db: Session = Depends(get_db),
    file: UploadFile = File(...),
    current_user: User = Depends(get_current_user),
    media_service: MediaService = Depends(get_media_service),
) -> Any:
    """Upload a new profile picture"""
    try:
        stored = media_service.store(file.file.read(), file.filename, file.content_type, AVATARS)
    except RingConnectError as e:
        raise to_http_exception(e)
    if stored.media_type != "image":
        media_service.delete_media(stored.url)
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="Avatars must be images",
        )

    previous = current_user.avatar_url
    user = set_avatar(db, current_user, stored.url)
    if previous:
        media_service.delete_media(previous)
    logger.info(f"User {user.id} changed avatar to {stored.path}")
    return user

@router.get("/search", response_model=List[PublicUser])
def search_for_users(
    *,
    db: Session = Depends(get_db),
    q: str = Query(..., min_length=2, description="Search query for name or username"),
    limit: int = Query(20, ge=1, le=50),
    current_user: Optional[User] = Depends(get_optional_user),
) -> Any:
    """Search for users by name or username"""
    return search_users(db, q, exclude_id=current_user.id if current_user else None, limit=limit)

@router.get("/by-username/{username}", response_model=PublicUser)
def read_user_by_username(
    username: str,
    db: Session = Depends(get_db),
) -> Any:
    """Get a specific user by username"""
    user = get_user_by_username(db, username=username)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )

    return user

@router.get("/{user_id}", response_model=PublicUser)
def read_user_by_id(
    user_id: str,
    db: Session = Depends(get_db),
) -> Any:
    """Get a specific user by id"""
    return _validate_user(db, user_id)
