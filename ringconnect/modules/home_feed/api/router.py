from typing import Any, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from ringconnect.db.session import get_db
from ringconnect.deps import get_optional_user
from ringconnect.modules.profiles.models.user import User
from ringconnect.modules.home_feed.schemas.feed import FeedResponse
from ringconnect.modules.home_feed.services.feed import FeedScope, get_home_feed

router = APIRouter()

@router.get("/", response_model=FeedResponse)
@router.get("", response_model=FeedResponse)
def read_home_feed(
    *,
    db: Session = Depends(get_db),
    scope: FeedScope = Query("all"),
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    current_user: Optional[User] = Depends(get_optional_user),
) -> Any:
    """Home feed with pagination; the following scope needs a session"""
    if scope == "following" and current_user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return get_home_feed(db, current_user.id if current_user else None, scope, skip, limit)
