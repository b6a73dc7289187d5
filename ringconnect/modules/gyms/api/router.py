from typing import Any, List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status
from sqlalchemy.orm import Session

from ringconnect.core.exceptions import RingConnectError, to_http_exception
from ringconnect.db.session import get_db
from ringconnect.deps import get_current_user, get_optional_user
from ringconnect.modules.profiles.models.user import User
from ringconnect.modules.gyms.models.gym import Gym
from ringconnect.modules.gyms.schemas.gym import Gym as GymSchema, GymCreate, GymDetail, GymUpdate
from ringconnect.modules.gyms.services.gym import (
    create_gym, delete_gym, follow_gym, get_gym, get_gym_detail,
    list_gyms, set_logo, unfollow_gym, update_gym
)
from ringconnect.modules.media.service import GYM_LOGOS, MediaService, get_media_service

router = APIRouter()

def _validate_gym(db: Session, gym_id: str) -> Gym:
    gym = get_gym(db, gym_id)
    if not gym:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Gym not found"
        )
    return gym

def _validate_owner(gym: Gym, user_id: str) -> None:
    if gym.owner_id != user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions"
        )

@router.post("", response_model=GymSchema, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=GymSchema, status_code=status.HTTP_201_CREATED)
def create_new_gym(
    *,
    db: Session = Depends(get_db),
    gym_in: GymCreate,
    current_user: User = Depends(get_current_user),
) -> Any:
    return create_gym(db, gym_in, current_user.id)

@router.get("", response_model=List[GymSchema])
@router.get("/", response_model=List[GymSchema])
def read_gyms(
    db: Session = Depends(get_db),
    q: Optional[str] = Query(None, description="Filter by name"),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
) -> Any:
    return list_gyms(db, q, skip, limit)

@router.get("/{gym_id}", response_model=GymDetail)
def read_gym(
    *,
    db: Session = Depends(get_db),
    gym_id: str,
    current_user: Optional[User] = Depends(get_optional_user),
) -> Any:
    gym = _validate_gym(db, gym_id)
    return get_gym_detail(db, gym, current_user.id if current_user else None)

@router.put("/{gym_id}", response_model=GymSchema)
def update_gym_by_id(
    *,
    db: Session = Depends(get_db),
    gym_id: str,
    gym_in: GymUpdate,
    current_user: User = Depends(get_current_user),
) -> Any:
    gym = _validate_gym(db, gym_id)
    _validate_owner(gym, current_user.id)
    return update_gym(db, gym, gym_in)

@router.delete("/{gym_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_gym_by_id(
    *,
    db: Session = Depends(get_db),
    gym_id: str,
    current_user: User = Depends(get_current_user),
) -> None:
    gym = _validate_gym(db, gym_id)
    _validate_owner(gym, current_user.id)
    delete_gym(db, gym)

@router.post("/{gym_id}/follow", response_model=GymDetail)
def follow(
    *,
    db: Session = Depends(get_db),
    gym_id: str,
    current_user: User = Depends(get_current_user),
) -> Any:
    gym = _validate_gym(db, gym_id)
    try:
        follow_gym(db, gym, current_user.id)
    except RingConnectError as e:
        raise to_http_exception(e)
    return get_gym_detail(db, gym, current_user.id)

@router.delete("/{gym_id}/follow", response_model=GymDetail)
def unfollow(
    *,
    db: Session = Depends(get_db),
    gym_id: str,
    current_user: User = Depends(get_current_user),
) -> Any:
    gym = _validate_gym(db, gym_id)
    try:
        unfollow_gym(db, gym, current_user.id)
    except RingConnectError as e:
        raise to_http_exception(e)
    return get_gym_detail(db, gym, current_user.id)

@router.post("/{gym_id}/logo", response_model=GymSchema)
def upload_logo(
    *,
    db: Session = Depends(get_db),
    gym_id: str,
    file: UploadFile = File(...),
    current_user: User = Depends(get_current_user),
    media_service: MediaService = Depends(get_media_service),
) -> Any:
    """Replace the gym logo (owner only)"""
    gym = _validate_gym(db, gym_id)
    _validate_owner(gym, current_user.id)
    try:
        stored = media_service.store(file.file.read(), file.filename, file.content_type, GYM_LOGOS)
    except RingConnectError as e:
        raise to_http_exception(e)
    if stored.media_type != "image":
        media_service.delete_media(stored.url)
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="Logos must be images"
        )

    previous = gym.logo_url
    gym = set_logo(db, gym, stored.url)
    if previous:
        media_service.delete_media(previous)
    return gym
