from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ringconnect.db.session import get_db
from ringconnect.deps import get_current_user
from ringconnect.modules.profiles.models.user import User
from ringconnect.modules.championships.schemas.championship import (
    Championship as ChampionshipSchema, ChampionshipCreate, ChampionshipRecord
)
from ringconnect.modules.championships.services.championship import (
    create_championship, delete_championship, get_championship,
    get_championship_record, get_user_championships
)

router = APIRouter()

@router.post("", response_model=ChampionshipSchema, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=ChampionshipSchema, status_code=status.HTTP_201_CREATED)
def create_new_championship(
    *,
    db: Session = Depends(get_db),
    championship_in: ChampionshipCreate,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Add a championship to the current user's record"""
    return create_championship(db, championship_in, current_user.id)

@router.get("/user/{user_id}", response_model=List[ChampionshipSchema])
def read_user_championships(
    *,
    db: Session = Depends(get_db),
    user_id: str,
) -> Any:
    return get_user_championships(db, user_id)

@router.get("/user/{user_id}/record", response_model=ChampionshipRecord)
def read_user_record(
    *,
    db: Session = Depends(get_db),
    user_id: str,
) -> Any:
    """Number of championships, titles and podium finishes"""
    return get_championship_record(db, user_id)

@router.delete("/{championship_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_championship_by_id(
    *,
    db: Session = Depends(get_db),
    championship_id: str,
    current_user: User = Depends(get_current_user),
) -> None:
    championship = get_championship(db, championship_id)
    if not championship:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Championship not found"
        )
    if championship.user_id != current_user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions"
        )
    delete_championship(db, championship)
