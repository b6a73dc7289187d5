from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from ringconnect.core.exceptions import RingConnectError, to_http_exception
from ringconnect.db.session import get_db
from ringconnect.deps import get_current_user
from ringconnect.modules.profiles.models.user import User
from ringconnect.modules.training_logs.schemas.training_log import (
    TrainingLog as TrainingLogSchema, TrainingLogCreate, TrainingStats
)
from ringconnect.modules.training_logs.services.training_log import (
    create_training_log, delete_training_log, get_training_log,
    get_training_stats, get_user_training_logs
)

router = APIRouter()

@router.post("", response_model=TrainingLogSchema, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=TrainingLogSchema, status_code=status.HTTP_201_CREATED)
def create_log(
    *,
    db: Session = Depends(get_db),
    log_in: TrainingLogCreate,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Log a training session"""
    try:
        return create_training_log(db, log_in, current_user.id)
    except RingConnectError as e:
        raise to_http_exception(e)

@router.get("/user/{user_id}", response_model=List[TrainingLogSchema])
def read_user_logs(
    *,
    db: Session = Depends(get_db),
    user_id: str,
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
) -> Any:
    return get_user_training_logs(db, user_id, skip, limit)

@router.get("/user/{user_id}/stats", response_model=TrainingStats)
def read_user_stats(
    *,
    db: Session = Depends(get_db),
    user_id: str,
) -> Any:
    return get_training_stats(db, user_id)

@router.delete("/{log_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_log(
    *,
    db: Session = Depends(get_db),
    log_id: str,
    current_user: User = Depends(get_current_user),
) -> None:
    log = get_training_log(db, log_id)
    if not log:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Training log not found"
        )
    if log.user_id != current_user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions"
        )
    delete_training_log(db, log)
