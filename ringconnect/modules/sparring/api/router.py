from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from ringconnect.core.exceptions import RingConnectError, to_http_exception
from ringconnect.db.session import get_db
from ringconnect.deps import get_current_user
from ringconnect.modules.profiles.models.user import User
from ringconnect.modules.sparring.schemas.sparring_request import (
    SparringDirection, SparringRequest as SparringRequestSchema,
    SparringRequestCreate, SparringStatus, SparringStatusUpdate
)
from ringconnect.modules.sparring.services.sparring_request import (
    create_sparring_request, get_sparring_request, list_sparring_requests,
    present_sparring_requests, update_sparring_status
)

router = APIRouter()

@router.post("", response_model=SparringRequestSchema, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=SparringRequestSchema, status_code=status.HTTP_201_CREATED)
def request_sparring(
    *,
    db: Session = Depends(get_db),
    request_in: SparringRequestCreate,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Invite another user to spar"""
    try:
        request = create_sparring_request(db, request_in, current_user.id)
    except RingConnectError as e:
        raise to_http_exception(e)
    return present_sparring_requests(db, [request])[0]

@router.get("", response_model=List[SparringRequestSchema])
@router.get("/", response_model=List[SparringRequestSchema])
def read_sparring_requests(
    db: Session = Depends(get_db),
    direction: Optional[SparringDirection] = Query(None),
    status_filter: Optional[SparringStatus] = Query(None, alias="status"),
    current_user: User = Depends(get_current_user),
) -> Any:
    """Sparring requests sent or received by the current user"""
    requests = list_sparring_requests(db, current_user.id, direction, status_filter)
    return present_sparring_requests(db, requests)

@router.put("/{request_id}/status", response_model=SparringRequestSchema)
def update_sparring_request_status(
    *,
    db: Session = Depends(get_db),
    request_id: str,
    status_in: SparringStatusUpdate,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Accept, decline or cancel a pending request"""
    request = get_sparring_request(db, request_id)
    if not request:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Sparring request not found"
        )
    try:
        request = update_sparring_status(db, request, status_in.status, current_user.id)
    except RingConnectError as e:
        raise to_http_exception(e)
    return present_sparring_requests(db, [request])[0]
