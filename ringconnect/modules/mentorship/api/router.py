from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from ringconnect.core.exceptions import RingConnectError, to_http_exception
from ringconnect.db.session import get_db
from ringconnect.deps import get_current_user
from ringconnect.modules.profiles.models.user import User
from ringconnect.modules.mentorship.models.mentorship import MentorshipSession
from ringconnect.modules.mentorship.schemas.mentorship import (
    Booking as BookingSchema, BookingCreate, BookingStatusUpdate,
    MentorshipSession as SessionSchema, SessionCreate, SessionUpdate
)
from ringconnect.modules.mentorship.services.mentorship import (
    book_session, create_session, deactivate_session, get_booking, get_session,
    list_bookings, list_sessions, update_booking_status, update_session
)

router = APIRouter()

def _validate_session(db: Session, session_id: str) -> MentorshipSession:
    session = get_session(db, session_id)
    if not session:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Session not found"
        )
    return session

def _validate_coach(session: MentorshipSession, user_id: str) -> None:
    if session.coach_id != user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions"
        )

@router.post("/sessions", response_model=SessionSchema, status_code=status.HTTP_201_CREATED)
def create_new_session(
    *,
    db: Session = Depends(get_db),
    session_in: SessionCreate,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Offer a mentorship session as the current user"""
    return create_session(db, session_in, current_user.id)

@router.get("/sessions", response_model=List[SessionSchema])
def read_sessions(
    db: Session = Depends(get_db),
    coach_id: Optional[str] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
) -> Any:
    return list_sessions(db, coach_id, skip, limit)

@router.put("/sessions/{session_id}", response_model=SessionSchema)
def update_session_by_id(
    *,
    db: Session = Depends(get_db),
    session_id: str,
    session_in: SessionUpdate,
    current_user: User = Depends(get_current_user),
) -> Any:
    session = _validate_session(db, session_id)
    _validate_coach(session, current_user.id)
    return update_session(db, session, session_in)

@router.delete("/sessions/{session_id}", response_model=SessionSchema)
def delete_session_by_id(
    *,
    db: Session = Depends(get_db),
    session_id: str,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Stop offering a session"""
    session = _validate_session(db, session_id)
    _validate_coach(session, current_user.id)
    return deactivate_session(db, session)

@router.post("/sessions/{session_id}/book", response_model=BookingSchema, status_code=status.HTTP_201_CREATED)
def book(
    *,
    db: Session = Depends(get_db),
    session_id: str,
    booking_in: BookingCreate,
    current_user: User = Depends(get_current_user),
) -> Any:
    session = _validate_session(db, session_id)
    try:
        return book_session(db, session, current_user.id, booking_in)
    except RingConnectError as e:
        raise to_http_exception(e)

@router.get("/bookings", response_model=List[BookingSchema])
def read_bookings(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """Bookings where the current user is athlete or coach"""
    return list_bookings(db, current_user.id)

@router.put("/bookings/{booking_id}/status", response_model=BookingSchema)
def update_booking(
    *,
    db: Session = Depends(get_db),
    booking_id: str,
    status_in: BookingStatusUpdate,
    current_user: User = Depends(get_current_user),
) -> Any:
    booking = get_booking(db, booking_id)
    if not booking:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Booking not found"
        )
    try:
        return update_booking_status(db, booking, status_in.status, current_user.id)
    except RingConnectError as e:
        raise to_http_exception(e)
