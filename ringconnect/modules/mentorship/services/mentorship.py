from typing import List, Optional
import uuid
import logging
from sqlalchemy import or_
from sqlalchemy.orm import Session

from ringconnect.core.exceptions import InvalidOperationError, NotFoundError, PermissionDeniedError
from ringconnect.modules.mentorship.models.mentorship import Booking, MentorshipSession
from ringconnect.modules.mentorship.schemas.mentorship import (
    BookingCreate, MentorshipSession as SessionSchema, SessionCreate, SessionUpdate
)
from ringconnect.modules.notifications.services.notification_events import (
    create_booking_request_notification,
    create_booking_update_notification,
)
from ringconnect.modules.profiles.services.user import get_user_summaries

logger = logging.getLogger(__name__)

# Bookings in these states never change again
FINAL_STATUSES = ("cancelled", "completed")

def next_booking_status(current: str, requested: str, as_coach: bool) -> str:
    """
    Validate a booking status change.

    The coach may confirm, cancel or complete; the athlete may only cancel.
    Nothing moves out of a final state, and a booking cannot be set to the
    status it already has.
    """
    if current in FINAL_STATUSES:
        raise InvalidOperationError(f"Booking is already {current}")
    if requested == current:
        raise InvalidOperationError(f"Booking is already {current}")
    if not as_coach and requested != "cancelled":
        raise PermissionDeniedError("Only the coach can change a booking to that status")
    return requested

def get_session(db: Session, session_id: str) -> Optional[MentorshipSession]:
    return db.query(MentorshipSession).filter(MentorshipSession.id == session_id).first()

def list_sessions(db: Session, coach_id: Optional[str] = None, skip: int = 0, limit: int = 50) -> List[SessionSchema]:
    """Active sessions, newest first, with coach summaries"""
    query = db.query(MentorshipSession).filter(MentorshipSession.is_active == True)  # noqa: E712
    if coach_id:
        query = query.filter(MentorshipSession.coach_id == coach_id)
    sessions = query.order_by(MentorshipSession.created_at.desc()).offset(skip).limit(limit).all()

    coaches = get_user_summaries(db, (s.coach_id for s in sessions))
    result = []
    for session in sessions:
        item = SessionSchema.model_validate(session)
        item.coach = coaches.get(session.coach_id)
        result.append(item)
    return result

def create_session(db: Session, session_in: SessionCreate, coach_id: str) -> MentorshipSession:
    session = MentorshipSession(id=str(uuid.uuid4()), coach_id=coach_id, **session_in.model_dump())
    db.add(session)
    db.commit()
    db.refresh(session)
    logger.info(f"Coach {coach_id} created mentorship session {session.id}")
    return session

def update_session(db: Session, session: MentorshipSession, session_in: SessionUpdate) -> MentorshipSession:
    for field, value in session_in.model_dump(exclude_unset=True).items():
        setattr(session, field, value)
    db.add(session)
    db.commit()
    db.refresh(session)
    return session

def deactivate_session(db: Session, session: MentorshipSession) -> MentorshipSession:
    """Sessions are never removed, existing bookings keep pointing at them"""
    session.is_active = False
    db.add(session)
    db.commit()
    db.refresh(session)
    logger.info(f"Deactivated mentorship session {session.id}")
    return session

def book_session(db: Session, session: MentorshipSession, athlete_id: str, booking_in: BookingCreate) -> Booking:
    """
    Request a booking; it starts out pending.

    Raises:
        InvalidOperationError: the session is inactive or is the athlete's own
    """
    if not session.is_active:
        raise InvalidOperationError("This session is no longer offered")
    if session.coach_id == athlete_id:
        raise InvalidOperationError("You cannot book your own session")

    booking = Booking(
        id=str(uuid.uuid4()),
        session_id=session.id,
        coach_id=session.coach_id,
        athlete_id=athlete_id,
        status="pending",
        **booking_in.model_dump(),
    )
    db.add(booking)
    db.commit()
    db.refresh(booking)
    logger.info(f"User {athlete_id} booked session {session.id} ({booking.id})")

    create_booking_request_notification(db, session.coach_id, athlete_id, booking.id)
    return booking

def get_booking(db: Session, booking_id: str) -> Optional[Booking]:
    return db.query(Booking).filter(Booking.id == booking_id).first()

def list_bookings(db: Session, user_id: str) -> List[Booking]:
    """Bookings where the user is the athlete or the coach, newest first"""
    return (
        db.query(Booking)
        .filter(or_(Booking.athlete_id == user_id, Booking.coach_id == user_id))
        .order_by(Booking.created_at.desc())
        .all()
    )

def update_booking_status(db: Session, booking: Booking, requested: str, actor_id: str) -> Booking:
    """Apply a status change by the coach or the athlete of a booking"""
    if actor_id not in (booking.coach_id, booking.athlete_id):
        raise PermissionDeniedError()

    as_coach = actor_id == booking.coach_id
    previous = booking.status
    booking.status = next_booking_status(previous, requested, as_coach)
    db.add(booking)
    db.commit()
    db.refresh(booking)
    logger.info(f"Booking {booking.id} moved from {previous} to {booking.status} by {actor_id}")

    other_party = booking.athlete_id if as_coach else booking.coach_id
    create_booking_update_notification(db, other_party, actor_id, booking.id, booking.status)
    return booking
