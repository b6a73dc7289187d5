from typing import List, Optional
import uuid
import logging
from sqlalchemy import or_
from sqlalchemy.orm import Session

from ringconnect.core.exceptions import ConflictError, InvalidOperationError, NotFoundError, PermissionDeniedError
from ringconnect.modules.sparring.models.sparring_request import SparringRequest
from ringconnect.modules.sparring.schemas.sparring_request import (
    SparringRequest as SparringRequestSchema, SparringRequestCreate
)
from ringconnect.modules.notifications.services.notification_events import (
    create_sparring_request_notification,
    create_sparring_update_notification,
)
from ringconnect.modules.profiles.services.user import get_user, get_user_summaries

logger = logging.getLogger(__name__)

def next_sparring_status(current: str, requested: str, as_requested: bool) -> str:
    """
    Validate an answer to a sparring request.

    Only pending requests change. The invited user accepts or declines,
    the requester may only cancel.
    """
    if current != "pending":
        raise InvalidOperationError(f"Sparring request is already {current}")
    if requested in ("accepted", "declined") and not as_requested:
        raise PermissionDeniedError("Only the invited user can answer a sparring request")
    if requested == "cancelled" and as_requested:
        raise PermissionDeniedError("Only the requester can cancel a sparring request")
    return requested

def get_sparring_request(db: Session, request_id: str) -> Optional[SparringRequest]:
    return db.query(SparringRequest).filter(SparringRequest.id == request_id).first()

def present_sparring_requests(db: Session, requests: List[SparringRequest]) -> List[SparringRequestSchema]:
    users = get_user_summaries(db, [r.requester_id for r in requests] + [r.requested_id for r in requests])
    result = []
    for request in requests:
        item = SparringRequestSchema.model_validate(request)
        item.requester = users.get(request.requester_id)
        item.requested = users.get(request.requested_id)
        result.append(item)
    return result

def create_sparring_request(db: Session, request_in: SparringRequestCreate, requester_id: str) -> SparringRequest:
    """
    Invite another user to spar.

    Raises:
        InvalidOperationError: the requester invites themselves
        NotFoundError: the invited user does not exist
        ConflictError: a pending request to the same user already exists
    """
    if request_in.requested_id == requester_id:
        raise InvalidOperationError("You cannot request sparring with yourself")
    if not get_user(db, user_id=request_in.requested_id):
        raise NotFoundError("User", request_in.requested_id)

    pending = db.query(SparringRequest).filter(
        SparringRequest.requester_id == requester_id,
        SparringRequest.requested_id == request_in.requested_id,
        SparringRequest.status == "pending",
    ).first()
    if pending:
        raise ConflictError("A sparring request to this user is already pending", details={"id": pending.id})

    message = (request_in.message or "").strip() or None
    request = SparringRequest(
        id=str(uuid.uuid4()),
        requester_id=requester_id,
        requested_id=request_in.requested_id,
        message=message,
        status="pending",
    )
    db.add(request)
    db.commit()
    db.refresh(request)
    logger.info(f"User {requester_id} requested sparring with {request.requested_id} ({request.id})")

    create_sparring_request_notification(db, request.requested_id, requester_id, request.id)
    return request

def list_sparring_requests(
    db: Session,
    user_id: str,
    direction: Optional[str] = None,
    status: Optional[str] = None,
) -> List[SparringRequest]:
    """Requests sent or received by the user, newest first"""
    if direction == "incoming":
        query = db.query(SparringRequest).filter(SparringRequest.requested_id == user_id)
    elif direction == "outgoing":
        query = db.query(SparringRequest).filter(SparringRequest.requester_id == user_id)
    else:
        query = db.query(SparringRequest).filter(
            or_(SparringRequest.requester_id == user_id, SparringRequest.requested_id == user_id)
        )
    if status:
        query = query.filter(SparringRequest.status == status)
    return query.order_by(SparringRequest.created_at.desc()).all()

def update_sparring_status(db: Session, request: SparringRequest, requested: str, actor_id: str) -> SparringRequest:
    """Answer or withdraw a sparring request"""
    if actor_id not in (request.requester_id, request.requested_id):
        raise PermissionDeniedError()

    as_requested = actor_id == request.requested_id
    previous = request.status
    request.status = next_sparring_status(previous, requested, as_requested)
    db.add(request)
    db.commit()
    db.refresh(request)
    logger.info(f"Sparring request {request.id} moved from {previous} to {request.status} by {actor_id}")

    other_party = request.requester_id if as_requested else request.requested_id
    create_sparring_update_notification(db, other_party, actor_id, request.id, request.status)
    return request
