from sqlalchemy import Column, String, DateTime, Text, ForeignKey, CheckConstraint

from ringconnect.db.session import Base
from ringconnect.db.time import utcnow

class SparringRequest(Base):
    __tablename__ = "sparring_requests"

    id = Column(String, primary_key=True, index=True)
    requester_id = Column(String, ForeignKey("users.id"), index=True, nullable=False)
    requested_id = Column(String, ForeignKey("users.id"), index=True, nullable=False)
    message = Column(Text, nullable=True)
    status = Column(String, default="pending")  # pending, accepted, declined, cancelled
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    __table_args__ = (
        CheckConstraint("requester_id != requested_id", name="no_self_sparring"),
    )
