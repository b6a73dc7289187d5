from sqlalchemy import Column, String, DateTime, Text, Float, Integer, Boolean, ForeignKey

from ringconnect.db.session import Base
from ringconnect.db.time import utcnow

class MentorshipSession(Base):
    __tablename__ = "mentorship_sessions"

    id = Column(String, primary_key=True, index=True)
    coach_id = Column(String, ForeignKey("users.id"), index=True, nullable=False)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    duration_minutes = Column(Integer, nullable=False)
    price = Column(Float, nullable=False)
    session_type = Column(String, nullable=True)  # online, in_person
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

class Booking(Base):
    __tablename__ = "bookings"

    id = Column(String, primary_key=True, index=True)
    session_id = Column(String, ForeignKey("mentorship_sessions.id"), index=True, nullable=False)
    coach_id = Column(String, ForeignKey("users.id"), index=True, nullable=False)
    athlete_id = Column(String, ForeignKey("users.id"), index=True, nullable=False)
    scheduled_date = Column(DateTime(timezone=True), nullable=True)
    notes = Column(Text, nullable=True)
    status = Column(String, default="pending")  # pending, confirmed, cancelled, completed
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
