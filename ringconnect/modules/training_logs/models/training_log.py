from sqlalchemy import Column, String, DateTime, Date, Text, Float, Boolean, ForeignKey

from ringconnect.db.session import Base
from ringconnect.db.time import utcnow

class TrainingLog(Base):
    __tablename__ = "training_logs"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id"), index=True, nullable=False)
    gym_id = Column(String, ForeignKey("gyms.id"), nullable=True)
    training_date = Column(Date, nullable=False)
    duration_hours = Column(Float, nullable=False)
    did_sparring = Column(Boolean, default=False)
    did_sparring_light = Column(Boolean, default=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
