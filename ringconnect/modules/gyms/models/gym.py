from sqlalchemy import Column, String, DateTime, Text, Float, ForeignKey, UniqueConstraint

from ringconnect.db.session import Base
from ringconnect.db.time import utcnow

class Gym(Base):
    __tablename__ = "gyms"

    id = Column(String, primary_key=True, index=True)
    owner_id = Column(String, ForeignKey("users.id"), index=True, nullable=False)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    address = Column(String, nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    logo_url = Column(String, nullable=True)
    monthly_fee = Column(Float, nullable=True)
    private_class_fee = Column(Float, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

class GymFollower(Base):
    __tablename__ = "gym_followers"

    id = Column(String, primary_key=True, index=True)
    gym_id = Column(String, ForeignKey("gyms.id"), index=True, nullable=False)
    user_id = Column(String, ForeignKey("users.id"), nullable=False)
    followed_at = Column(DateTime(timezone=True), default=utcnow)

    __table_args__ = (
        UniqueConstraint("gym_id", "user_id", name="unique_gym_follower"),
    )
