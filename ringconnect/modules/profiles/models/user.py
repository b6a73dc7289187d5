from sqlalchemy import Boolean, Column, String, DateTime, Text, Integer, Float

from ringconnect.db.session import Base
from ringconnect.db.time import utcnow

class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    username = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    full_name = Column(String, nullable=True)
    avatar_url = Column(String, nullable=True)
    bio = Column(Text, nullable=True)
    user_type = Column(String, default="athlete")  # athlete, coach, gym, fan
    category = Column(String, nullable=True)  # martial art, e.g. muay thai, boxing, bjj
    weight = Column(Float, nullable=True)
    amateur_fights = Column(Integer, nullable=True)
    professional_fights = Column(Integer, nullable=True)
    experience_level = Column(String, nullable=True)
    athlete_status = Column(String, nullable=True)
    gender = Column(String, nullable=True)
    location = Column(String, nullable=True)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
