from sqlalchemy import Column, String, DateTime, Text, Integer, Boolean, ForeignKey

from ringconnect.db.session import Base
from ringconnect.db.time import utcnow

class Championship(Base):
    __tablename__ = "championships"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id"), index=True, nullable=False)
    championship_name = Column(String, nullable=False)
    year = Column(Integer, nullable=False)
    is_champion = Column(Boolean, default=False)
    position = Column(Integer, nullable=True)  # final placing, 1 for champions
    opponent_name = Column(String, nullable=True)  # opponent in the final
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
