from sqlalchemy import Column, String, DateTime, Text, ForeignKey

from ringconnect.db.session import Base
from ringconnect.db.time import utcnow

class ChatMessage(Base):
    __tablename__ = "chat_messages"

    id = Column(String, primary_key=True, index=True)
    sender_id = Column(String, ForeignKey("users.id"), index=True, nullable=False)
    receiver_id = Column(String, ForeignKey("users.id"), index=True, nullable=False)
    gym_id = Column(String, ForeignKey("gyms.id"), nullable=True)  # Set when the chat started from a gym profile
    message = Column(Text, nullable=False)
    read_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
