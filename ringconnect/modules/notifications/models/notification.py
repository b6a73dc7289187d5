from sqlalchemy import Column, String, DateTime, Boolean, ForeignKey, Text

from ringconnect.db.session import Base
from ringconnect.db.time import utcnow

class Notification(Base):
    __tablename__ = "notifications"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id"), index=True, nullable=False)
    actor_id = Column(String, ForeignKey("users.id"), nullable=True)  # The user who triggered the notification
    type = Column(String, nullable=False)  # post_reaction, post_comment, user_follow, chat_message, ...
    content = Column(Text)
    related_post_id = Column(String, nullable=True)
    related_comment_id = Column(String, nullable=True)
    related_user_id = Column(String, nullable=True)
    related_booking_id = Column(String, nullable=True)
    related_sparring_id = Column(String, nullable=True)
    read = Column(Boolean, default=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)
