from sqlalchemy import Column, String, DateTime, Text, ForeignKey, UniqueConstraint

from ringconnect.db.session import Base
from ringconnect.db.time import utcnow

class Comment(Base):
    __tablename__ = "comments"

    id = Column(String, primary_key=True, index=True)
    content = Column(Text, nullable=False)
    author_id = Column(String, ForeignKey("users.id"), nullable=False)
    post_id = Column(String, ForeignKey("posts.id"), index=True, nullable=False)
    parent_id = Column(String, ForeignKey("comments.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

class CommentLike(Base):
    __tablename__ = "comment_likes"

    id = Column(String, primary_key=True, index=True)
    comment_id = Column(String, ForeignKey("comments.id"), index=True, nullable=False)
    user_id = Column(String, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)

    __table_args__ = (
        UniqueConstraint("comment_id", "user_id", name="unique_comment_like"),
    )
