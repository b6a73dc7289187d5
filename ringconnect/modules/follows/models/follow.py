from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint, CheckConstraint

from ringconnect.db.session import Base
from ringconnect.db.time import utcnow

# Directed "torcida" relation: follower_id cheers for followed_id
class Follow(Base):
    __tablename__ = "follows"

    id = Column(String, primary_key=True, index=True)
    follower_id = Column(String, ForeignKey("users.id"), index=True, nullable=False)
    followed_id = Column(String, ForeignKey("users.id"), index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)

    __table_args__ = (
        UniqueConstraint("follower_id", "followed_id", name="unique_follow"),
        CheckConstraint("follower_id != followed_id", name="no_self_follow"),
    )
