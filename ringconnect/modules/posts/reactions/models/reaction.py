from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint

from ringconnect.db.session import Base
from ringconnect.db.time import utcnow

class Reaction(Base):
    __tablename__ = "reactions"

    id = Column(String, primary_key=True, index=True)
    reaction_type = Column(String, nullable=False)  # gowild, cleanhit, championmove, ontarget, tooheavy
    user_id = Column(String, ForeignKey("users.id"), nullable=False)
    post_id = Column(String, ForeignKey("posts.id"), index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)

    __table_args__ = (
        UniqueConstraint("post_id", "user_id", name="unique_post_reaction"),
    )
