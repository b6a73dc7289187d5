from sqlalchemy import Column, String, DateTime, Text, ForeignKey, JSON

from ringconnect.db.session import Base
from ringconnect.db.time import utcnow

class Post(Base):
    __tablename__ = "posts"

    id = Column(String, primary_key=True, index=True)
    author_id = Column(String, ForeignKey("users.id"), index=True, nullable=False)
    content = Column(Text, default="")
    caption = Column(Text, nullable=True)
    post_type = Column(String, default="post")  # post, shared, training

    # Unified media fields
    media_url = Column(String, nullable=True)
    media_type = Column(String, nullable=True)  # image, video, link
    link_url = Column(String, nullable=True)
    link_preview = Column(JSON, nullable=True)  # title, description, image, site, url

    # Legacy single-media fields, kept for records that predate media_url/media_type
    image_url = Column(String, nullable=True)
    video_url = Column(String, nullable=True)

    # Rounds (reshares) point at the original post and never carry media of their own
    shared_from_post_id = Column(String, nullable=True, index=True)  # no FK: rounds outlive their original
    gym_id = Column(String, ForeignKey("gyms.id"), nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
