from typing import Any, Dict, Literal, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

PostType = Literal["post", "shared", "training"]
MediaType = Literal["image", "video", "link"]

class PostBase(BaseModel):
    content: str = ""
    caption: Optional[str] = None

class PostCreate(PostBase):
    media_url: Optional[str] = None
    media_type: Optional[MediaType] = None
    link_url: Optional[str] = None
    link_preview: Optional[Dict[str, Any]] = None
    gym_id: Optional[str] = None
    post_type: PostType = "post"

class PostUpdate(BaseModel):
    content: Optional[str] = None
    caption: Optional[str] = None

class ShareCreate(BaseModel):
    """A round: caption only, media always comes from the original"""
    caption: Optional[str] = Field(default=None, max_length=2000)

class Post(PostBase):
    """Stored post as returned to the client"""
    id: str
    author_id: str
    post_type: Optional[str] = "post"
    media_url: Optional[str] = None
    media_type: Optional[str] = None
    link_url: Optional[str] = None
    link_preview: Optional[Dict[str, Any]] = None
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    shared_from_post_id: Optional[str] = None
    gym_id: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class ShareCount(BaseModel):
    post_id: str
    count: int
