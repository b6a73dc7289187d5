from typing import Annotated, List, Literal, Optional, Union
from datetime import datetime
from pydantic import BaseModel, Field

from ringconnect.modules.link_preview.schemas import LinkPreview
from ringconnect.modules.posts.schemas.post import Post
from ringconnect.modules.posts.reactions.schemas.reaction import ReactionSummary
from ringconnect.modules.profiles.schemas.user import UserSummary

class ImageMedia(BaseModel):
    kind: Literal["image"] = "image"
    url: str

class VideoMedia(BaseModel):
    kind: Literal["video"] = "video"
    url: str

class LinkCardMedia(BaseModel):
    kind: Literal["link_card"] = "link_card"
    url: Optional[str] = None
    preview: Optional[LinkPreview] = None  # None for bare legacy links

class EmbeddedVideoMedia(BaseModel):
    kind: Literal["embedded_video"] = "embedded_video"
    provider: str
    video_id: str
    embed_url: str

class SharedQuoteMedia(BaseModel):
    kind: Literal["shared_quote"] = "shared_quote"
    shared: Optional["SharedPost"] = None  # None when the original is gone

class NoMedia(BaseModel):
    kind: Literal["none"] = "none"

MediaDirective = Annotated[
    Union[ImageMedia, VideoMedia, LinkCardMedia, EmbeddedVideoMedia, SharedQuoteMedia, NoMedia],
    Field(discriminator="kind"),
]

class SharedPost(BaseModel):
    """Quoted original shown inside a round"""
    id: str
    author: Optional[UserSummary] = None
    content: str = ""
    caption: Optional[str] = None
    created_at: datetime
    media: MediaDirective = Field(default_factory=NoMedia)

SharedQuoteMedia.model_rebuild()

class FeedItem(BaseModel):
    """Feed item model returned to client"""
    post: Post
    author: Optional[UserSummary] = None
    media: MediaDirective
    reactions: ReactionSummary
    comment_count: int = 0
    share_count: int = 0

class FeedResponse(BaseModel):
    """Feed response model returned to client"""
    items: List[FeedItem]
    total: int
    has_more: bool
