from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ringconnect.modules.profiles.schemas.user import UserSummary

class CommentBase(BaseModel):
    content: str = Field(min_length=1, max_length=2000)

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Comment cannot be empty")
        return v

class CommentCreate(CommentBase):
    parent_id: Optional[str] = None

class CommentUpdate(CommentBase):
    pass

class CommentRow(BaseModel):
    """A stored comment plus its like state, before tree building"""
    id: str
    post_id: str
    author_id: str
    content: str
    parent_id: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
    like_count: int = 0
    viewer_has_liked: bool = False

    model_config = ConfigDict(from_attributes=True)

class CommentLikeRow(BaseModel):
    comment_id: str
    user_id: str

    model_config = ConfigDict(from_attributes=True)

class CommentNode(CommentRow):
    """Comment model returned to client, with its direct replies"""
    author: Optional[UserSummary] = None
    replies_count: int = 0
    is_edited: bool = False
    replies: List["CommentNode"] = Field(default_factory=list)

class CommentLikeResult(BaseModel):
    liked: bool
    like_count: int
