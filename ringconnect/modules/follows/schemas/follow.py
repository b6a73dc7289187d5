from typing import List
from datetime import datetime
from pydantic import BaseModel, ConfigDict

from ringconnect.modules.profiles.schemas.user import UserSummary

class Follow(BaseModel):
    """Follow (torcida) model returned to client"""
    id: str
    follower_id: str
    followed_id: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

class FollowStatus(BaseModel):
    is_following: bool

class FollowStats(BaseModel):
    followers: int
    following: int

class FollowList(BaseModel):
    items: List[UserSummary]
    total: int
