from typing import Literal, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict

from ringconnect.modules.profiles.schemas.user import UserSummary

VideoStatus = Literal["pending", "approved", "rejected"]

class Video(BaseModel):
    """Gallery video returned to client"""
    id: str
    user_id: str
    title: str
    description: Optional[str] = None
    video_url: str
    thumbnail_url: Optional[str] = None
    status: VideoStatus = "pending"
    created_at: datetime
    owner: Optional[UserSummary] = None

    model_config = ConfigDict(from_attributes=True)
