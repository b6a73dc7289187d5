from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from ringconnect.modules.profiles.schemas.user import UserSummary

class GymBase(BaseModel):
    description: Optional[str] = None
    address: Optional[str] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    monthly_fee: Optional[float] = Field(default=None, ge=0)
    private_class_fee: Optional[float] = Field(default=None, ge=0)

class GymCreate(GymBase):
    name: str = Field(min_length=1, max_length=120)

class GymUpdate(GymBase):
    name: Optional[str] = Field(default=None, min_length=1, max_length=120)

class Gym(GymBase):
    """Gym model returned to client"""
    id: str
    owner_id: str
    name: str
    logo_url: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class GymDetail(Gym):
    owner: Optional[UserSummary] = None
    follower_count: int = 0
    is_following: bool = False
