from typing import Literal, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, EmailStr, Field

UserType = Literal["athlete", "coach", "gym", "fan"]

class UserBase(BaseModel):
    full_name: Optional[str] = None
    bio: Optional[str] = None
    user_type: Optional[UserType] = None
    category: Optional[str] = None
    weight: Optional[float] = Field(default=None, gt=0)
    amateur_fights: Optional[int] = Field(default=None, ge=0)
    professional_fights: Optional[int] = Field(default=None, ge=0)
    experience_level: Optional[str] = None
    athlete_status: Optional[str] = None
    gender: Optional[str] = None
    location: Optional[str] = None

class UserUpdate(UserBase):
    password: Optional[str] = Field(default=None, min_length=8)

class UserInDBBase(UserBase):
    id: str
    username: str
    avatar_url: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class User(UserInDBBase):
    """User model returned to client"""
    email: EmailStr

class PublicUser(UserInDBBase):
    """Profile of another user (no email)"""
    pass

class UserSummary(BaseModel):
    """Author/actor block embedded in posts, comments and notifications"""
    id: str
    username: str
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
