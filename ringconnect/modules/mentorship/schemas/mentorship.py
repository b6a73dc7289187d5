from typing import Literal, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from ringconnect.modules.profiles.schemas.user import UserSummary

SessionType = Literal["online", "in_person"]
BookingStatus = Literal["pending", "confirmed", "cancelled", "completed"]

class SessionBase(BaseModel):
    session_type: Optional[SessionType] = None

class SessionCreate(SessionBase):
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    duration_minutes: int = Field(gt=0)
    price: float = Field(ge=0)

class SessionUpdate(SessionBase):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, min_length=1)
    duration_minutes: Optional[int] = Field(default=None, gt=0)
    price: Optional[float] = Field(default=None, ge=0)

class MentorshipSession(SessionCreate):
    """Mentorship session model returned to client"""
    id: str
    coach_id: str
    is_active: bool
    created_at: datetime
    coach: Optional[UserSummary] = None

    model_config = ConfigDict(from_attributes=True)

class BookingCreate(BaseModel):
    scheduled_date: Optional[datetime] = None
    notes: Optional[str] = Field(default=None, max_length=2000)

class BookingStatusUpdate(BaseModel):
    status: Literal["confirmed", "cancelled", "completed"]

class Booking(BaseModel):
    """Booking model returned to client"""
    id: str
    session_id: str
    coach_id: str
    athlete_id: str
    scheduled_date: Optional[datetime] = None
    notes: Optional[str] = None
    status: BookingStatus
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
