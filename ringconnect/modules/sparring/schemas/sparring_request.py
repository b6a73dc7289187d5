from typing import Literal, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from ringconnect.modules.profiles.schemas.user import UserSummary

SparringStatus = Literal["pending", "accepted", "declined", "cancelled"]
SparringDirection = Literal["incoming", "outgoing"]

class SparringRequestCreate(BaseModel):
    requested_id: str
    message: Optional[str] = Field(default=None, max_length=1000)

class SparringStatusUpdate(BaseModel):
    status: Literal["accepted", "declined", "cancelled"]

class SparringRequest(BaseModel):
    """Sparring request returned to client"""
    id: str
    requester_id: str
    requested_id: str
    message: Optional[str] = None
    status: SparringStatus
    created_at: datetime
    updated_at: Optional[datetime] = None
    requester: Optional[UserSummary] = None
    requested: Optional[UserSummary] = None

    model_config = ConfigDict(from_attributes=True)
