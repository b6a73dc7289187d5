from typing import Optional
from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, Field

class TrainingLogCreate(BaseModel):
    training_date: date
    duration_hours: float = Field(gt=0, le=24)
    gym_id: Optional[str] = None
    did_sparring: bool = False
    did_sparring_light: bool = False
    notes: Optional[str] = Field(default=None, max_length=2000)

class TrainingLog(TrainingLogCreate):
    """Training log model returned to client"""
    id: str
    user_id: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

class TrainingStats(BaseModel):
    sessions: int = 0
    total_hours: float = 0.0
    sparring_sessions: int = 0
    light_sparring_sessions: int = 0
