from typing import Optional
from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

class ChampionshipCreate(BaseModel):
    championship_name: str = Field(min_length=1, max_length=200)
    year: int = Field(ge=1900)
    is_champion: bool = False
    position: Optional[int] = Field(default=None, ge=1)
    opponent_name: Optional[str] = Field(default=None, max_length=200)
    notes: Optional[str] = Field(default=None, max_length=2000)

    @field_validator("championship_name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Championship name cannot be empty")
        return v

    @field_validator("year")
    @classmethod
    def year_not_in_future(cls, v: int) -> int:
        if v > date.today().year:
            raise ValueError("Championship year cannot be in the future")
        return v

    @model_validator(mode="after")
    def champions_finish_first(self) -> "ChampionshipCreate":
        if self.is_champion:
            self.position = 1
        return self

class Championship(BaseModel):
    """Championship entry returned to client"""
    id: str
    user_id: str
    championship_name: str
    year: int
    is_champion: bool
    position: Optional[int] = None
    opponent_name: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

class ChampionshipRecord(BaseModel):
    """Competition summary for a profile"""
    championships: int = 0
    titles: int = 0
    podiums: int = 0
