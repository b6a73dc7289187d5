from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from ringconnect.modules.profiles.schemas.user import UserSummary, UserType

class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"

class TokenPayload(BaseModel):
    sub: str
    jti: Optional[str] = None

class RegisterRequest(BaseModel):
    email: EmailStr
    username: str = Field(min_length=3, max_length=30, pattern=r"^[A-Za-z0-9_.]+$")
    password: str = Field(min_length=8)
    full_name: Optional[str] = None
    user_type: UserType = "athlete"

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Normalize email to lowercase."""
        return v.lower()

class SessionInfo(BaseModel):
    """Identity behind the presented token"""
    user_id: str
    user: UserSummary
