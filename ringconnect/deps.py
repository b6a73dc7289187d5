from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from pydantic import ValidationError
from sqlalchemy.orm import Session

from ringconnect.core import security
from ringconnect.core.config import settings
from ringconnect.db.session import get_db
from ringconnect.modules.auth.schemas.auth import TokenPayload
from ringconnect.modules.auth.services.auth import is_token_revoked
from ringconnect.modules.profiles.models.user import User
from ringconnect.modules.profiles.services.user import get_user

# OAuth2 token URL
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_STR}/auth/login")
optional_oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_STR}/auth/login", auto_error=False)

def _credentials_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

def resolve_token(db: Session, token: str) -> Optional[User]:
    """
    Map a bearer token to its active user, or None when the token is
    malformed, expired, revoked or points at a missing/inactive user
    """
    payload = security.decode_access_token(token)
    if payload is None:
        return None
    try:
        token_data = TokenPayload(**payload)
    except ValidationError:
        return None

    if token_data.jti and is_token_revoked(db, token_data.jti):
        return None

    user = get_user(db, user_id=token_data.sub)
    if not user or not user.is_active:
        return None
    return user

def get_current_user(db: Session = Depends(get_db), token: str = Depends(oauth2_scheme)) -> User:
    """
    Dependency for getting current authenticated user
    """
    user = resolve_token(db, token)
    if user is None:
        raise _credentials_error()
    return user

def get_optional_user(
    db: Session = Depends(get_db),
    token: Optional[str] = Depends(optional_oauth2_scheme),
) -> Optional[User]:
    """
    Dependency for endpoints that also serve anonymous viewers.
    A missing token yields None; a bad one is still rejected.
    """
    if not token:
        return None
    user = resolve_token(db, token)
    if user is None:
        raise _credentials_error()
    return user
