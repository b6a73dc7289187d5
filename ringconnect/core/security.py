# Implements security-related functionality:
# JWT token generation and verification
# Password hashing and verification using bcrypt
# Provides core security functions used by the authentication module

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Union
import uuid
import logging

from jose import jwt, JWTError
from passlib.context import CryptContext

from ringconnect.core.config import settings

logger = logging.getLogger("app")

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

def create_access_token(subject: Union[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {"exp": expire, "sub": str(subject), "jti": uuid.uuid4().hex}
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Decode a token and return its claims, or None when invalid or expired"""
    try:
        payload = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM]
        )
    except JWTError as e:
        logger.warning(f"JWT verification error: {e}")
        return None

    if payload.get("sub") is None:
        logger.warning("Token payload missing 'sub' field")
        return None

    return payload
