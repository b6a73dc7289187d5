import logging
from typing import Optional
from sqlalchemy.orm import Session

from ringconnect.core.exceptions import ConflictError
from ringconnect.core.security import verify_password
from ringconnect.modules.auth.models.revoked_token import RevokedToken
from ringconnect.modules.auth.schemas.auth import RegisterRequest
from ringconnect.modules.profiles.models.user import User
from ringconnect.modules.profiles.services.user import create_user, get_user_by_email, get_user_by_username

logger = logging.getLogger("app")

def register_user(db: Session, data: RegisterRequest) -> User:
    """Create a password account; email and username must be free"""
    if get_user_by_email(db, data.email):
        raise ConflictError("Email already registered", details={"field": "email"})
    if get_user_by_username(db, data.username):
        raise ConflictError("Username already taken", details={"field": "username"})

    user = create_user(
        db,
        email=data.email,
        username=data.username,
        password=data.password,
        full_name=data.full_name,
        user_type=data.user_type,
    )
    logger.info(f"Registered user {user.id} ({user.username})")
    return user

def authenticate(db: Session, login: str, password: str) -> Optional[User]:
    """Check credentials; login may be an email or a username"""
    user = get_user_by_email(db, login) if "@" in login else get_user_by_username(db, login)
    if not user:
        logger.info(f"Login failed: no account for {login}")
        return None
    if not verify_password(password, user.hashed_password):
        logger.info(f"Login failed: wrong password for {user.id}")
        return None
    if not user.is_active:
        logger.info(f"Login failed: user {user.id} is inactive")
        return None
    return user

def is_token_revoked(db: Session, jti: str) -> bool:
    return db.query(RevokedToken).filter(RevokedToken.jti == jti).first() is not None

def revoke_token(db: Session, jti: str, user_id: str) -> None:
    """Record a token id so it is refused from now on"""
    if is_token_revoked(db, jti):
        return
    db.add(RevokedToken(jti=jti, user_id=user_id))
    db.commit()
    logger.info(f"Revoked token {jti} for user {user_id}")
