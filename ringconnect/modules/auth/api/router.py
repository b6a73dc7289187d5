"""Authentication router for password accounts"""
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session
from typing import Any, Dict

from ringconnect.core import security
from ringconnect.core.exceptions import ConflictError
from ringconnect.db.session import get_db
from ringconnect.deps import get_current_user, oauth2_scheme
from ringconnect.modules.auth.schemas.auth import Token, RegisterRequest, SessionInfo
from ringconnect.modules.auth.services.auth import authenticate, register_user, revoke_token
from ringconnect.modules.profiles.models.user import User
from ringconnect.modules.profiles.schemas.user import User as UserSchema, UserSummary

router = APIRouter()

@router.post("/register", response_model=UserSchema, status_code=status.HTTP_201_CREATED)
def register(*, db: Session = Depends(get_db), data: RegisterRequest) -> Any:
    """Create an account"""
    try:
        return register_user(db, data)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

@router.post("/login", response_model=Token)
def login(
    db: Session = Depends(get_db),
    form_data: OAuth2PasswordRequestForm = Depends(),
) -> Token:
    """OAuth2 password flow; username may be the email or the username"""
    user = authenticate(db, form_data.username, form_data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return Token(access_token=security.create_access_token(user.id))

@router.get("/session", response_model=SessionInfo)
def read_session(current_user: User = Depends(get_current_user)) -> Any:
    """Current user id and profile summary"""
    return SessionInfo(user_id=current_user.id, user=UserSummary.model_validate(current_user))

@router.post("/logout", response_model=Dict[str, Any])
def logout(
    db: Session = Depends(get_db),
    token: str = Depends(oauth2_scheme),
    current_user: User = Depends(get_current_user),
) -> Dict[str, Any]:
    """Revoke the presented token"""
    payload = security.decode_access_token(token) or {}
    jti = payload.get("jti")
    if jti:
        revoke_token(db, jti, current_user.id)

    return {"message": "Logged out", "revoked": bool(jti)}
