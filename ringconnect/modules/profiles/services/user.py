from typing import Dict, Iterable, List, Optional
import uuid
from sqlalchemy import or_
from sqlalchemy.orm import Session

from ringconnect.core.security import get_password_hash
from ringconnect.modules.profiles.models.user import User
from ringconnect.modules.profiles.schemas.user import UserUpdate, UserSummary

def get_user(db: Session, user_id: str) -> Optional[User]:
    """Get user by ID"""
    return db.query(User).filter(User.id == user_id).first()

def get_user_by_username(db: Session, username: str) -> Optional[User]:
    """Get user by username"""
    return db.query(User).filter(User.username == username).first()

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """Get user by email"""
    return db.query(User).filter(User.email == email.lower()).first()

def get_user_summaries(db: Session, user_ids: Iterable[str]) -> Dict[str, UserSummary]:
    """Resolve a batch of user IDs to author summaries keyed by ID"""
    ids = set(user_ids)
    if not ids:
        return {}
    users = db.query(User).filter(User.id.in_(ids)).all()
    return {user.id: UserSummary.model_validate(user) for user in users}

def create_user(db: Session, email: str, username: str, password: str, full_name: Optional[str] = None, user_type: str = "athlete") -> User:
    """Create a new user with a hashed password"""
    user = User(
        id=str(uuid.uuid4()),
        email=email.lower(),
        username=username,
        hashed_password=get_password_hash(password),
        full_name=full_name,
        user_type=user_type,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user

def search_users(db: Session, query: str, exclude_id: Optional[str] = None, limit: int = 20) -> List[User]:
    """Search users by name or username; every term must match"""
    q = db.query(User).filter(User.is_active == True)  # noqa: E712
    for term in query.lower().split():
        search_pattern = f"%{term}%"
        q = q.filter(
            or_(
                User.full_name.ilike(search_pattern),
                User.username.ilike(search_pattern),
            )
        )
    if exclude_id:
        q = q.filter(User.id != exclude_id)
    return q.order_by(User.username).limit(limit).all()

def update_user(db: Session, user: User, user_in: UserUpdate) -> User:
    """Update user"""
    update_data = user_in.model_dump(exclude_unset=True)

    # Handle password update separately to ensure proper hashing
    if update_data.get("password"):
        update_data["hashed_password"] = get_password_hash(update_data.pop("password"))
    update_data.pop("password", None)

    for field, value in update_data.items():
        setattr(user, field, value)

    db.add(user)
    db.commit()
    db.refresh(user)

    return user

def set_avatar(db: Session, user: User, avatar_url: str) -> User:
    """Point the user's avatar at a stored file"""
    user.avatar_url = avatar_url
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
