from typing import List, Optional
import uuid
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ringconnect.core.exceptions import ConflictError, NotFoundError
from ringconnect.modules.gyms.models.gym import Gym, GymFollower
from ringconnect.modules.gyms.schemas.gym import GymCreate, GymDetail, GymUpdate
from ringconnect.modules.messages.models.message import ChatMessage
from ringconnect.modules.posts.models.post import Post
from ringconnect.modules.profiles.services.user import get_user_summaries
from ringconnect.modules.training_logs.models.training_log import TrainingLog

logger = logging.getLogger(__name__)

def get_gym(db: Session, gym_id: str) -> Optional[Gym]:
    """Get gym by ID"""
    return db.query(Gym).filter(Gym.id == gym_id).first()

def list_gyms(db: Session, search: Optional[str] = None, skip: int = 0, limit: int = 50) -> List[Gym]:
    """Gyms by name, optionally filtered by a name fragment"""
    query = db.query(Gym)
    if search:
        query = query.filter(Gym.name.ilike(f"%{search.strip()}%"))
    return query.order_by(Gym.name).offset(skip).limit(limit).all()

def get_gym_detail(db: Session, gym: Gym, viewer_id: Optional[str] = None) -> GymDetail:
    """Gym with owner, follower count and the viewer's follow state"""
    follower_count = db.query(GymFollower).filter(GymFollower.gym_id == gym.id).count()
    following = bool(viewer_id) and db.query(GymFollower).filter(
        GymFollower.gym_id == gym.id,
        GymFollower.user_id == viewer_id,
    ).first() is not None

    detail = GymDetail.model_validate(gym)
    detail.owner = get_user_summaries(db, [gym.owner_id]).get(gym.owner_id)
    detail.follower_count = follower_count
    detail.is_following = following
    return detail

def create_gym(db: Session, gym_in: GymCreate, owner_id: str) -> Gym:
    gym = Gym(id=str(uuid.uuid4()), owner_id=owner_id, **gym_in.model_dump())
    db.add(gym)
    db.commit()
    db.refresh(gym)
    logger.info(f"User {owner_id} created gym {gym.id} ({gym.name})")
    return gym

def update_gym(db: Session, gym: Gym, gym_in: GymUpdate) -> Gym:
    for field, value in gym_in.model_dump(exclude_unset=True).items():
        setattr(gym, field, value)
    db.add(gym)
    db.commit()
    db.refresh(gym)
    return gym

def set_logo(db: Session, gym: Gym, logo_url: str) -> Gym:
    gym.logo_url = logo_url
    db.add(gym)
    db.commit()
    db.refresh(gym)
    return gym

def delete_gym(db: Session, gym: Gym) -> None:
    """Delete a gym; posts, training logs and chats keep their rows without the gym link"""
    gym_id = gym.id
    db.query(GymFollower).filter(GymFollower.gym_id == gym_id).delete(synchronize_session=False)
    for model in (Post, TrainingLog, ChatMessage):
        db.query(model).filter(model.gym_id == gym_id).update({"gym_id": None}, synchronize_session=False)
    db.delete(gym)
    db.commit()
    logger.info(f"Deleted gym {gym_id}")

def follow_gym(db: Session, gym: Gym, user_id: str) -> GymFollower:
    """Follow a gym; raises ConflictError when already following"""
    existing = db.query(GymFollower).filter(GymFollower.gym_id == gym.id, GymFollower.user_id == user_id).first()
    if existing:
        raise ConflictError("Already following this gym")

    follower = GymFollower(id=str(uuid.uuid4()), gym_id=gym.id, user_id=user_id)
    db.add(follower)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Already following this gym")
    db.refresh(follower)
    return follower

def unfollow_gym(db: Session, gym: Gym, user_id: str) -> None:
    """Unfollow a gym; raises NotFoundError when not following"""
    deleted = db.query(GymFollower).filter(
        GymFollower.gym_id == gym.id,
        GymFollower.user_id == user_id,
    ).delete(synchronize_session=False)
    if not deleted:
        raise NotFoundError("Gym follow")
    db.commit()
