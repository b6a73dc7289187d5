from typing import List, Optional
import uuid
import logging
from sqlalchemy import func, case
from sqlalchemy.orm import Session

from ringconnect.core.exceptions import NotFoundError
from ringconnect.modules.gyms.models.gym import Gym
from ringconnect.modules.training_logs.models.training_log import TrainingLog
from ringconnect.modules.training_logs.schemas.training_log import TrainingLogCreate, TrainingStats

logger = logging.getLogger(__name__)

def get_training_log(db: Session, log_id: str) -> Optional[TrainingLog]:
    return db.query(TrainingLog).filter(TrainingLog.id == log_id).first()

def create_training_log(db: Session, log_in: TrainingLogCreate, user_id: str) -> TrainingLog:
    """Record a training session; the gym, when given, must exist"""
    if log_in.gym_id and not db.query(Gym).filter(Gym.id == log_in.gym_id).first():
        raise NotFoundError("Gym", log_in.gym_id)

    log = TrainingLog(id=str(uuid.uuid4()), user_id=user_id, **log_in.model_dump())
    db.add(log)
    db.commit()
    db.refresh(log)
    logger.info(f"User {user_id} logged {log.duration_hours}h of training on {log.training_date}")
    return log

def get_user_training_logs(db: Session, user_id: str, skip: int = 0, limit: int = 50) -> List[TrainingLog]:
    """Newest training day first"""
    return (
        db.query(TrainingLog)
        .filter(TrainingLog.user_id == user_id)
        .order_by(TrainingLog.training_date.desc(), TrainingLog.created_at.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )

def get_training_stats(db: Session, user_id: str) -> TrainingStats:
    sessions, total_hours, sparring, light = (
        db.query(
            func.count(TrainingLog.id),
            func.coalesce(func.sum(TrainingLog.duration_hours), 0.0),
            func.coalesce(func.sum(case((TrainingLog.did_sparring == True, 1), else_=0)), 0),  # noqa: E712
            func.coalesce(func.sum(case((TrainingLog.did_sparring_light == True, 1), else_=0)), 0),  # noqa: E712
        )
        .filter(TrainingLog.user_id == user_id)
        .one()
    )
    return TrainingStats(
        sessions=sessions,
        total_hours=round(float(total_hours), 2),
        sparring_sessions=int(sparring),
        light_sparring_sessions=int(light),
    )

def delete_training_log(db: Session, log: TrainingLog) -> None:
    db.delete(log)
    db.commit()
