from typing import List, Optional
import uuid
import logging
from sqlalchemy import func, case
from sqlalchemy.orm import Session

from ringconnect.modules.championships.models.championship import Championship
from ringconnect.modules.championships.schemas.championship import ChampionshipCreate, ChampionshipRecord

logger = logging.getLogger(__name__)

# Placings that count as a podium finish
PODIUM = 3

def get_championship(db: Session, championship_id: str) -> Optional[Championship]:
    return db.query(Championship).filter(Championship.id == championship_id).first()

def create_championship(db: Session, championship_in: ChampionshipCreate, user_id: str) -> Championship:
    championship = Championship(id=str(uuid.uuid4()), user_id=user_id, **championship_in.model_dump())
    db.add(championship)
    db.commit()
    db.refresh(championship)
    logger.info(f"User {user_id} added championship {championship.championship_name} ({championship.year})")
    return championship

def get_user_championships(db: Session, user_id: str) -> List[Championship]:
    """Most recent year first"""
    return (
        db.query(Championship)
        .filter(Championship.user_id == user_id)
        .order_by(Championship.year.desc(), Championship.created_at.desc())
        .all()
    )

def get_championship_record(db: Session, user_id: str) -> ChampionshipRecord:
    total, titles, podiums = (
        db.query(
            func.count(Championship.id),
            func.coalesce(func.sum(case((Championship.is_champion == True, 1), else_=0)), 0),  # noqa: E712
            func.coalesce(func.sum(case((Championship.position <= PODIUM, 1), else_=0)), 0),
        )
        .filter(Championship.user_id == user_id)
        .one()
    )
    return ChampionshipRecord(championships=total, titles=int(titles), podiums=int(podiums))

def delete_championship(db: Session, championship: Championship) -> None:
    db.delete(championship)
    db.commit()
    logger.info(f"Deleted championship {championship.id}")
