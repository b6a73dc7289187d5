from typing import List, Optional
import uuid
import logging
from sqlalchemy.orm import Session

from ringconnect.modules.videos.models.video import Video
from ringconnect.modules.videos.schemas.video import Video as VideoSchema
from ringconnect.modules.profiles.services.user import get_user_summaries

logger = logging.getLogger(__name__)

def get_video(db: Session, video_id: str) -> Optional[Video]:
    return db.query(Video).filter(Video.id == video_id).first()

def create_video(db: Session, user_id: str, title: str, description: Optional[str], video_url: str) -> Video:
    """Register an uploaded video; it waits in the gallery as pending"""
    video = Video(
        id=str(uuid.uuid4()),
        user_id=user_id,
        title=title,
        description=description,
        video_url=video_url,
        status="pending",
    )
    db.add(video)
    db.commit()
    db.refresh(video)
    logger.info(f"User {user_id} added video {video.id} to the gallery")
    return video

def present_videos(db: Session, videos: List[Video]) -> List[VideoSchema]:
    owners = get_user_summaries(db, (v.user_id for v in videos))
    result = []
    for video in videos:
        item = VideoSchema.model_validate(video)
        item.owner = owners.get(video.user_id)
        result.append(item)
    return result

def list_videos(db: Session, user_id: Optional[str] = None, skip: int = 0, limit: int = 50) -> List[VideoSchema]:
    """Gallery newest first, optionally limited to one user"""
    query = db.query(Video)
    if user_id:
        query = query.filter(Video.user_id == user_id)
    videos = query.order_by(Video.created_at.desc(), Video.id.desc()).offset(skip).limit(limit).all()
    return present_videos(db, videos)

def delete_video(db: Session, video: Video) -> None:
    db.delete(video)
    db.commit()
    logger.info(f"Deleted video {video.id}")
