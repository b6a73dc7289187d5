from typing import Any, List, Optional
import logging

from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File, Form, Query
from sqlalchemy.orm import Session

from ringconnect.core.exceptions import RingConnectError, to_http_exception
from ringconnect.db.session import get_db
from ringconnect.deps import get_current_user
from ringconnect.modules.profiles.models.user import User
from ringconnect.modules.videos.models.video import Video
from ringconnect.modules.videos.schemas.video import Video as VideoSchema
from ringconnect.modules.videos.services.video import (
    create_video, delete_video, get_video, list_videos, present_videos
)
from ringconnect.modules.media.service import VIDEOS, MediaService, get_media_service

logger = logging.getLogger(__name__)

router = APIRouter()

def _validate_video(db: Session, video_id: str) -> Video:
    video = get_video(db, video_id)
    if not video:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Video not found",
        )
    return video

@router.post("", response_model=VideoSchema, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=VideoSchema, status_code=status.HTTP_201_CREATED)
def upload_video(
    *,
    db: Session = Depends(get_db),
    title: str = Form(...),
    description: Optional[str] = Form(None),
    file: UploadFile = File(...),
    current_user: User = Depends(get_current_user),
    media_service: MediaService = Depends(get_media_service),
) -> Any:
    """
    Upload a training video to the gallery.
    Only video files are accepted, up to the video size limit.
    """
    title = title.strip()
    if not title:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="A video needs a title",
        )

    try:
        stored = media_service.store(file.file.read(), file.filename, file.content_type, VIDEOS)
    except RingConnectError as e:
        raise to_http_exception(e)
    if stored.media_type != "video":
        media_service.delete_media(stored.url)
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="Only video files can be added to the gallery",
        )

    video = create_video(db, current_user.id, title, (description or "").strip() or None, stored.url)
    return present_videos(db, [video])[0]

@router.get("", response_model=List[VideoSchema])
@router.get("/", response_model=List[VideoSchema])
def read_videos(
    db: Session = Depends(get_db),
    user_id: Optional[str] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
) -> Any:
    return list_videos(db, user_id, skip, limit)

@router.get("/{video_id}", response_model=VideoSchema)
def read_video(
    *,
    db: Session = Depends(get_db),
    video_id: str,
) -> Any:
    return present_videos(db, [_validate_video(db, video_id)])[0]

@router.delete("/{video_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_video_by_id(
    *,
    db: Session = Depends(get_db),
    video_id: str,
    current_user: User = Depends(get_current_user),
    media_service: MediaService = Depends(get_media_service),
) -> None:
    """Remove a video from the gallery together with its stored file"""
    video = _validate_video(db, video_id)
    if video.user_id != current_user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions",
        )
    video_url = video.video_url
    delete_video(db, video)
    if not media_service.delete_media(video_url):
        logger.warning(f"Stored file for video {video_id} could not be removed")
