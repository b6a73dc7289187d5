from fastapi import APIRouter, HTTPException, Depends, File, Query, UploadFile, status
from fastapi.responses import Response
import logging

from ringconnect.core.config import settings
from ringconnect.core.exceptions import RingConnectError, to_http_exception
from ringconnect.deps import get_current_user
from ringconnect.modules.media.service import BUCKETS, POST_MEDIA, MediaService, StoredMedia, get_media_service
from ringconnect.modules.profiles.models.user import User

logger = logging.getLogger(__name__)

router = APIRouter(prefix=f"{settings.API_V1_STR}/media", tags=["media"])

@router.post("/upload", response_model=StoredMedia, status_code=status.HTTP_201_CREATED)
async def upload_media(
    file: UploadFile = File(...),
    bucket: str = Query(POST_MEDIA, description=f"One of: {', '.join(BUCKETS)}"),
    current_user: User = Depends(get_current_user),
    media_service: MediaService = Depends(get_media_service),
):
    """Upload an image or video and get back its public URL"""
    try:
        stored = await media_service.upload_media(file, bucket)
    except RingConnectError as e:
        raise to_http_exception(e)
    logger.info(f"User {current_user.id} uploaded {stored.path}")
    return stored

@router.get("/{path:path}")
def serve_media(path: str, media_service: MediaService = Depends(get_media_service)):
    try:
        content, content_type = media_service.get_media(path)
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail="File not found")
    except Exception as e:
        logger.error(f"An unexpected error occurred while serving media file {path}: {str(e)}")
        raise HTTPException(status_code=500, detail="An unexpected error occurred while serving media file.")

    return Response(
        content=content,
        media_type=content_type,
        headers={"Cache-Control": "public, max-age=86400"},
    )
