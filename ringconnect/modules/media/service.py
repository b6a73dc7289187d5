import logging
import uuid
from pathlib import Path
from typing import Literal, Optional

from fastapi import UploadFile
from pydantic import BaseModel

from ringconnect.core.config import settings
from ringconnect.core.exceptions import InvalidOperationError, MediaValidationError
from ringconnect.core.storage import R2Storage, r2_storage

logger = logging.getLogger(__name__)

MediaKind = Literal["image", "video"]

# Storage buckets, used as key prefixes
AVATARS = "avatars"
GYM_LOGOS = "gym-logos"
POST_MEDIA = "post-media"
VIDEOS = "videos"
BUCKETS = (AVATARS, GYM_LOGOS, POST_MEDIA, VIDEOS)

class StoredMedia(BaseModel):
    url: str
    path: str
    media_type: MediaKind
    content_type: str
    size: int

class MediaService:
    def __init__(self, r2_storage: R2Storage):
        self.r2_storage = r2_storage

    @staticmethod
    def validate_upload(content_type: Optional[str], size: int) -> MediaKind:
        """
        Check an upload against the type and size limits.

        Returns the media kind. Raises MediaValidationError for anything that
        is not image/* or video/*, images over MAX_IMAGE_UPLOAD_SIZE and
        videos over MAX_VIDEO_UPLOAD_SIZE.
        """
        content_type = (content_type or "").lower()
        if content_type.startswith("image/"):
            kind, limit = "image", settings.MAX_IMAGE_UPLOAD_SIZE
        elif content_type.startswith("video/"):
            kind, limit = "video", settings.MAX_VIDEO_UPLOAD_SIZE
        else:
            raise MediaValidationError(
                f"Unsupported file type '{content_type or 'unknown'}'. Only images and videos are allowed",
                details={"content_type": content_type},
            )

        if size > limit:
            raise MediaValidationError(
                f"File too large: {kind}s are limited to {limit // (1024 * 1024)}MB",
                too_large=True,
                details={"size": size, "limit": limit},
            )
        return kind

    def store(self, content: bytes, filename: Optional[str], content_type: Optional[str], bucket: str) -> StoredMedia:
        """Validate and store raw bytes under ``{bucket}/{uuid}{ext}``"""
        if bucket not in BUCKETS:
            raise InvalidOperationError(f"Unknown bucket '{bucket}'", details={"buckets": list(BUCKETS)})

        kind = self.validate_upload(content_type, len(content))
        extension = Path(filename or "").suffix.lower()
        path = f"{bucket}/{uuid.uuid4().hex}{extension}"

        url = self.r2_storage.put(path, content, content_type)
        logger.info(f"Stored {kind} upload ({len(content)} bytes) at {path}")
        return StoredMedia(
            url=url,
            path=path,
            media_type=kind,
            content_type=content_type,
            size=len(content),
        )

    async def upload_media(self, file: UploadFile, bucket: str = POST_MEDIA) -> StoredMedia:
        """Upload a multipart file to storage (R2, or local storage if R2 is not configured)"""
        content = await file.read()
        return self.store(content, file.filename, file.content_type, bucket)

    def get_media(self, path: str):
        """Bytes and content type of a stored file; raises FileNotFoundError"""
        return self.r2_storage.get(path)

    def delete_media(self, url: str) -> bool:
        """Delete a stored file by its public URL"""
        key = self.r2_storage.key_from_url(url)
        if not key:
            logger.warning(f"URL {url} doesn't match any storage URL pattern")
            return False
        return self.r2_storage.delete(key)

def get_media_service() -> MediaService:
    return MediaService(r2_storage)
