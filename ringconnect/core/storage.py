import logging
import mimetypes
from pathlib import Path
from typing import Optional, Tuple

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ringconnect.core.config import settings

logger = logging.getLogger(__name__)

class R2Storage:
    """
    Object storage on Cloudflare R2.

    When R2 credentials are not configured every operation works against the
    local upload directory instead, under the same keys.
    """

    def __init__(self, upload_directory: Optional[str] = None):
        """Initialize the R2 client with settings from config"""
        self.client = None
        self.bucket = settings.R2_BUCKET_NAME
        self.public_url = settings.R2_PUBLIC_URL
        self.base_url = settings.BASE_URL
        self.local_root = Path(upload_directory or settings.UPLOAD_DIRECTORY)

        # Enable R2 client initialization if all required settings are present
        if all([settings.R2_ENDPOINT, settings.R2_ACCESS_KEY_ID, settings.R2_SECRET_ACCESS_KEY]):
            try:
                logger.info(f"Creating S3 client for R2 bucket '{self.bucket}' at {settings.R2_ENDPOINT}")
                self.client = boto3.client(
                    's3',
                    endpoint_url=settings.R2_ENDPOINT,
                    aws_access_key_id=settings.R2_ACCESS_KEY_ID,
                    aws_secret_access_key=settings.R2_SECRET_ACCESS_KEY
                )
            except (BotoCoreError, ValueError) as e:
                logger.error(f"Failed to create S3 client: {str(e)}")
                logger.warning("R2 storage will not be available, using local storage")
        else:
            logger.warning(f"R2 storage not configured, files are stored under {self.local_root}")

    def public_url_for(self, key: str) -> str:
        """URL clients use to fetch a stored object"""
        if self.client and self.public_url:
            return f"{self.public_url.rstrip('/')}/{key}"
        # Served by the media proxy endpoint
        return f"{self.base_url}{settings.API_V1_STR}/media/{key}"

    def put(self, key: str, content: bytes, content_type: Optional[str] = None) -> str:
        """Store bytes under ``key`` and return the public URL"""
        if self.client:
            logger.info(f"[UPLOAD] Putting {len(content)} bytes to R2 bucket '{self.bucket}' with key '{key}'")
            self.client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=content,
                ContentType=content_type or 'application/octet-stream'
            )
        else:
            local_path = self.local_root / key
            local_path.parent.mkdir(parents=True, exist_ok=True)
            local_path.write_bytes(content)
            logger.info(f"[UPLOAD] Saved {len(content)} bytes locally at {local_path}")
        return self.public_url_for(key)

    def get(self, key: str) -> Tuple[bytes, str]:
        """
        Fetch an object's bytes and content type.

        R2 is tried first; a miss there falls back to local storage.
        Raises FileNotFoundError when neither has the key.
        """
        if self.client:
            try:
                response = self.client.get_object(Bucket=self.bucket, Key=key)
                return response["Body"].read(), response.get("ContentType") or "application/octet-stream"
            except (BotoCoreError, ClientError) as e:
                logger.warning(f"Failed to retrieve {key} from R2: {str(e)}. Falling back to local storage.")

        local_path = self.local_root / key
        # Keys never escape the upload directory
        if not local_path.resolve().is_relative_to(self.local_root.resolve()) or not local_path.is_file():
            raise FileNotFoundError(key)
        content_type = mimetypes.guess_type(local_path.name)[0] or "application/octet-stream"
        return local_path.read_bytes(), content_type

    def delete(self, key: str) -> bool:
        """Delete an object; returns False when nothing was removed"""
        if self.client:
            try:
                self.client.delete_object(Bucket=self.bucket, Key=key)
                logger.info(f"Deleted {key} from R2")
                return True
            except (BotoCoreError, ClientError) as e:
                logger.error(f"Failed to delete {key} from R2: {str(e)}")
                return False

        local_path = self.local_root / key
        if local_path.is_file():
            local_path.unlink()
            return True
        return False

    def key_from_url(self, url: str) -> Optional[str]:
        """Reverse of public_url_for"""
        proxy_prefix = f"{self.base_url}{settings.API_V1_STR}/media/"
        if self.public_url and url.startswith(f"{self.public_url.rstrip('/')}/"):
            return url[len(self.public_url.rstrip('/')) + 1:]
        if url.startswith(proxy_prefix):
            return url[len(proxy_prefix):]
        return None

# Global instance for app-wide usage
r2_storage = R2Storage()
