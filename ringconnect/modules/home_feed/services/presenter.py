"""
Media selection for feed items.

Posts created before the unified media_url/media_type fields only carry
image_url, video_url or link_url, so both shapes must render. The rules in
``select_media`` are checked in order and the first match wins.
"""
import logging
from typing import Optional
from urllib.parse import parse_qs, urlparse

from ringconnect.core.exceptions import RecordDecodeError, parse_record
from ringconnect.modules.home_feed.schemas.feed import (
    EmbeddedVideoMedia,
    ImageMedia,
    LinkCardMedia,
    MediaDirective,
    NoMedia,
    SharedPost,
    SharedQuoteMedia,
    VideoMedia,
)
from ringconnect.modules.link_preview.schemas import LinkPreview
from ringconnect.modules.posts.schemas.post import Post

logger = logging.getLogger(__name__)

YOUTUBE_SHORT_HOSTS = ("youtu.be", "www.youtu.be")
YOUTUBE_EMBED_URL = "https://www.youtube.com/embed/{video_id}"


def youtube_video_id(url: str) -> Optional[str]:
    """
    Video ID of a YouTube link, or None if the URL is not one.

    ``youtu.be/<id>`` short links carry the ID as the last path segment;
    ``youtube.com/watch?v=<id>`` links carry it in the ``v`` parameter.
    """
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return None
    host = (parsed.hostname or "").lower()

    if host in YOUTUBE_SHORT_HOSTS:
        segments = [s for s in parsed.path.split("/") if s]
        return segments[-1] if segments else None

    if host == "youtube.com" or host.endswith(".youtube.com"):
        values = parse_qs(parsed.query).get("v")
        return values[0] if values and values[0] else None

    return None


def _link_preview(post: Post) -> Optional[LinkPreview]:
    if not post.link_preview:
        return None
    try:
        return parse_record(LinkPreview, post.link_preview)
    except RecordDecodeError as e:
        logger.warning(f"Ignoring malformed link preview on post {post.id}: {e.details}")
        return None


def select_media(post: Post, shared: Optional[SharedPost] = None) -> MediaDirective:
    """
    Pick how a post's media is rendered.

    Args:
        post: The post being presented
        shared: The resolved original when ``post`` is a round; None if it
            was not found

    Returns:
        One media directive. A round always yields its quoted original, even
        if media fields were somehow stored on the round itself.
    """
    if post.shared_from_post_id:
        return SharedQuoteMedia(shared=shared)

    media_url = post.media_url or post.image_url or post.video_url

    if post.media_type == "image" and media_url:
        return ImageMedia(url=media_url)

    if post.media_type == "video" and media_url:
        return VideoMedia(url=media_url)

    if post.media_type == "link":
        preview = _link_preview(post)
        if preview is not None:
            return LinkCardMedia(url=post.link_url or preview.url, preview=preview)

    if post.image_url:
        return ImageMedia(url=post.image_url)

    if post.video_url:
        video_id = youtube_video_id(post.video_url)
        if video_id:
            return EmbeddedVideoMedia(
                provider="youtube",
                video_id=video_id,
                embed_url=YOUTUBE_EMBED_URL.format(video_id=video_id),
            )
        return VideoMedia(url=post.video_url)

    if post.link_url:
        return LinkCardMedia(url=post.link_url, preview=None)

    return NoMedia()
