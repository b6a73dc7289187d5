from typing import Any, List, Optional
import logging

from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File, Form, Query
from sqlalchemy.orm import Session

from ringconnect.core.exceptions import RingConnectError, to_http_exception
from ringconnect.db.session import get_db
from ringconnect.deps import get_current_user, get_optional_user
from ringconnect.modules.profiles.models.user import User
from ringconnect.modules.posts.models.post import Post
from ringconnect.modules.posts.schemas.post import PostCreate, PostUpdate, ShareCount, ShareCreate
from ringconnect.modules.posts.services.post import (
    get_post, get_posts, get_user_posts, create_post, update_post,
    delete_post, share_post, count_shares
)
from ringconnect.modules.home_feed.schemas.feed import FeedItem
from ringconnect.modules.home_feed.services.feed import build_feed_items, get_feed_item
from ringconnect.modules.link_preview.service import LinkPreviewService, get_link_preview_service, validate_url
from ringconnect.modules.media.service import POST_MEDIA, MediaService, get_media_service

# Get the logger
logger = logging.getLogger(__name__)

# Create a router that explicitly disables the automatic trailing slash behavior
router = APIRouter(prefix="")

def _validate_post(db: Session, post_id: str) -> Post:
    post = get_post(db, post_id=post_id)
    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    return post

def _validate_ownership(post: Post, user_id: str) -> None:
    if post.author_id != user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions",
        )

def _viewer_id(user: Optional[User]) -> Optional[str]:
    return user.id if user else None

@router.get("/", response_model=List[FeedItem])
@router.get("", response_model=List[FeedItem])
def read_posts(
    db: Session = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=200),
    current_user: Optional[User] = Depends(get_optional_user),
) -> Any:
    """
    Retrieve posts newest first, presented with media, reactions and counts.
    """
    return build_feed_items(db, get_posts(db, skip=skip, limit=limit), _viewer_id(current_user))

@router.post("/", response_model=FeedItem, status_code=status.HTTP_201_CREATED)
@router.post("", response_model=FeedItem, status_code=status.HTTP_201_CREATED)
def create_new_post(
    *,
    db: Session = Depends(get_db),
    content: str = Form(""),
    caption: Optional[str] = Form(None),
    link_url: Optional[str] = Form(None),
    gym_id: Optional[str] = Form(None),
    media: Optional[UploadFile] = File(None),
    current_user: User = Depends(get_current_user),
    media_service: MediaService = Depends(get_media_service),
    preview_service: LinkPreviewService = Depends(get_link_preview_service),
) -> Any:
    """
    Create new post with an optional image/video file or link.
    A link whose preview cannot be fetched still becomes a link post.
    """
    content = content.strip()
    link_url = link_url.strip() if link_url else None
    has_media = media is not None and bool(media.filename)
    if not content and not has_media and not link_url:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="A post needs text, a media file or a link",
        )

    post_in = PostCreate(content=content, caption=caption, gym_id=gym_id, link_url=link_url)
    try:
        if has_media:
            stored = media_service.store(media.file.read(), media.filename, media.content_type, POST_MEDIA)
            post_in.media_url = stored.url
            post_in.media_type = stored.media_type
        elif link_url:
            link_url = validate_url(link_url)
            preview = preview_service.try_fetch(link_url)
            post_in.media_type = "link"
            post_in.link_preview = preview.model_dump() if preview else None
    except RingConnectError as e:
        raise to_http_exception(e)

    post = create_post(db, post_in, current_user.id)
    return get_feed_item(db, post, current_user.id)

@router.get("/user/{user_id}", response_model=List[FeedItem])
def read_user_posts_by_id(
    *,
    db: Session = Depends(get_db),
    user_id: str,
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=200),
    current_user: Optional[User] = Depends(get_optional_user),
) -> Any:
    """
    Get posts by user ID.
    """
    return build_feed_items(db, get_user_posts(db, user_id=user_id, skip=skip, limit=limit), _viewer_id(current_user))

@router.get("/{post_id}", response_model=FeedItem)
def read_post_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str,
    current_user: Optional[User] = Depends(get_optional_user),
) -> Any:
    """
    Get post by ID.
    """
    post = _validate_post(db, post_id)
    return get_feed_item(db, post, _viewer_id(current_user))

@router.put("/{post_id}", response_model=FeedItem)
def update_post_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str,
    post_in: PostUpdate,
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Update a post's text and caption.
    """
    post = _validate_post(db, post_id)
    _validate_ownership(post, current_user.id)

    post = update_post(db, post, post_in)
    return get_feed_item(db, post, current_user.id)

@router.delete("/{post_id}", response_model=FeedItem)
def delete_post_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str,
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Delete a post and all associated data.
    This is a cascading delete operation that will remove:
    reactions, comments with their likes, and notifications about the post.
    Rounds of the post stay and show the original as unavailable.
    """
    post = _validate_post(db, post_id)
    _validate_ownership(post, current_user.id)

    deleted = get_feed_item(db, post, current_user.id)
    try:
        delete_post(db, post)
    except Exception as e:
        logger.error(f"Error deleting post {post_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete post",
        )
    return deleted

@router.post("/{post_id}/share", response_model=FeedItem, status_code=status.HTTP_201_CREATED)
def share_post_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str,
    share_in: ShareCreate,
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Share a post as a round of the current user.
    """
    post = _validate_post(db, post_id)
    try:
        round_post = share_post(db, post, current_user.id, share_in)
    except RingConnectError as e:
        raise to_http_exception(e)
    return get_feed_item(db, round_post, current_user.id)

@router.get("/{post_id}/shares/count", response_model=ShareCount)
def read_share_count(
    *,
    db: Session = Depends(get_db),
    post_id: str,
) -> Any:
    """Number of rounds of a post"""
    _validate_post(db, post_id)
    return ShareCount(post_id=post_id, count=count_shares(db, post_id))
