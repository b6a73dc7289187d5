from typing import Dict, Iterable, List, Optional
import uuid
import logging
from sqlalchemy.orm import Session
from sqlalchemy import func

from ringconnect.core.exceptions import InvalidOperationError
from ringconnect.modules.posts.models.post import Post
from ringconnect.modules.posts.schemas.post import PostCreate, PostUpdate, ShareCreate
from ringconnect.modules.posts.comments.services.comment import delete_comments_for_posts
from ringconnect.modules.posts.reactions.services.reaction import delete_reactions_for_posts
from ringconnect.modules.notifications.models.notification import Notification

logger = logging.getLogger(__name__)

def get_post(db: Session, post_id: str) -> Optional[Post]:
    """Get post by ID"""
    return db.query(Post).filter(Post.id == post_id).first()

def get_posts_by_ids(db: Session, post_ids: Iterable[str]) -> Dict[str, Post]:
    ids = set(post_ids)
    if not ids:
        return {}
    return {post.id: post for post in db.query(Post).filter(Post.id.in_(ids)).all()}

def get_posts(db: Session, skip: int = 0, limit: int = 20) -> List[Post]:
    """Get list of posts, newest first"""
    logger.debug(f"Getting posts with skip={skip}, limit={limit}")
    return (
        db.query(Post)
        .order_by(Post.created_at.desc(), Post.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )

def get_user_posts(db: Session, user_id: str, skip: int = 0, limit: int = 20) -> List[Post]:
    """Get posts by user ID"""
    logger.debug(f"Getting posts for user ID: {user_id} with skip={skip}, limit={limit}")
    return (
        db.query(Post)
        .filter(Post.author_id == user_id)
        .order_by(Post.created_at.desc(), Post.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )

def create_post(db: Session, post_in: PostCreate, author_id: str) -> Post:
    """Create new post"""
    post = Post(
        id=str(uuid.uuid4()),
        author_id=author_id,
        **post_in.model_dump(),
    )
    db.add(post)
    db.commit()
    db.refresh(post)
    logger.info(f"User {author_id} created post {post.id} (media_type={post.media_type})")
    return post

def update_post(db: Session, post: Post, post_in: PostUpdate) -> Post:
    """Update post text; media is fixed at creation"""
    update_data = post_in.model_dump(exclude_unset=True)

    for field, value in update_data.items():
        setattr(post, field, value)

    db.add(post)
    db.commit()
    db.refresh(post)

    return post

def share_post(db: Session, post: Post, user_id: str, share_in: ShareCreate) -> Post:
    """
    Create a round of ``post``.

    Rounds of rounds point at the root original. A round never stores media
    of its own.
    """
    original = post
    if post.shared_from_post_id:
        original = get_post(db, post.shared_from_post_id)
        if original is None:
            raise InvalidOperationError("The original post is no longer available")

    round_post = Post(
        id=str(uuid.uuid4()),
        author_id=user_id,
        content="",
        caption=share_in.caption,
        post_type="shared",
        shared_from_post_id=original.id,
    )
    db.add(round_post)
    db.commit()
    db.refresh(round_post)
    logger.info(f"User {user_id} shared post {original.id} as {round_post.id}")
    return round_post

def count_shares(db: Session, post_id: str) -> int:
    return db.query(Post).filter(Post.shared_from_post_id == post_id).count()

def get_share_counts(db: Session, post_ids: Iterable[str]) -> Dict[str, int]:
    """Number of rounds per original post"""
    ids = set(post_ids)
    if not ids:
        return {}
    rows = (
        db.query(Post.shared_from_post_id, func.count(Post.id))
        .filter(Post.shared_from_post_id.in_(ids))
        .group_by(Post.shared_from_post_id)
        .all()
    )
    return dict(rows)

def delete_post(db: Session, post: Post) -> Post:
    """
    Delete post and everything hanging off it: reactions, comments, comment
    likes and notifications about it. Rounds of the post are kept and render
    their quote as unavailable.
    """
    post_id = post.id
    try:
        reactions = delete_reactions_for_posts(db, [post_id])
        comments = delete_comments_for_posts(db, [post_id])
        notifications = (
            db.query(Notification)
            .filter(Notification.related_post_id == post_id)
            .delete(synchronize_session=False)
        )
        db.delete(post)
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info(
        f"Deleted post {post_id} with {reactions} reactions, {comments} comments and {notifications} notifications"
    )
    return post
