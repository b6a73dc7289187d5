from typing import Dict, List, Literal, Optional
import logging
from sqlalchemy.orm import Session
from sqlalchemy import func, or_

from ringconnect.modules.posts.models.post import Post as PostModel
from ringconnect.modules.posts.comments.models.comment import Comment
from ringconnect.modules.follows.models.follow import Follow
from ringconnect.modules.home_feed.schemas.feed import FeedItem, FeedResponse, SharedPost
from ringconnect.modules.home_feed.services.presenter import select_media
from ringconnect.modules.posts.schemas.post import Post as PostSchema
from ringconnect.modules.posts.services.post import get_posts_by_ids, get_share_counts
from ringconnect.modules.posts.reactions.services.reaction import get_reaction_summaries
from ringconnect.modules.profiles.services.user import get_user_summaries

logger = logging.getLogger(__name__)

FeedScope = Literal["all", "following"]

def get_home_feed(
    db: Session,
    viewer_id: Optional[str],
    scope: FeedScope = "all",
    skip: int = 0,
    limit: int = 20,
) -> FeedResponse:
    """
    Newest-first feed.

    ``following`` restricts the feed to the viewer's torcida plus the
    viewer's own posts and needs a viewer.
    """
    query = db.query(PostModel)
    if scope == "following":
        if viewer_id is None:
            raise ValueError("The following feed needs a viewer")
        followed = db.query(Follow.followed_id).filter(Follow.follower_id == viewer_id)
        query = query.filter(or_(PostModel.author_id.in_(followed), PostModel.author_id == viewer_id))

    total = query.count()
    posts = (
        query.order_by(PostModel.created_at.desc(), PostModel.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )
    logger.debug(f"Feed scope={scope} viewer={viewer_id}: {len(posts)} of {total} posts")

    return FeedResponse(
        items=build_feed_items(db, posts, viewer_id),
        total=total,
        has_more=total > skip + limit,
    )

def _comment_counts(db: Session, post_ids: List[str]) -> Dict[str, int]:
    if not post_ids:
        return {}
    rows = (
        db.query(Comment.post_id, func.count(Comment.id))
        .filter(Comment.post_id.in_(post_ids))
        .group_by(Comment.post_id)
        .all()
    )
    return dict(rows)

def build_feed_items(db: Session, posts: List[PostModel], viewer_id: Optional[str] = None) -> List[FeedItem]:
    """Present posts with authors, media, reactions and counts, batching every lookup"""
    post_ids = [post.id for post in posts]
    originals = get_posts_by_ids(db, (p.shared_from_post_id for p in posts if p.shared_from_post_id))
    authors = get_user_summaries(
        db,
        [p.author_id for p in posts] + [o.author_id for o in originals.values()],
    )
    reactions = get_reaction_summaries(db, post_ids, viewer_id)
    comments = _comment_counts(db, post_ids)
    shares = get_share_counts(db, post_ids)

    items = []
    for post in posts:
        post_schema = PostSchema.model_validate(post)
        shared = None
        original = originals.get(post.shared_from_post_id) if post.shared_from_post_id else None
        if original is not None:
            original_schema = PostSchema.model_validate(original)
            shared = SharedPost(
                id=original.id,
                author=authors.get(original.author_id),
                content=original.content or "",
                caption=original.caption,
                created_at=original.created_at,
                media=select_media(original_schema),
            )

        items.append(FeedItem(
            post=post_schema,
            author=authors.get(post.author_id),
            media=select_media(post_schema, shared),
            reactions=reactions[post.id],
            comment_count=comments.get(post.id, 0),
            share_count=shares.get(post.id, 0),
        ))
    return items

def get_feed_item(db: Session, post: PostModel, viewer_id: Optional[str] = None) -> FeedItem:
    """A single post presented the way the feed shows it"""
    return build_feed_items(db, [post], viewer_id)[0]
