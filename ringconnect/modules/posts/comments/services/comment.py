from typing import List, Optional
import uuid
import logging
from sqlalchemy.orm import Session

from ringconnect.core.exceptions import InvalidOperationError, NotFoundError
from ringconnect.db.time import utcnow
from ringconnect.modules.posts.comments.models.comment import Comment, CommentLike
from ringconnect.modules.posts.comments.schemas.comment import (
    CommentCreate, CommentLikeResult, CommentLikeRow, CommentNode, CommentRow, CommentUpdate
)
from ringconnect.modules.posts.comments.services.thread import attach_like_state, build_comment_tree
from ringconnect.modules.posts.models.post import Post
from ringconnect.modules.notifications.services.notification_events import (
    create_comment_like_notification,
    create_comment_reply_notification,
    create_post_comment_notification,
)
from ringconnect.modules.profiles.services.user import get_user_summaries

logger = logging.getLogger(__name__)

def get_comment(db: Session, comment_id: str) -> Optional[Comment]:
    """Get comment by ID"""
    return db.query(Comment).filter(Comment.id == comment_id).first()

def count_comments(db: Session, post_id: str) -> int:
    return db.query(Comment).filter(Comment.post_id == post_id).count()

def _present(db: Session, comments: List[Comment], viewer_id: Optional[str]) -> List[CommentRow]:
    """Rows with like state joined in"""
    ids = [c.id for c in comments]
    likes = db.query(CommentLike).filter(CommentLike.comment_id.in_(ids)).all() if ids else []
    return attach_like_state(
        [CommentRow.model_validate(c) for c in comments],
        [CommentLikeRow.model_validate(like) for like in likes],
        viewer_id,
    )

def _with_authors(db: Session, nodes: List[CommentNode]) -> None:
    everyone: List[CommentNode] = []
    stack = list(nodes)
    while stack:
        node = stack.pop()
        everyone.append(node)
        stack.extend(node.replies)

    authors = get_user_summaries(db, (n.author_id for n in everyone))
    for node in everyone:
        node.author = authors.get(node.author_id)

def get_comment_tree(db: Session, post_id: str, viewer_id: Optional[str] = None) -> List[CommentNode]:
    """All comments of a post as a tree, oldest first at every level"""
    comments = (
        db.query(Comment)
        .filter(Comment.post_id == post_id)
        .order_by(Comment.created_at.asc(), Comment.id)
        .all()
    )
    tree = build_comment_tree(_present(db, comments, viewer_id))
    _with_authors(db, tree)
    return tree

def get_comment_node(db: Session, comment: Comment, viewer_id: Optional[str] = None) -> CommentNode:
    """A single comment with author and like state, without replies"""
    node = build_comment_tree(_present(db, [comment], viewer_id))[0]
    _with_authors(db, [node])
    return node

def create_comment(db: Session, post_id: str, comment_in: CommentCreate, author_id: str) -> CommentNode:
    """
    Create a new comment or reply.

    Raises:
        NotFoundError: the parent comment does not exist
        InvalidOperationError: the parent belongs to another post
    """
    parent = None
    if comment_in.parent_id:
        parent = get_comment(db, comment_in.parent_id)
        if not parent:
            raise NotFoundError("Comment", comment_in.parent_id)
        if parent.post_id != post_id:
            raise InvalidOperationError("Parent comment belongs to a different post")

    now = utcnow()
    comment = Comment(
        id=str(uuid.uuid4()),
        post_id=post_id,
        author_id=author_id,
        content=comment_in.content,
        parent_id=comment_in.parent_id,
        created_at=now,
        updated_at=now,
    )

    db.add(comment)
    db.commit()
    db.refresh(comment)
    logger.info(f"User {author_id} commented {comment.id} on post {post_id}")

    post_author_id = db.query(Post.author_id).filter(Post.id == post_id).scalar()
    # A reply to the post author's own comment is reported once, as a reply
    if parent is None or parent.author_id != post_author_id:
        create_post_comment_notification(db, post_id, comment.id, author_id)
    if parent is not None and parent.author_id != author_id:
        create_comment_reply_notification(db, parent.id, comment.id, author_id)

    return get_comment_node(db, comment, author_id)

def update_comment(db: Session, comment: Comment, comment_in: CommentUpdate) -> CommentNode:
    """Update comment"""
    comment.content = comment_in.content

    db.add(comment)
    db.commit()
    db.refresh(comment)

    return get_comment_node(db, comment, comment.author_id)

def _descendant_ids(db: Session, comment_ids: List[str]) -> List[str]:
    """IDs of the given comments and every reply below them"""
    collected = list(comment_ids)
    frontier = list(comment_ids)
    while frontier:
        children = [row.id for row in db.query(Comment.id).filter(Comment.parent_id.in_(frontier)).all()]
        frontier = [c for c in children if c not in collected]
        collected.extend(frontier)
    return collected

def delete_comment(db: Session, comment: Comment) -> int:
    """Delete a comment with its replies and their likes; returns the number of comments removed"""
    ids = _descendant_ids(db, [comment.id])
    db.query(CommentLike).filter(CommentLike.comment_id.in_(ids)).delete(synchronize_session=False)
    # Children first so no row is left pointing at a deleted parent
    for comment_id in reversed(ids):
        db.query(Comment).filter(Comment.id == comment_id).delete(synchronize_session=False)
    db.commit()
    logger.info(f"Deleted comment {comment.id} and {len(ids) - 1} replies")
    return len(ids)

def delete_comments_for_posts(db: Session, post_ids: List[str]) -> int:
    """Remove all comments and comment likes of the given posts; the caller commits"""
    if not post_ids:
        return 0
    ids = [row.id for row in db.query(Comment.id).filter(Comment.post_id.in_(post_ids)).all()]
    if ids:
        db.query(CommentLike).filter(CommentLike.comment_id.in_(ids)).delete(synchronize_session=False)
        # Replies reference their parents; drop the links before the rows
        db.query(Comment).filter(Comment.id.in_(ids)).update({"parent_id": None}, synchronize_session=False)
        db.query(Comment).filter(Comment.id.in_(ids)).delete(synchronize_session=False)
    return len(ids)

def toggle_comment_like(db: Session, comment: Comment, user_id: str) -> CommentLikeResult:
    """Like the comment, or remove the like if the user already liked it"""
    existing = (
        db.query(CommentLike)
        .filter(CommentLike.comment_id == comment.id, CommentLike.user_id == user_id)
        .first()
    )
    if existing:
        db.delete(existing)
        liked = False
    else:
        db.add(CommentLike(id=str(uuid.uuid4()), comment_id=comment.id, user_id=user_id))
        liked = True
    db.commit()

    if liked:
        create_comment_like_notification(db, comment.id, user_id)

    like_count = db.query(CommentLike).filter(CommentLike.comment_id == comment.id).count()
    return CommentLikeResult(liked=liked, like_count=like_count)

def get_latest_comment(db: Session, post_id: str, viewer_id: Optional[str] = None) -> Optional[CommentNode]:
    """Get the latest comment for a post"""
    latest_comment = (
        db.query(Comment)
        .filter(Comment.post_id == post_id)
        .order_by(Comment.created_at.desc(), Comment.id.desc())
        .first()
    )

    if not latest_comment:
        return None

    return get_comment_node(db, latest_comment, viewer_id)
