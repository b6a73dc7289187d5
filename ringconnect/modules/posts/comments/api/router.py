from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status, Path, Query
from sqlalchemy.orm import Session
import logging

from ringconnect.core.exceptions import RingConnectError, to_http_exception
from ringconnect.db.session import get_db
from ringconnect.deps import get_current_user, get_optional_user
from ringconnect.modules.profiles.models.user import User
from ringconnect.modules.posts.services.post import get_post
from ringconnect.modules.posts.comments.models.comment import Comment
from ringconnect.modules.posts.comments.schemas.comment import (
    CommentCreate, CommentLikeResult, CommentNode, CommentUpdate
)
from ringconnect.modules.posts.comments.services.comment import (
    get_comment, get_comment_node, get_comment_tree, create_comment,
    update_comment, delete_comment, get_latest_comment, toggle_comment_like
)
from ringconnect.modules.posts.comments.services.thread import flatten_thread

router = APIRouter()
logger = logging.getLogger("app")

def _validate_post(db: Session, post_id: str) -> None:
    """Validate post exists and return None or raise HTTPException"""
    post = get_post(db, post_id=post_id)
    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found"
        )

def _validate_comment(db: Session, comment_id: str, post_id: Optional[str] = None) -> Comment:
    """Validate comment exists, belongs to post if specified, and return comment or raise HTTPException"""
    comment = get_comment(db, comment_id=comment_id)
    if not comment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comment not found"
        )

    if post_id and comment.post_id != post_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Comment does not belong to the specified post"
        )

    return comment

def _validate_ownership(comment: Comment, user_id: str) -> None:
    """Validate user is the author of the comment or raise HTTPException"""
    if comment.author_id != user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions"
        )

@router.post("", response_model=CommentNode, status_code=status.HTTP_201_CREATED)
def create_new_comment(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post to comment on"),
    comment_in: CommentCreate,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Create new comment on a post, or a reply when parent_id is set"""
    try:
        _validate_post(db, post_id)
        return create_comment(db, post_id, comment_in, current_user.id)
    except RingConnectError as e:
        raise to_http_exception(e)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error creating comment: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create comment"
        )

@router.get("", response_model=List[CommentNode])
def read_comments_by_post_id(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post to get comments for"),
    flatten: bool = Query(False, description="Collapse every thread into root + replies"),
    current_user: Optional[User] = Depends(get_optional_user),
) -> Any:
    """Get comments by post ID as a reply tree"""
    _validate_post(db, post_id)
    tree = get_comment_tree(db, post_id=post_id, viewer_id=current_user.id if current_user else None)
    return flatten_thread(tree) if flatten else tree

@router.get("/latest", response_model=CommentNode)
def read_latest_comment(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post"),
    current_user: Optional[User] = Depends(get_optional_user),
) -> Any:
    """Get the latest comment for a post"""
    _validate_post(db, post_id)

    latest_comment = get_latest_comment(db, post_id=post_id, viewer_id=current_user.id if current_user else None)
    if not latest_comment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No comments found for this post"
        )
    return latest_comment

@router.put("/{comment_id}", response_model=CommentNode)
def update_comment_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post"),
    comment_id: str,
    comment_in: CommentUpdate,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Update a comment"""
    _validate_post(db, post_id)
    comment = _validate_comment(db, comment_id, post_id)
    _validate_ownership(comment, current_user.id)

    return update_comment(db, comment, comment_in)

@router.delete("/{comment_id}", response_model=CommentNode)
def delete_comment_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post"),
    comment_id: str,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Delete a comment together with its replies"""
    _validate_post(db, post_id)
    comment = _validate_comment(db, comment_id, post_id)
    _validate_ownership(comment, current_user.id)

    deleted = get_comment_node(db, comment, current_user.id)
    try:
        delete_comment(db, comment)
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting comment: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete comment"
        )
    return deleted

@router.post("/{comment_id}/like", response_model=CommentLikeResult)
def like_comment(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post"),
    comment_id: str,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Toggle the current user's like on a comment"""
    _validate_post(db, post_id)
    comment = _validate_comment(db, comment_id, post_id)

    return toggle_comment_like(db, comment, current_user.id)
