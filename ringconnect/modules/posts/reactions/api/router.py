from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status, Path, Query
from sqlalchemy.orm import Session

from ringconnect.db.session import get_db
from ringconnect.deps import get_current_user, get_optional_user
from ringconnect.modules.profiles.models.user import User
from ringconnect.modules.posts.services.post import get_post
from ringconnect.modules.posts.reactions.schemas.reaction import (
    Reaction as ReactionSchema, ReactionCount, ReactionList, ReactionSet, ReactionSetResult, ReactionSummary
)
from ringconnect.modules.posts.reactions.services.reaction import (
    get_reaction, get_reactions_by_post, get_reaction_counts_by_post,
    get_reaction_summary, set_reaction, delete_reaction
)

router = APIRouter()

def _validate_post(db: Session, post_id: str) -> None:
    """Validate post exists or raise HTTPException"""
    post = get_post(db, post_id=post_id)
    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found"
        )

def _validate_reaction(db: Session, user_id: str, post_id: str) -> Any:
    """Validate reaction exists and return it or raise HTTPException"""
    reaction = get_reaction(db, user_id, post_id)
    if not reaction:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Reaction not found"
        )
    return reaction

@router.put("", response_model=ReactionSetResult)
def set_post_reaction(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post to react to"),
    reaction_in: ReactionSet,
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Toggle the current user's reaction.
    Sending the kind already held (or null) removes it; any other kind replaces it.
    """
    _validate_post(db, post_id)

    return set_reaction(db, post_id, current_user.id, reaction_in.reaction_type)

@router.get("", response_model=ReactionList)
def read_reactions_by_post_id(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post to get reactions for"),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=200),
    current_user: Optional[User] = Depends(get_optional_user),
) -> Any:
    """Get reactions by post ID"""
    _validate_post(db, post_id)

    viewer_id = current_user.id if current_user else None
    return ReactionList(
        items=get_reactions_by_post(db, post_id=post_id, skip=skip, limit=limit),
        summary=get_reaction_summary(db, post_id, viewer_id),
    )

@router.get("/summary", response_model=ReactionSummary)
def read_reaction_summary(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post to summarize"),
    current_user: Optional[User] = Depends(get_optional_user),
) -> Any:
    """Total, top kind and the viewer's own kind"""
    _validate_post(db, post_id)

    return get_reaction_summary(db, post_id, current_user.id if current_user else None)

@router.get("/counts", response_model=List[ReactionCount])
def read_reaction_counts_by_post_id(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post to get reaction counts for"),
) -> Any:
    """Get reaction counts by type for a post"""
    _validate_post(db, post_id)

    return get_reaction_counts_by_post(db, post_id=post_id)

@router.delete("", response_model=ReactionSchema)
def delete_post_reaction(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post to remove reaction from"),
    current_user: User = Depends(get_current_user),
) -> Any:
    """Delete a reaction from a post by the current user"""
    _validate_post(db, post_id)
    reaction = _validate_reaction(db, current_user.id, post_id)
    result = ReactionSchema.model_validate(reaction)
    delete_reaction(db, reaction)

    return result
