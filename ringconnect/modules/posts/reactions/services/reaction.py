from typing import Dict, Iterable, List, Optional
import uuid
import logging
from sqlalchemy.orm import Session
from sqlalchemy import func

from ringconnect.modules.posts.reactions.models.reaction import Reaction
from ringconnect.modules.posts.reactions.schemas.reaction import (
    Reaction as ReactionSchema, ReactionCount, ReactionRow, ReactionSetResult, ReactionSummary
)
from ringconnect.modules.posts.reactions.services.aggregator import apply_reaction, summarize_reactions
from ringconnect.modules.notifications.services.notification_events import create_post_reaction_notification
from ringconnect.modules.profiles.services.user import get_user_summaries

logger = logging.getLogger(__name__)

def get_reaction(db: Session, user_id: str, post_id: str) -> Optional[Reaction]:
    """Get reaction by user ID and post ID"""
    return (
        db.query(Reaction)
        .filter(Reaction.user_id == user_id, Reaction.post_id == post_id)
        .first()
    )

def get_reactions_by_post(db: Session, post_id: str, skip: int = 0, limit: int = 100) -> List[ReactionSchema]:
    """Get reactions by post ID with reactor summaries"""
    reactions = (
        db.query(Reaction)
        .filter(Reaction.post_id == post_id)
        .order_by(Reaction.created_at, Reaction.id)
        .offset(skip)
        .limit(limit)
        .all()
    )
    users = get_user_summaries(db, (r.user_id for r in reactions))

    result = []
    for reaction in reactions:
        item = ReactionSchema.model_validate(reaction)
        item.user = users.get(reaction.user_id)
        result.append(item)
    return result

def get_reaction_counts_by_post(db: Session, post_id: str) -> List[ReactionCount]:
    """Get reaction counts by type for a post"""
    counts = (
        db.query(Reaction.reaction_type, func.count(Reaction.id).label("count"))
        .filter(Reaction.post_id == post_id)
        .group_by(Reaction.reaction_type)
        .all()
    )

    return [ReactionCount(reaction_type=reaction_type, count=count) for reaction_type, count in counts]

def get_reaction_summary(db: Session, post_id: str, viewer_id: Optional[str] = None) -> ReactionSummary:
    """Summary of one post's reactions as seen by the viewer"""
    return get_reaction_summaries(db, [post_id], viewer_id)[post_id]

def get_reaction_summaries(db: Session, post_ids: Iterable[str], viewer_id: Optional[str] = None) -> Dict[str, ReactionSummary]:
    """Summaries for a batch of posts, keyed by post ID (posts without reactions get an empty summary)"""
    ids = list(dict.fromkeys(post_ids))
    if not ids:
        return {}

    rows = (
        db.query(Reaction)
        .filter(Reaction.post_id.in_(ids))
        .order_by(Reaction.created_at, Reaction.id)
        .all()
    )
    by_post: Dict[str, List[ReactionRow]] = {post_id: [] for post_id in ids}
    for row in rows:
        by_post[row.post_id].append(ReactionRow.model_validate(row))

    return {post_id: summarize_reactions(by_post[post_id], viewer_id) for post_id in ids}

def set_reaction(db: Session, post_id: str, user_id: str, requested: Optional[str]) -> ReactionSetResult:
    """
    Toggle the viewer's reaction on a post.

    The existing row is updated in place when the kind changes, so there is
    never more than one row per (post, user). The post author is notified on
    every transition into a reacted state.
    """
    existing = get_reaction(db, user_id, post_id)
    current = existing.reaction_type if existing else None
    next_kind = apply_reaction(current, requested)

    if next_kind is None:
        if existing:
            db.delete(existing)
            db.commit()
            logger.info(f"User {user_id} removed reaction {current} from post {post_id}")
    elif existing:
        existing.reaction_type = next_kind
        db.add(existing)
        db.commit()
        logger.info(f"User {user_id} changed reaction on post {post_id} from {current} to {next_kind}")
    else:
        db.add(Reaction(
            id=str(uuid.uuid4()),
            user_id=user_id,
            post_id=post_id,
            reaction_type=next_kind,
        ))
        db.commit()
        logger.info(f"User {user_id} reacted {next_kind} to post {post_id}")

    if next_kind is not None:
        create_post_reaction_notification(db, post_id, user_id, next_kind)

    return ReactionSetResult(
        viewer_kind=next_kind,
        summary=get_reaction_summary(db, post_id, user_id),
    )

def delete_reaction(db: Session, reaction: Reaction) -> Reaction:
    """Delete reaction"""
    db.delete(reaction)
    db.commit()
    return reaction

def delete_reactions_for_posts(db: Session, post_ids: List[str]) -> int:
    """Remove every reaction on the given posts; the caller commits"""
    if not post_ids:
        return 0
    return db.query(Reaction).filter(Reaction.post_id.in_(post_ids)).delete(synchronize_session=False)
