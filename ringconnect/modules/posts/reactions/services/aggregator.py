"""
Reaction aggregation over already-fetched rows.

Both functions are pure: they never touch the database and are safe to call
on any list of reaction rows for a single post.
"""
from typing import Dict, Iterable, Optional

from ringconnect.modules.posts.reactions.schemas.reaction import ReactionRow, ReactionSummary


def summarize_reactions(reactions: Iterable[ReactionRow], viewer_id: Optional[str] = None) -> ReactionSummary:
    """
    Summarize the reactions of one post.

    Args:
        reactions: (user, kind) rows for the post, in fetch order
        viewer_id: ID of the user looking at the post, if any

    Returns:
        Total count, the most frequent kind (ties go to the kind seen first)
        and the viewer's own kind.
    """
    counts: Dict[str, int] = {}
    viewer_kind = None
    total = 0

    for row in reactions:
        total += 1
        counts[row.reaction_type] = counts.get(row.reaction_type, 0) + 1
        if viewer_id is not None and row.user_id == viewer_id:
            viewer_kind = row.reaction_type

    # dicts keep first-insertion order, so a strict comparison favours the kind seen first
    top_kind = None
    top_count = 0
    for kind, count in counts.items():
        if count > top_count:
            top_kind = kind
            top_count = count

    return ReactionSummary(count=total, top_kind=top_kind, viewer_kind=viewer_kind)


def apply_reaction(current: Optional[str], requested: Optional[str]) -> Optional[str]:
    """
    Next reaction state for (post, viewer).

    Requesting nothing, or the kind already held, clears the reaction;
    any other kind replaces the current one.
    """
    if requested is None or requested == current:
        return None
    return requested
