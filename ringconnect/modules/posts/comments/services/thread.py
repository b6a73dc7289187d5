"""
Comment thread shaping.

Pure functions over comment rows that were already fetched for one post.
Nothing here re-sorts: callers decide the order by how they query.
"""
from typing import Dict, Iterable, List, Optional, Sequence

from ringconnect.modules.posts.comments.schemas.comment import CommentLikeRow, CommentNode, CommentRow


def attach_like_state(
    comments: Sequence[CommentRow],
    likes: Iterable[CommentLikeRow],
    viewer_id: Optional[str] = None,
) -> List[CommentRow]:
    """Return copies of ``comments`` with like_count and viewer_has_liked filled in"""
    counts: Dict[str, int] = {}
    liked_by_viewer = set()
    for like in likes:
        counts[like.comment_id] = counts.get(like.comment_id, 0) + 1
        if viewer_id is not None and like.user_id == viewer_id:
            liked_by_viewer.add(like.comment_id)

    return [
        comment.model_copy(update={
            "like_count": counts.get(comment.id, 0),
            "viewer_has_liked": comment.id in liked_by_viewer,
        })
        for comment in comments
    ]


def build_comment_tree(comments: Sequence[CommentRow]) -> List[CommentNode]:
    """
    Nest comments under their parents.

    A comment whose parent is missing from ``comments`` (none, or deleted)
    becomes a root. Roots and every replies list keep input order.
    """
    nodes: Dict[str, CommentNode] = {}
    for comment in comments:
        data = comment.model_dump()
        data["replies"] = []
        nodes[comment.id] = CommentNode(**data)

    roots: List[CommentNode] = []
    for comment in comments:
        node = nodes[comment.id]
        parent = nodes.get(comment.parent_id) if comment.parent_id else None
        if parent is not None and parent is not node:
            parent.replies.append(node)
        else:
            roots.append(node)

    for node in nodes.values():
        node.replies_count = len(node.replies)
        node.is_edited = bool(node.updated_at and node.updated_at > node.created_at)

    return roots


def flatten_thread(roots: Sequence[CommentNode]) -> List[CommentNode]:
    """
    Two-level view of a tree: each root keeps all of its descendants as a
    single replies list, in depth-first order.
    """
    flattened = []
    for root in roots:
        descendants: List[CommentNode] = []
        stack = list(reversed(root.replies))
        while stack:
            node = stack.pop()
            descendants.append(node.model_copy(update={"replies": []}))
            stack.extend(reversed(node.replies))
        flattened.append(root.model_copy(update={"replies": descendants, "replies_count": len(descendants)}))
    return flattened
