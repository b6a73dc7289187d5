"""
Notification events service.
This module handles the creation of notifications for various events in the application.

Every helper is best-effort: failures are logged and reported as False, never
raised, so the write that triggered the event is never undone.
"""
from typing import Optional
from sqlalchemy.orm import Session
import logging

from ringconnect.modules.notifications.services.notification import create_notification
from ringconnect.modules.notifications.schemas.notification import NotificationCreate
from ringconnect.modules.posts.models.post import Post
from ringconnect.modules.posts.comments.models.comment import Comment
from ringconnect.modules.posts.reactions.schemas.reaction import REACTION_LABELS
# Set up logger
logger = logging.getLogger(__name__)

def _notify(db: Session, recipient_id: Optional[str], actor_id: str, type: str, content: str, **related) -> bool:
    """Insert one notification unless the actor is the recipient"""
    if not recipient_id:
        return False

    # Don't notify users about their own actions
    if recipient_id == actor_id:
        logger.debug(f"User {actor_id} triggered {type} on their own content, no notification created")
        return False

    try:
        create_notification(db, NotificationCreate(
            user_id=recipient_id,
            actor_id=actor_id,
            type=type,
            content=content,
            **related,
        ))
        logger.info(f"Created {type} notification for user {recipient_id} from user {actor_id}")
        return True
    except Exception as e:
        db.rollback()
        logger.error(f"Error creating {type} notification: {e}")
        return False

def create_post_reaction_notification(db: Session, post_id: str, reactor_id: str, reaction_type: str) -> bool:
    """
    Create a notification when someone reacts to a post.

    Args:
        db: Database session
        post_id: ID of the post that received the reaction
        reactor_id: ID of the user who reacted
        reaction_type: Kind of reaction, used for the label in the message

    Returns:
        True if notification was created, False otherwise
    """
    post = db.query(Post).filter(Post.id == post_id).first()
    if not post:
        logger.warning(f"Post {post_id} not found when creating reaction notification")
        return False

    label = REACTION_LABELS.get(reaction_type, "uma reação")
    return _notify(
        db, post.author_id, reactor_id, "post_reaction",
        f"reagiu ao seu round com {label}",
        related_post_id=post_id,
        related_user_id=reactor_id,
    )

def create_post_comment_notification(db: Session, post_id: str, comment_id: str, commenter_id: str) -> bool:
    """
    Create a notification when a post is commented on.

    Args:
        db: Database session
        post_id: ID of the post that was commented on
        comment_id: ID of the comment
        commenter_id: ID of the user who commented

    Returns:
        True if notification was created, False otherwise
    """
    post = db.query(Post).filter(Post.id == post_id).first()
    if not post:
        logger.warning(f"Post {post_id} not found when creating comment notification")
        return False

    return _notify(
        db, post.author_id, commenter_id, "post_comment",
        "comentou no seu round",
        related_post_id=post_id,
        related_comment_id=comment_id,
        related_user_id=commenter_id,
    )

def create_comment_reply_notification(db: Session, parent_comment_id: str, reply_id: str, replier_id: str) -> bool:
    """Notify the author of a comment that someone replied to it"""
    parent = db.query(Comment).filter(Comment.id == parent_comment_id).first()
    if not parent:
        logger.warning(f"Comment {parent_comment_id} not found when creating reply notification")
        return False

    return _notify(
        db, parent.author_id, replier_id, "comment_reply",
        "respondeu ao seu comentário",
        related_post_id=parent.post_id,
        related_comment_id=reply_id,
        related_user_id=replier_id,
    )

def create_comment_like_notification(db: Session, comment_id: str, liker_id: str) -> bool:
    """Notify the author of a comment that it was liked"""
    comment = db.query(Comment).filter(Comment.id == comment_id).first()
    if not comment:
        logger.warning(f"Comment {comment_id} not found when creating like notification")
        return False

    return _notify(
        db, comment.author_id, liker_id, "comment_like",
        "curtiu seu comentário",
        related_post_id=comment.post_id,
        related_comment_id=comment_id,
        related_user_id=liker_id,
    )

def create_follow_notification(db: Session, followed_id: str, follower_id: str) -> bool:
    """Notify a user that someone joined their torcida"""
    return _notify(
        db, followed_id, follower_id, "user_follow",
        "entrou para sua torcida!",
        related_user_id=follower_id,
    )

def create_chat_message_notification(db: Session, receiver_id: str, sender_id: str) -> bool:
    """Notify the receiver of a direct message"""
    return _notify(
        db, receiver_id, sender_id, "chat_message",
        "enviou uma mensagem",
        related_user_id=sender_id,
    )

def create_booking_request_notification(db: Session, coach_id: str, athlete_id: str, booking_id: str) -> bool:
    """Notify a coach that an athlete booked one of their sessions"""
    return _notify(
        db, coach_id, athlete_id, "booking_request",
        "solicitou uma mentoria",
        related_booking_id=booking_id,
        related_user_id=athlete_id,
    )

def create_booking_update_notification(db: Session, recipient_id: str, actor_id: str, booking_id: str, status: str) -> bool:
    """Notify the other party of a booking that its status changed"""
    return _notify(
        db, recipient_id, actor_id, "booking_update",
        f"atualizou sua mentoria para {status}",
        related_booking_id=booking_id,
        related_user_id=actor_id,
    )

SPARRING_UPDATE_TEXTS = {
    "accepted": "aceitou seu pedido de sparring",
    "declined": "recusou seu pedido de sparring",
    "cancelled": "cancelou o pedido de sparring",
}

def create_sparring_request_notification(db: Session, requested_id: str, requester_id: str, sparring_id: str) -> bool:
    """Notify a user that someone wants to spar with them"""
    return _notify(
        db, requested_id, requester_id, "sparring_request",
        "quer fazer sparring com você",
        related_sparring_id=sparring_id,
        related_user_id=requester_id,
    )

def create_sparring_update_notification(db: Session, recipient_id: str, actor_id: str, sparring_id: str, status: str) -> bool:
    """Notify the other side of a sparring request that it was answered or withdrawn"""
    return _notify(
        db, recipient_id, actor_id, "sparring_update",
        SPARRING_UPDATE_TEXTS.get(status, f"atualizou o pedido de sparring para {status}"),
        related_sparring_id=sparring_id,
        related_user_id=actor_id,
    )
