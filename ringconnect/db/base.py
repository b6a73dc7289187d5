# Import all models here so Alembic and create_all can detect them
from ringconnect.db.session import Base

# Import all models below
from ringconnect.modules.profiles.models.user import User
from ringconnect.modules.auth.models.revoked_token import RevokedToken
from ringconnect.modules.gyms.models.gym import Gym, GymFollower
from ringconnect.modules.posts.models.post import Post
from ringconnect.modules.posts.comments.models.comment import Comment, CommentLike
from ringconnect.modules.posts.reactions.models.reaction import Reaction
from ringconnect.modules.follows.models.follow import Follow
from ringconnect.modules.notifications.models.notification import Notification
from ringconnect.modules.messages.models.message import ChatMessage
from ringconnect.modules.training_logs.models.training_log import TrainingLog
from ringconnect.modules.mentorship.models.mentorship import MentorshipSession, Booking
from ringconnect.modules.championships.models.championship import Championship
from ringconnect.modules.videos.models.video import Video
from ringconnect.modules.sparring.models.sparring_request import SparringRequest

__all__ = [
    "Base",
    "User",
    "RevokedToken",
    "Gym",
    "GymFollower",
    "Post",
    "Comment",
    "CommentLike",
    "Reaction",
    "Follow",
    "Notification",
    "ChatMessage",
    "TrainingLog",
    "MentorshipSession",
    "Booking",
    "Championship",
    "Video",
    "SparringRequest",
]
