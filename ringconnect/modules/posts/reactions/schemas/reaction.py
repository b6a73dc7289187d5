from typing import Dict, List, Literal, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict

from ringconnect.modules.profiles.schemas.user import UserSummary

ReactionKind = Literal["gowild", "cleanhit", "championmove", "ontarget", "tooheavy"]

REACTION_KINDS = ("gowild", "cleanhit", "championmove", "ontarget", "tooheavy")

# Shown in the notification sent to the post author
REACTION_LABELS: Dict[str, str] = {
    "gowild": "🔥 Go Wild",
    "cleanhit": "🥊 Clean Hit",
    "championmove": "🏆 Champion’s Move",
    "ontarget": "🎯 On Target",
    "tooheavy": "😤 Too Heavy",
}

class ReactionRow(BaseModel):
    """Minimal (user, kind) pair the aggregator works on"""
    user_id: str
    reaction_type: ReactionKind

    model_config = ConfigDict(from_attributes=True)

class ReactionSummary(BaseModel):
    count: int = 0
    top_kind: Optional[ReactionKind] = None
    viewer_kind: Optional[ReactionKind] = None

class ReactionSet(BaseModel):
    """Requested reaction; null (or the current kind) removes it"""
    reaction_type: Optional[ReactionKind] = None

class ReactionSetResult(BaseModel):
    viewer_kind: Optional[ReactionKind] = None
    summary: ReactionSummary

class Reaction(BaseModel):
    """Reaction model returned to client"""
    id: str
    user_id: str
    post_id: str
    reaction_type: ReactionKind
    created_at: datetime
    user: Optional[UserSummary] = None

    model_config = ConfigDict(from_attributes=True)

class ReactionCount(BaseModel):
    """Count of reactions by type"""
    reaction_type: ReactionKind
    count: int

class ReactionList(BaseModel):
    items: List[Reaction]
    summary: ReactionSummary
