"""Domain model entities for Jerga."""

from jerga.domain.model.badge import BADGE_CATALOG, Badge, BadgeCriterion, get_badge
from jerga.domain.model.comment import Comment
from jerga.domain.model.definition import Definition
from jerga.domain.model.dicho import Dicho
from jerga.domain.model.discovery import (
    TermActivity,
    TermVoteStats,
    TrendingTerm,
    WordOfDay,
)
from jerga.domain.model.flag import Flag
from jerga.domain.model.notification import Notification
from jerga.domain.model.term import Term
from jerga.domain.model.user import User
from jerga.domain.model.vote import (
    Vote,
    VoteAction,
    VoteOutcome,
    VoteTransition,
    compute_transition,
)

__all__ = [
    "User",
    "Term",
    "Definition",
    "Comment",
    "Dicho",
    "Vote",
    "VoteAction",
    "VoteOutcome",
    "VoteTransition",
    "compute_transition",
    "Notification",
    "Flag",
    "TermActivity",
    "TermVoteStats",
    "TrendingTerm",
    "WordOfDay",
    "Badge",
    "BadgeCriterion",
    "BADGE_CATALOG",
    "get_badge",
]
