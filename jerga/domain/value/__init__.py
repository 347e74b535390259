"""Domain value objects for Jerga."""

from jerga.domain.value.identifiers import (
    CommentId,
    DefinitionId,
    DichoId,
    FlagId,
    NotificationId,
    TermId,
    UserId,
    VoteId,
)
from jerga.domain.value.types import (
    ContributionCounters,
    ContributionType,
    FlagReason,
    FlagStatus,
    FlagTargetType,
    LeaderboardField,
    NotificationType,
    Region,
    RelatedType,
    TrendingKind,
    TrendingPeriod,
    UserRole,
    VotableType,
    VoteCounters,
    VoteType,
    Word,
    parse_region_filter,
)

__all__ = [
    # Identifiers
    "UserId",
    "TermId",
    "DefinitionId",
    "CommentId",
    "DichoId",
    "VoteId",
    "NotificationId",
    "FlagId",
    # Types
    "ContributionCounters",
    "ContributionType",
    "FlagReason",
    "FlagStatus",
    "FlagTargetType",
    "LeaderboardField",
    "NotificationType",
    "Region",
    "RelatedType",
    "TrendingKind",
    "TrendingPeriod",
    "UserRole",
    "VotableType",
    "VoteCounters",
    "VoteType",
    "Word",
    "parse_region_filter",
]
