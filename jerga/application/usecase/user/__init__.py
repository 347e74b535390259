"""User use cases."""

from .get_leaderboard import (
    GetLeaderboardRequest,
    GetLeaderboardResponse,
    GetLeaderboardUseCase,
)
from .get_user_badges import (
    BadgeItem,
    GetUserBadgesRequest,
    GetUserBadgesResponse,
    GetUserBadgesUseCase,
)
from .sync_user import SyncUserRequest, SyncUserUseCase, UserProfileResponse

__all__ = [
    "BadgeItem",
    "GetLeaderboardRequest",
    "GetLeaderboardResponse",
    "GetLeaderboardUseCase",
    "GetUserBadgesRequest",
    "GetUserBadgesResponse",
    "GetUserBadgesUseCase",
    "SyncUserRequest",
    "SyncUserUseCase",
    "UserProfileResponse",
]
