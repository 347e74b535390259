"""Domain services."""

from .badge_service import NEXT_BADGES_SHOWN, BadgeProgress, BadgeService
from .base import Service
from .comment_service import CommentService
from .dicho_service import DichoService
from .flag_service import FlagService
from .jwt_service import JWTService
from .notification_service import NotificationService
from .rate_limiter import RateLimiter
from .reputation_service import (
    REPUTATION_WEIGHTS,
    ReputationService,
    calculate_reputation,
)
from .score_service import ScoreService
from .term_service import TermService, TermSubmission
from .trending_service import TrendingService, window_for_period
from .user_service import UserService
from .vote_service import VoteService
from .word_of_day_service import WordOfDayService, date_seed

__all__ = [
    "BadgeProgress",
    "BadgeService",
    "CommentService",
    "DichoService",
    "FlagService",
    "JWTService",
    "NEXT_BADGES_SHOWN",
    "NotificationService",
    "REPUTATION_WEIGHTS",
    "RateLimiter",
    "ReputationService",
    "ScoreService",
    "Service",
    "TermService",
    "TermSubmission",
    "TrendingService",
    "UserService",
    "VoteService",
    "WordOfDayService",
    "calculate_reputation",
    "date_seed",
    "window_for_period",
]
