"""Cast vote use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from jerga.application.usecase.base import BaseUseCase, require_user
from jerga.application.usecase.common import VoteCountsItem, refresh_user_standing
from jerga.domain.error import RateLimitedError
from jerga.domain.model import VoteAction, VoteOutcome
from jerga.domain.service import (
    BadgeService,
    NotificationService,
    RateLimiter,
    ReputationService,
    VoteService,
)
from jerga.domain.value import (
    NotificationType,
    RelatedType,
    VotableType,
    VoteType,
)

# Title of the notice sent to an author when their content is up-voted
UPVOTE_TITLES: dict[VotableType, str] = {
    VotableType.DEFINITION: "¡Tu definición recibió un voto positivo!",
    VotableType.COMMENT: "¡Tu comentario recibió un voto positivo!",
    VotableType.DICHO: "¡Tu dicho recibió un voto positivo!",
}

UPVOTE_MESSAGES: dict[VotableType, str] = {
    VotableType.DEFINITION: "Alguien valoró positivamente tu definición.",
    VotableType.COMMENT: "Alguien valoró positivamente tu comentario.",
    VotableType.DICHO: "Alguien valoró positivamente tu dicho.",
}


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    votable_type: VotableType
    votable_id: UUID
    vote_type: str  # Validated by the vote service
    user_id: str | None  # User ID from authenticated user


class RateLimitInfo(BaseModel):
    """Caller's remaining vote quota."""

    remaining: int
    reset_at: datetime | None


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    votable_type: VotableType
    votable_id: str
    action: VoteAction
    user_vote: VoteType | None
    votes: VoteCountsItem
    rate_limit: RateLimitInfo


class CastVoteUseCase(BaseUseCase[CastVoteRequest, CastVoteResponse]):
    """Use case for voting on a definition, comment or dicho.

    Repeating a vote retracts it and voting the other way flips it.
    """

    def __init__(
        self,
        rate_limiter: RateLimiter,
        vote_service: VoteService,
        reputation_service: ReputationService,
        badge_service: BadgeService,
        notification_service: NotificationService,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            rate_limiter: Process-wide vote rate limiter
            vote_service: Vote domain service
            reputation_service: Reputation domain service
            badge_service: Badge domain service
            notification_service: Notification domain service
        """
        self.rate_limiter = rate_limiter
        self.vote_service = vote_service
        self.reputation_service = reputation_service
        self.badge_service = badge_service
        self.notification_service = notification_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Steps:
        1. Check the caller's rate limit
        2. Record the vote and update the item's counters
        3. Refresh the voter's reputation and badges (best effort)
        4. Notify the author of an up-vote (best effort)

        Args:
            request: Cast vote request

        Returns:
            Resulting vote state, counters and remaining quota

        Raises:
            UnauthenticatedError: If there is no authenticated user
            RateLimitedError: If the caller exceeded the vote quota
            ValidationError: If the vote type is unknown
            NotFoundError: If the item does not exist
        """
        user_id = require_user(request.user_id, "vote")

        if not self.rate_limiter.allow(user_id):
            reset_at = self.rate_limiter.reset_at(user_id)
            raise RateLimitedError(user_id, reset_at)

        outcome = await self.vote_service.cast_vote(
            user_id, request.votable_type, request.votable_id, request.vote_type
        )

        if not outcome.transition.is_noop:
            await refresh_user_standing(
                user_id, self.reputation_service, self.badge_service
            )

        upvoted = outcome.transition.deltas.get(VoteType.UP, 0) > 0
        if upvoted and outcome.author_id != user_id:
            await self._notify_author(outcome)

        return CastVoteResponse(
            votable_type=outcome.votable_type,
            votable_id=str(outcome.votable_id),
            action=outcome.transition.action,
            user_vote=outcome.transition.resulting_vote_type,
            votes=VoteCountsItem.from_counters(outcome.counters),
            rate_limit=RateLimitInfo(
                remaining=self.rate_limiter.remaining(user_id),
                reset_at=self.rate_limiter.reset_at(user_id),
            ),
        )

    async def _notify_author(self, outcome: VoteOutcome) -> None:
        try:
            await self.notification_service.emit(
                user_id=outcome.author_id,
                type=NotificationType.VOTE,
                title=UPVOTE_TITLES[outcome.votable_type],
                message=UPVOTE_MESSAGES[outcome.votable_type],
                related_id=str(outcome.votable_id),
                related_type=RelatedType(outcome.votable_type.value),
            )
        except Exception as e:
            logfire.error(
                "Vote notification failed",
                author_id=outcome.author_id,
                votable_id=str(outcome.votable_id),
                error=str(e),
            )
