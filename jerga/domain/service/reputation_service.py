"""Reputation domain service."""

import logfire

from jerga.domain.error import NotFoundError
from jerga.domain.repository import UserRepository
from jerga.domain.value import ContributionCounters, ContributionType, UserId

from .base import Service

# Points awarded per unit of each contribution counter
REPUTATION_WEIGHTS: dict[ContributionType, int] = {
    ContributionType.TERMS_SUBMITTED: 10,
    ContributionType.DEFINITIONS_SUBMITTED: 8,
    ContributionType.VOTES_GIVEN: 1,
    ContributionType.COMMENTS_POSTED: 2,
    ContributionType.DICHOS_SUBMITTED: 5,
}


def calculate_reputation(contributions: ContributionCounters) -> int:
    """Weighted sum of a user's contribution counters."""
    return sum(
        weight * contributions.get(contribution)
        for contribution, weight in REPUTATION_WEIGHTS.items()
    )


class ReputationService(Service):
    """Recomputes user reputation from contribution counters.

    Reputation is always recomputed in full, so repeated calls with
    unchanged counters are idempotent and any drift corrects itself.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize reputation service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def recompute(self, user_id: UserId) -> int:
        """Recompute and store a user's reputation.

        Args:
            user_id: User ID

        Returns:
            The new reputation

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("reputation_service.recompute", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("Reputation recompute for unknown user", user_id=user_id)
                raise NotFoundError("User", user_id)

            reputation = calculate_reputation(user.contributions)
            await self.user_repository.update_reputation(user_id, reputation)
            logfire.info(
                "Reputation recomputed",
                user_id=user_id,
                previous=user.reputation,
                reputation=reputation,
            )
            return reputation
