"""Vote domain service."""

from typing import Optional
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from jerga.domain.error import (
    NotFoundError,
    PersistenceError,
    UnauthenticatedError,
    ValidationError,
)
from jerga.domain.model import Vote, VoteOutcome, VoteTransition, compute_transition
from jerga.domain.repository import VoteRepository
from jerga.domain.value import (
    ContributionType,
    UserId,
    VotableType,
    VoteId,
    VoteType,
)

from .base import Service
from .score_service import ScoreService
from .user_service import UserService


class VoteService(Service):
    """Domain service for the vote ledger.

    A user holds at most one vote per item. Casting the same polarity
    again retracts the vote; casting the other polarity flips it.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        score_service: ScoreService,
        user_service: UserService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            score_service: Score aggregation service
            user_service: User domain service
        """
        self.vote_repository = vote_repository
        self.score_service = score_service
        self.user_service = user_service

    async def cast_vote(
        self,
        user_id: Optional[UserId],
        votable_type: VotableType,
        votable_id: UUID,
        vote_type: VoteType | str,
    ) -> VoteOutcome:
        """Cast, flip or retract a vote.

        Steps:
        1. Record the ledger transition (create, flip in place, or delete)
        2. Apply the counter deltas through the score service
        3. Count the action towards the voter's ``votes_given``

        Args:
            user_id: Voter's identity
            votable_type: Type of item
            votable_id: ID of the item
            vote_type: Requested polarity

        Returns:
            The applied transition and resulting counters

        Raises:
            UnauthenticatedError: If no user ID was supplied
            ValidationError: If the polarity is unknown
            NotFoundError: If the item does not exist
        """
        if not user_id:
            raise UnauthenticatedError("vote")
        try:
            vote_type = VoteType(vote_type)
        except ValueError:
            raise ValidationError(f"Unknown vote type: {vote_type}")

        with logfire.span(
            "vote_service.cast_vote",
            user_id=user_id,
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            vote_type=vote_type.value,
        ):
            repository = self.score_service.repository_for(votable_type)
            found = await repository.find_votable(votable_id)
            if found is None:
                logfire.warn(
                    "Vote on non-existent item",
                    votable_type=votable_type.value,
                    votable_id=str(votable_id),
                )
                raise NotFoundError(votable_type.value.capitalize(), str(votable_id))
            author_id, counters = found

            transition = await self._record(user_id, votable_type, votable_id, vote_type)

            for delta_type, amount in transition.deltas.items():
                counters = await self.score_service.apply_delta(
                    votable_type, votable_id, delta_type, amount
                )

            if not transition.is_noop:
                await self.user_service.increment_contribution(
                    user_id, ContributionType.VOTES_GIVEN
                )

            logfire.info(
                "Vote cast",
                user_id=user_id,
                votable_id=str(votable_id),
                action=transition.action.value,
                up=counters.up,
                down=counters.down,
            )
            return VoteOutcome(
                votable_type=votable_type,
                votable_id=votable_id,
                author_id=author_id,
                transition=transition,
                counters=counters,
            )

    async def _record(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
        vote_type: VoteType,
    ) -> VoteTransition:
        """Apply the ledger side of a vote request."""
        existing = await self.vote_repository.find_by_user_and_votable(
            user_id, votable_type, votable_id
        )
        if existing is not None:
            return await self._update_existing(existing, vote_type)

        vote = Vote(
            id=VoteId(uuid4()),
            user_id=user_id,
            votable_type=votable_type,
            votable_id=votable_id,
            vote_type=vote_type,
        )
        try:
            await self.vote_repository.save(vote)
        except IntegrityError:
            # A concurrent request created the vote first; treat ours as an update
            logfire.warn(
                "Concurrent vote create, retrying as update",
                user_id=user_id,
                votable_id=str(votable_id),
            )
            existing = await self.vote_repository.find_by_user_and_votable(
                user_id, votable_type, votable_id
            )
            if existing is None:
                raise PersistenceError("Vote disappeared during concurrent update")
            return await self._update_existing(existing, vote_type)

        return compute_transition(None, vote_type)

    async def _update_existing(
        self, existing: Vote, vote_type: VoteType
    ) -> VoteTransition:
        transition = compute_transition(existing.vote_type, vote_type)

        if transition.resulting_vote_type is None:
            applied = await self.vote_repository.delete(existing.id)
        else:
            applied = (
                await self.vote_repository.update_vote_type(existing.id, vote_type)
                is not None
            )

        if not applied:
            # Another request already removed this vote; nothing left to change
            logfire.warn(
                "Vote changed concurrently, no counters updated",
                vote_id=str(existing.id),
            )
            return transition.model_copy(update={"deltas": {}})
        return transition

    async def get_user_vote(
        self, user_id: UserId, votable_type: VotableType, votable_id: UUID
    ) -> Optional[VoteType]:
        """Current polarity of a user's vote on an item, if any."""
        vote = await self.vote_repository.find_by_user_and_votable(
            user_id, votable_type, votable_id
        )
        return vote.vote_type if vote else None

    async def get_user_votes(
        self, user_id: UserId, votable_type: VotableType, votable_ids: list[UUID]
    ) -> dict[UUID, VoteType]:
        """Map item ID to the user's vote for the items they voted on.

        Args:
            user_id: User ID
            votable_type: Type of items
            votable_ids: Item IDs to check

        Returns:
            Dictionary from voted item ID to polarity
        """
        if not votable_ids:
            return {}

        votes = await self.vote_repository.find_by_user_and_votables(
            user_id=user_id, votable_type=votable_type, votable_ids=votable_ids
        )
        return {UUID(str(vote.votable_id)): vote.vote_type for vote in votes}
