"""Score aggregation domain service."""

from uuid import UUID

import logfire

from jerga.domain.error import NotFoundError, ValidationError
from jerga.domain.repository import (
    CommentRepository,
    DefinitionRepository,
    DichoRepository,
    VotableRepository,
)
from jerga.domain.value import VotableType, VoteCounters, VoteType

from .base import Service


class ScoreService(Service):
    """Maintains up/down/score counters on votable items.

    Counters are only changed through atomic increments in the repository,
    never by reading and writing back a value.
    """

    def __init__(
        self,
        definition_repository: DefinitionRepository,
        comment_repository: CommentRepository,
        dicho_repository: DichoRepository,
    ) -> None:
        """Initialize score service.

        Args:
            definition_repository: Definition repository
            comment_repository: Comment repository
            dicho_repository: Dicho repository
        """
        self._repositories: dict[VotableType, VotableRepository] = {
            VotableType.DEFINITION: definition_repository,
            VotableType.COMMENT: comment_repository,
            VotableType.DICHO: dicho_repository,
        }

    def repository_for(self, votable_type: VotableType) -> VotableRepository:
        """Repository holding items of the given votable type."""
        return self._repositories[votable_type]

    async def apply_delta(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        vote_type: VoteType,
        amount: int,
    ) -> VoteCounters:
        """Apply a signed increment to one polarity counter.

        A decrement that would take the counter below zero is not applied;
        it means the vote ledger and the counters disagree, so it is
        reported as an error event and the current counters are returned.

        Args:
            votable_type: Type of item
            votable_id: ID of the item
            vote_type: Counter to change
            amount: +1 or -1

        Returns:
            Counters after the update

        Raises:
            ValidationError: If amount is not +1 or -1
            NotFoundError: If the item does not exist
        """
        if amount not in (1, -1):
            raise ValidationError(f"Vote delta must be +1 or -1, got {amount}")

        with logfire.span(
            "score_service.apply_delta",
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            vote_type=vote_type.value,
            amount=amount,
        ):
            repository = self.repository_for(votable_type)
            counters = await repository.increment_votes(votable_id, vote_type, amount)
            if counters is not None:
                return counters

            found = await repository.find_votable(votable_id)
            if found is None:
                logfire.warn(
                    "Score update on missing item",
                    votable_type=votable_type.value,
                    votable_id=str(votable_id),
                )
                raise NotFoundError(votable_type.value.capitalize(), str(votable_id))

            _, current = found
            logfire.error(
                "Vote counter underflow prevented, ledger and counters disagree",
                votable_type=votable_type.value,
                votable_id=str(votable_id),
                vote_type=vote_type.value,
                up=current.up,
                down=current.down,
            )
            return current
