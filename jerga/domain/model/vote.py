"""Vote entity and vote state transitions.

Each user holds at most one vote per votable item. Repeating the same
polarity retracts the vote; choosing the other polarity flips it in place.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import Field

from jerga.domain.model.common import DomainModel, utcnow
from jerga.domain.value import UserId, VotableType, VoteCounters, VoteId, VoteType


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per item (enforced by database unique constraint)
    - Polymorphic reference to votable (definition, comment or dicho)
    """

    id: VoteId
    user_id: UserId
    votable_type: VotableType
    votable_id: UUID  # DefinitionId, CommentId or DichoId
    vote_type: VoteType
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class VoteAction(str, Enum):
    """What a cast vote did to the ledger."""

    CREATED = "created"
    RETRACTED = "retracted"
    FLIPPED = "flipped"


class VoteTransition(DomainModel):
    """Ledger change produced by one cast vote.

    ``deltas`` maps each polarity to the signed amount its counter must move.
    """

    action: VoteAction
    deltas: dict[VoteType, int]
    resulting_vote_type: Optional[VoteType]

    @property
    def is_noop(self) -> bool:
        return not any(self.deltas.values())


def compute_transition(
    existing: Optional[VoteType], requested: VoteType
) -> VoteTransition:
    """Compute the ledger transition for a vote request.

    Args:
        existing: Polarity of the user's current vote, or None
        requested: Polarity the user asked for

    Returns:
        The transition to apply
    """
    if existing is None:
        return VoteTransition(
            action=VoteAction.CREATED,
            deltas={requested: 1},
            resulting_vote_type=requested,
        )
    if existing == requested:
        return VoteTransition(
            action=VoteAction.RETRACTED,
            deltas={requested: -1},
            resulting_vote_type=None,
        )
    return VoteTransition(
        action=VoteAction.FLIPPED,
        deltas={existing: -1, requested: 1},
        resulting_vote_type=requested,
    )


class VoteOutcome(DomainModel):
    """Result of casting a vote: the applied transition and new tallies."""

    votable_type: VotableType
    votable_id: UUID
    author_id: UserId  # Author of the voted item
    transition: VoteTransition
    counters: VoteCounters
