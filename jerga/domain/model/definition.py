"""Definition entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from jerga.domain.model.common import DomainModel, utcnow
from jerga.domain.value import DefinitionId, Region, TermId, UserId, VoteCounters


class Definition(DomainModel):
    """A user-submitted meaning of a term.

    Votable. ``votes`` is only changed through the score aggregator.
    """

    id: DefinitionId
    term_id: TermId
    content: str = Field(min_length=10, max_length=2000)
    example: Optional[str] = Field(default=None, max_length=500)
    author_id: UserId
    region: Region = Region.GENERAL
    votes: VoteCounters = Field(default_factory=VoteCounters)
    is_active: bool = True
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
