"""Dicho entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from jerga.domain.model.common import DomainModel, utcnow
from jerga.domain.value import DichoId, Region, TermId, UserId, VoteCounters


class Dicho(DomainModel):
    """A regional saying or proverb that uses a term."""

    id: DichoId
    term_id: TermId
    content: str = Field(min_length=1, max_length=500)
    translation: Optional[str] = Field(default=None, max_length=500)
    author_id: UserId
    region: Region = Region.GENERAL
    votes: VoteCounters = Field(default_factory=VoteCounters)
    is_active: bool = True
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
