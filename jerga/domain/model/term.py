"""Term entity."""

from datetime import datetime

from pydantic import Field

from jerga.domain.model.common import DomainModel, utcnow
from jerga.domain.value import Region, TermId, UserId, Word


class Term(DomainModel):
    """A slang headword in a given region.

    A word may exist once per region; definitions hang off the term.
    """

    id: TermId
    word: Word
    region: Region = Region.GENERAL
    tags: list[str] = Field(default_factory=list)
    synonyms: list[str] = Field(default_factory=list)
    author_id: UserId
    is_active: bool = True
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
