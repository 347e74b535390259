"""Comment entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from jerga.domain.model.common import DomainModel, utcnow
from jerga.domain.value import CommentId, DefinitionId, UserId, VoteCounters


class Comment(DomainModel):
    """Comment on a definition.

    Replies point at their parent comment on the same definition.
    """

    id: CommentId
    definition_id: DefinitionId
    author_id: UserId
    content: str = Field(min_length=1, max_length=1000)
    parent_id: Optional[CommentId] = None
    votes: VoteCounters = Field(default_factory=VoteCounters)
    is_active: bool = True
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
