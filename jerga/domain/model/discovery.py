"""Read models for discovery features (trending, word of the day)."""

from datetime import datetime
from typing import Optional

from jerga.domain.model.common import DomainModel
from jerga.domain.model.definition import Definition
from jerga.domain.model.term import Term
from jerga.domain.value import TermId


class TermActivity(DomainModel):
    """Definition activity for one term inside a time window."""

    term_id: TermId
    definition_count: int
    total_vote_score: int
    latest_activity: datetime


class TrendingTerm(DomainModel):
    """A term with its trending score for one query."""

    term: Term
    trending_score: float
    definition_count: int
    total_vote_score: int
    latest_activity: datetime


class TermVoteStats(DomainModel):
    """Aggregate vote statistics over a term's active definitions."""

    definition_count: int = 0
    total_up: int = 0
    total_down: int = 0

    @property
    def score(self) -> int:
        return self.total_up - self.total_down


class WordOfDay(DomainModel):
    """The term selected for one calendar date."""

    term: Term
    best_definition: Optional[Definition]
    stats: TermVoteStats
    seed: int
    eligible_count: int
