"""In-memory definition repository for testing."""

from collections import defaultdict
from datetime import datetime
from typing import List, Optional

from jerga.domain.model import Definition, TermActivity, TermVoteStats
from jerga.domain.repository.definition import DefinitionRepository
from jerga.domain.value import DefinitionId, Region, TermId

from .votable import InMemoryVotableStore


def _best_first(definitions: list[Definition]) -> list[Definition]:
    return sorted(
        definitions, key=lambda d: (d.votes.score, d.created_at), reverse=True
    )


class InMemoryDefinitionRepository(
    InMemoryVotableStore[Definition], DefinitionRepository
):
    """In-memory implementation of DefinitionRepository for testing."""

    async def find_by_id(self, definition_id: DefinitionId) -> Optional[Definition]:
        """Find a definition by ID."""
        return self._items.get(definition_id)

    async def save(self, definition: Definition) -> Definition:
        """Save a definition."""
        self._items[definition.id] = definition
        return definition

    async def find_by_term(
        self, term_id: TermId, region: Optional[Region] = None
    ) -> List[Definition]:
        """Active definitions of a term, best first."""
        return _best_first(
            [
                d
                for d in self._items.values()
                if d.term_id == term_id
                and d.is_active
                and (region is None or d.region == region)
            ]
        )

    async def has_active_for_term(self, term_id: TermId) -> bool:
        """Whether a term has at least one active definition."""
        return any(
            d.term_id == term_id and d.is_active for d in self._items.values()
        )

    async def get_term_stats(self, term_id: TermId) -> TermVoteStats:
        """Aggregate vote counters over a term's active definitions."""
        definitions = [
            d for d in self._items.values() if d.term_id == term_id and d.is_active
        ]
        return TermVoteStats(
            definition_count=len(definitions),
            total_up=sum(d.votes.up for d in definitions),
            total_down=sum(d.votes.down for d in definitions),
        )

    def _in_window(
        self,
        window_start: datetime,
        window_end: datetime,
        region: Optional[Region],
    ) -> list[Definition]:
        return [
            d
            for d in self._items.values()
            if d.is_active
            and window_start <= d.created_at <= window_end
            and (region is None or d.region == region)
        ]

    async def aggregate_term_activity(
        self,
        window_start: datetime,
        window_end: datetime,
        region: Optional[Region] = None,
    ) -> List[TermActivity]:
        """Group definitions created in the window by term."""
        grouped: dict[TermId, list[Definition]] = defaultdict(list)
        for definition in self._in_window(window_start, window_end, region):
            grouped[definition.term_id].append(definition)

        return [
            TermActivity(
                term_id=term_id,
                definition_count=len(definitions),
                total_vote_score=sum(d.votes.score for d in definitions),
                latest_activity=max(d.created_at for d in definitions),
            )
            for term_id, definitions in grouped.items()
        ]

    async def find_top_scored(
        self,
        window_start: datetime,
        window_end: datetime,
        region: Optional[Region] = None,
        limit: int = 10,
    ) -> List[Definition]:
        """Positively scored definitions created in the window."""
        scored = [
            d
            for d in self._in_window(window_start, window_end, region)
            if d.votes.score > 0
        ]
        return _best_first(scored)[:limit]

    async def search(
        self, query: str, region: Optional[Region] = None, limit: int = 20
    ) -> List[Definition]:
        """Substring search over definition content."""
        needle = query.lower()
        matches = [
            d
            for d in self._items.values()
            if d.is_active
            and needle in d.content.lower()
            and (region is None or d.region == region)
        ]
        return _best_first(matches)[:limit]
