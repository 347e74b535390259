"""In-memory dicho repository for testing."""

from typing import List, Optional

from jerga.domain.model import Dicho
from jerga.domain.repository.dicho import DichoRepository
from jerga.domain.value import DichoId, Region, TermId

from .votable import InMemoryVotableStore


class InMemoryDichoRepository(InMemoryVotableStore[Dicho], DichoRepository):
    """In-memory implementation of DichoRepository for testing."""

    async def find_by_id(self, dicho_id: DichoId) -> Optional[Dicho]:
        """Find a dicho by ID."""
        return self._items.get(dicho_id)

    async def save(self, dicho: Dicho) -> Dicho:
        """Save a dicho."""
        self._items[dicho.id] = dicho
        return dicho

    async def find_by_term(
        self, term_id: TermId, region: Optional[Region] = None, limit: int = 20
    ) -> List[Dicho]:
        """Active dichos for a term, best first."""
        dichos = [
            d
            for d in self._items.values()
            if d.term_id == term_id
            and d.is_active
            and (region is None or d.region == region)
        ]
        dichos.sort(key=lambda d: (d.votes.score, d.created_at), reverse=True)
        return dichos[:limit]
