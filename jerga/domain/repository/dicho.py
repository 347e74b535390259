"""Dicho repository interface."""

from abc import abstractmethod
from typing import List, Optional

from jerga.domain.model.dicho import Dicho
from jerga.domain.repository.votable import VotableRepository
from jerga.domain.value import DichoId, Region, TermId


class DichoRepository(VotableRepository):
    """Repository for Dicho entity."""

    @abstractmethod
    async def find_by_id(self, dicho_id: DichoId) -> Optional[Dicho]:
        """Find a dicho by ID."""
        pass

    @abstractmethod
    async def save(self, dicho: Dicho) -> Dicho:
        """Save a new dicho."""
        pass

    @abstractmethod
    async def find_by_term(
        self, term_id: TermId, region: Optional[Region] = None, limit: int = 20
    ) -> List[Dicho]:
        """Active dichos for a term.

        Args:
            term_id: Term the sayings use
            region: Region filter, or None for all regions
            limit: Maximum number of dichos

        Returns:
            Dichos ordered by score desc, then creation time desc
        """
        pass
