"""Definition repository interface."""

from abc import abstractmethod
from datetime import datetime
from typing import List, Optional

from jerga.domain.model.definition import Definition
from jerga.domain.model.discovery import TermActivity, TermVoteStats
from jerga.domain.repository.votable import VotableRepository
from jerga.domain.value import DefinitionId, Region, TermId


class DefinitionRepository(VotableRepository):
    """Repository for Definition entity."""

    @abstractmethod
    async def find_by_id(self, definition_id: DefinitionId) -> Optional[Definition]:
        """Find a definition by ID.

        Args:
            definition_id: The definition's unique identifier

        Returns:
            The definition if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, definition: Definition) -> Definition:
        """Save a new definition.

        Args:
            definition: The definition to save

        Returns:
            The saved definition
        """
        pass

    @abstractmethod
    async def find_by_term(
        self, term_id: TermId, region: Optional[Region] = None
    ) -> List[Definition]:
        """Active definitions of a term, best first.

        Args:
            term_id: Parent term
            region: Region filter, or None for all regions

        Returns:
            Definitions ordered by score desc, then creation time desc
        """
        pass

    @abstractmethod
    async def get_term_stats(self, term_id: TermId) -> TermVoteStats:
        """Aggregate vote counters over a term's active definitions.

        Args:
            term_id: Parent term

        Returns:
            Definition count and summed up/down counters
        """
        pass

    @abstractmethod
    async def aggregate_term_activity(
        self,
        window_start: datetime,
        window_end: datetime,
        region: Optional[Region] = None,
    ) -> List[TermActivity]:
        """Group active definitions created in a window by parent term.

        Args:
            window_start: Inclusive lower bound on creation time
            window_end: Inclusive upper bound on creation time
            region: Region filter, or None for all regions

        Returns:
            One activity row per term with definitions in the window
        """
        pass

    @abstractmethod
    async def find_top_scored(
        self,
        window_start: datetime,
        window_end: datetime,
        region: Optional[Region] = None,
        limit: int = 10,
    ) -> List[Definition]:
        """Active definitions created in a window with a positive score.

        Args:
            window_start: Inclusive lower bound on creation time
            window_end: Inclusive upper bound on creation time
            region: Region filter, or None for all regions
            limit: Maximum number of results

        Returns:
            Definitions ordered by score desc, then creation time desc
        """
        pass

    @abstractmethod
    async def search(
        self, query: str, region: Optional[Region] = None, limit: int = 20
    ) -> List[Definition]:
        """Case-insensitive substring search over definition content.

        Args:
            query: Search text
            region: Region filter, or None for all regions
            limit: Maximum number of results

        Returns:
            Matching active definitions, best scored first
        """
        pass
