"""Term repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from jerga.domain.model.term import Term
from jerga.domain.value import Region, TermId, Word


class TermRepository(ABC):
    """Repository for Term entity.

    "Eligible" terms are active terms with at least one active definition.
    Eligible terms are enumerated in a stable order: creation time, then ID.
    """

    @abstractmethod
    async def find_by_id(self, term_id: TermId) -> Optional[Term]:
        """Find a term by ID.

        Args:
            term_id: The term's unique identifier

        Returns:
            The term if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, term_ids: Sequence[TermId]) -> List[Term]:
        """Find active terms by ID (batch query).

        Args:
            term_ids: Term IDs to load

        Returns:
            Active terms among the given IDs, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_word(
        self, word: Word, region: Optional[Region] = None
    ) -> Optional[Term]:
        """Find an active term by its word.

        Args:
            word: Normalized word
            region: Region to match, or None for any region

        Returns:
            The term if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, term: Term) -> Term:
        """Save a new term.

        Args:
            term: The term to save

        Returns:
            The saved term

        Raises:
            IntegrityError: If the word already exists in that region
        """
        pass

    @abstractmethod
    async def count_eligible(self, region: Optional[Region] = None) -> int:
        """Count eligible terms.

        Args:
            region: Region filter, or None for all regions

        Returns:
            Number of eligible terms
        """
        pass

    @abstractmethod
    async def find_eligible_at(
        self, position: int, region: Optional[Region] = None
    ) -> Optional[Term]:
        """Return the eligible term at a zero-based position in stable order.

        Args:
            position: Zero-based index
            region: Region filter, or None for all regions

        Returns:
            The term at that position, None if out of range
        """
        pass

    @abstractmethod
    async def search(
        self, query: str, region: Optional[Region] = None, limit: int = 20
    ) -> List[Term]:
        """Case-insensitive substring search over words and tags.

        Args:
            query: Search text
            region: Region filter, or None for all regions
            limit: Maximum number of results

        Returns:
            Matching active terms, most recent first
        """
        pass
