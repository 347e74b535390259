"""In-memory term repository for testing."""

from typing import List, Optional, Sequence

from sqlalchemy.exc import IntegrityError

from jerga.domain.model import Term
from jerga.domain.repository.term import TermRepository
from jerga.domain.value import Region, TermId, Word

from .definition import InMemoryDefinitionRepository


class InMemoryTermRepository(TermRepository):
    """In-memory implementation of TermRepository for testing.

    Eligibility checks need to see definitions, so the definition
    repository of the same test environment is passed in.
    """

    def __init__(self, definition_repository: InMemoryDefinitionRepository) -> None:
        self._terms: dict[TermId, Term] = {}
        self._definitions = definition_repository

    async def find_by_id(self, term_id: TermId) -> Optional[Term]:
        """Find a term by ID."""
        return self._terms.get(term_id)

    async def find_by_ids(self, term_ids: Sequence[TermId]) -> List[Term]:
        """Find active terms by ID."""
        wanted = set(term_ids)
        return [t for t in self._terms.values() if t.id in wanted and t.is_active]

    async def find_by_word(
        self, word: Word, region: Optional[Region] = None
    ) -> Optional[Term]:
        """Find an active term by its word."""
        for term in self._in_stable_order():
            if (
                term.word == word
                and term.is_active
                and (region is None or term.region == region)
            ):
                return term
        return None

    async def save(self, term: Term) -> Term:
        """Save a term.

        Raises:
            IntegrityError: If the word already exists in that region
        """
        for existing in self._terms.values():
            if existing.word == term.word and existing.region == term.region:
                raise IntegrityError("Duplicate term", None, Exception())
        self._terms[term.id] = term
        return term

    def _in_stable_order(self) -> list[Term]:
        return sorted(self._terms.values(), key=lambda t: (t.created_at, str(t.id)))

    async def _eligible(self, region: Optional[Region]) -> list[Term]:
        eligible = []
        for term in self._in_stable_order():
            if not term.is_active:
                continue
            if region is not None and term.region != region:
                continue
            if await self._definitions.has_active_for_term(term.id):
                eligible.append(term)
        return eligible

    async def count_eligible(self, region: Optional[Region] = None) -> int:
        """Count eligible terms."""
        return len(await self._eligible(region))

    async def find_eligible_at(
        self, position: int, region: Optional[Region] = None
    ) -> Optional[Term]:
        """Eligible term at a zero-based position in stable order."""
        eligible = await self._eligible(region)
        if 0 <= position < len(eligible):
            return eligible[position]
        return None

    async def search(
        self, query: str, region: Optional[Region] = None, limit: int = 20
    ) -> List[Term]:
        """Substring search over words and tags."""
        needle = query.lower()
        matches = [
            t
            for t in self._terms.values()
            if t.is_active
            and (region is None or t.region == region)
            and (
                needle in t.word.root
                or any(needle in tag.lower() for tag in t.tags)
            )
        ]
        matches.sort(key=lambda t: t.created_at, reverse=True)
        return matches[:limit]
