"""Term domain service."""

import random
from dataclasses import dataclass
from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from jerga.domain.error import NotFoundError, PersistenceError
from jerga.domain.model import Definition, Term
from jerga.domain.repository import DefinitionRepository, TermRepository
from jerga.domain.value import DefinitionId, Region, TermId, UserId, Word

from .base import Service


@dataclass
class TermSubmission:
    """Result of submitting a definition for a word."""

    term: Term
    definition: Definition
    is_new_term: bool


class TermService(Service):
    """Domain service for terms and their definitions."""

    def __init__(
        self,
        term_repository: TermRepository,
        definition_repository: DefinitionRepository,
    ) -> None:
        """Initialize term service.

        Args:
            term_repository: Term repository
            definition_repository: Definition repository
        """
        self.term_repository = term_repository
        self.definition_repository = definition_repository

    async def get_by_id(self, term_id: TermId) -> Term:
        """Get an active term.

        Raises:
            NotFoundError: If the term does not exist or is inactive
        """
        with logfire.span("term_service.get_by_id", term_id=str(term_id)):
            term = await self.term_repository.find_by_id(term_id)
            if not term or not term.is_active:
                logfire.warn("Term not found", term_id=str(term_id))
                raise NotFoundError("Term", str(term_id))
            return term

    async def find_by_word(
        self, word: Word, region: Optional[Region] = None
    ) -> Optional[Term]:
        """Find an active term by word, optionally restricted to a region."""
        with logfire.span(
            "term_service.find_by_word",
            word=word.root,
            region=region.value if region else None,
        ):
            return await self.term_repository.find_by_word(word, region)

    async def get_definitions(
        self, term_id: TermId, region: Optional[Region] = None
    ) -> list[Definition]:
        """Active definitions of a term, best first."""
        with logfire.span("term_service.get_definitions", term_id=str(term_id)):
            return await self.definition_repository.find_by_term(term_id, region)

    async def submit(
        self,
        author_id: UserId,
        word: Word,
        region: Region,
        content: str,
        example: Optional[str] = None,
        tags: Optional[list[str]] = None,
        synonyms: Optional[list[str]] = None,
    ) -> TermSubmission:
        """Add a definition, creating the term if the word is new in the region.

        Args:
            author_id: Submitting user
            word: Normalized word
            region: Region the word belongs to
            content: Definition text
            example: Usage example
            tags: Tags for a new term
            synonyms: Synonyms for a new term

        Returns:
            The term, the new definition and whether the term was created
        """
        with logfire.span(
            "term_service.submit",
            author_id=author_id,
            word=word.root,
            region=region.value,
        ):
            term = await self.term_repository.find_by_word(word, region)
            is_new_term = term is None

            if term is None:
                term = Term(
                    id=TermId(uuid4()),
                    word=word,
                    region=region,
                    tags=tags or [],
                    synonyms=synonyms or [],
                    author_id=author_id,
                )
                try:
                    term = await self.term_repository.save(term)
                except IntegrityError:
                    # Same word submitted concurrently; attach to the winner
                    logfire.warn(
                        "Concurrent term create, reusing existing term",
                        word=word.root,
                        region=region.value,
                    )
                    existing = await self.term_repository.find_by_word(word, region)
                    if existing is None:
                        raise PersistenceError("Term disappeared during concurrent create")
                    term = existing
                    is_new_term = False

            definition = await self.definition_repository.save(
                Definition(
                    id=DefinitionId(uuid4()),
                    term_id=term.id,
                    content=content,
                    example=example,
                    author_id=author_id,
                    region=region,
                )
            )

            logfire.info(
                "Definition submitted",
                term_id=str(term.id),
                definition_id=str(definition.id),
                is_new_term=is_new_term,
            )
            return TermSubmission(
                term=term, definition=definition, is_new_term=is_new_term
            )

    async def random_eligible(self, region: Optional[Region] = None) -> Term:
        """A uniformly random term that has at least one definition.

        Raises:
            NotFoundError: If no term is eligible
        """
        with logfire.span(
            "term_service.random_eligible", region=region.value if region else None
        ):
            total = await self.term_repository.count_eligible(region)
            if total == 0:
                raise NotFoundError("Term", "random")

            term = await self.term_repository.find_eligible_at(
                random.randrange(total), region
            )
            if term is None:
                raise PersistenceError("Eligible terms changed during selection")
            return term

    async def search(
        self, query: str, region: Optional[Region] = None, limit: int = 20
    ) -> tuple[list[Term], list[Definition]]:
        """Terms whose word or tags match, and definitions whose content matches."""
        with logfire.span(
            "term_service.search",
            query=query,
            region=region.value if region else None,
            limit=limit,
        ):
            terms = await self.term_repository.search(query, region, limit)
            definitions = await self.definition_repository.search(query, region, limit)
            logfire.info(
                "Search completed",
                query=query,
                terms=len(terms),
                definitions=len(definitions),
            )
            return terms, definitions
