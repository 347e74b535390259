"""Get term use case."""

from pydantic import BaseModel

from jerga.application.usecase.base import BaseUseCase
from jerga.application.usecase.common import DefinitionItem, TermItem
from jerga.domain.error import NotFoundError
from jerga.domain.model import Term
from jerga.domain.service import TermService, VoteService
from jerga.domain.value import Region, UserId, VotableType, Word


class GetTermRequest(BaseModel):
    """Get term request."""

    word: Word
    region: Region | None = None
    user_id: str | None = None  # Current user ID (if authenticated)


class TermWithDefinitionsResponse(BaseModel):
    """A term and its definitions, best first."""

    term: TermItem
    definitions: list[DefinitionItem]


async def build_term_response(
    term: Term,
    term_service: TermService,
    vote_service: VoteService,
    user_id: str | None,
) -> TermWithDefinitionsResponse:
    """Load a term's definitions and the user's votes on them."""
    definitions = await term_service.get_definitions(term.id)

    user_votes = {}
    if user_id and definitions:
        user_votes = await vote_service.get_user_votes(
            UserId(user_id),
            VotableType.DEFINITION,
            [definition.id for definition in definitions],
        )

    return TermWithDefinitionsResponse(
        term=TermItem.from_term(term),
        definitions=[
            DefinitionItem.from_definition(d, user_votes.get(d.id)) for d in definitions
        ],
    )


class GetTermUseCase(BaseUseCase[GetTermRequest, TermWithDefinitionsResponse]):
    """Use case for looking up a word with its definitions."""

    def __init__(self, term_service: TermService, vote_service: VoteService) -> None:
        """Initialize get term use case.

        Args:
            term_service: Term domain service
            vote_service: Vote service for the caller's votes
        """
        self.term_service = term_service
        self.vote_service = vote_service

    async def execute(self, request: GetTermRequest) -> TermWithDefinitionsResponse:
        """Execute get term flow.

        Raises:
            NotFoundError: If the word has no active term
        """
        term = await self.term_service.find_by_word(request.word, request.region)
        if not term:
            raise NotFoundError("Term", request.word.root)

        return await build_term_response(
            term, self.term_service, self.vote_service, request.user_id
        )
