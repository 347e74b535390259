"""Search terms use case."""

from pydantic import BaseModel, Field

from jerga.application.usecase.base import BaseUseCase
from jerga.application.usecase.common import DefinitionItem, TermItem
from jerga.domain.service import TermService
from jerga.domain.value import Region


class SearchTermsRequest(BaseModel):
    """Search request."""

    q: str = Field(min_length=1, max_length=100)
    region: Region | None = None
    limit: int = Field(default=20, ge=1, le=50)


class SearchTermsResponse(BaseModel):
    """Search results."""

    query: str
    terms: list[TermItem]
    definitions: list[DefinitionItem]
    total: int


class SearchTermsUseCase(BaseUseCase[SearchTermsRequest, SearchTermsResponse]):
    """Use case for substring search over words, tags and definitions."""

    def __init__(self, term_service: TermService) -> None:
        self.term_service = term_service

    async def execute(self, request: SearchTermsRequest) -> SearchTermsResponse:
        query = request.q.strip()
        terms, definitions = await self.term_service.search(
            query, request.region, request.limit
        )
        return SearchTermsResponse(
            query=query,
            terms=[TermItem.from_term(term) for term in terms],
            definitions=[DefinitionItem.from_definition(d) for d in definitions],
            total=len(terms) + len(definitions),
        )
