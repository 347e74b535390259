"""Get random term use case."""

from pydantic import BaseModel

from jerga.application.usecase.base import BaseUseCase
from jerga.domain.service import TermService, VoteService
from jerga.domain.value import Region

from .get_term import TermWithDefinitionsResponse, build_term_response


class GetRandomTermRequest(BaseModel):
    """Get random term request."""

    region: Region | None = None
    user_id: str | None = None


class GetRandomTermUseCase(
    BaseUseCase[GetRandomTermRequest, TermWithDefinitionsResponse]
):
    """Use case for picking a random term that has definitions."""

    def __init__(self, term_service: TermService, vote_service: VoteService) -> None:
        self.term_service = term_service
        self.vote_service = vote_service

    async def execute(
        self, request: GetRandomTermRequest
    ) -> TermWithDefinitionsResponse:
        term = await self.term_service.random_eligible(request.region)
        return await build_term_response(
            term, self.term_service, self.vote_service, request.user_id
        )
