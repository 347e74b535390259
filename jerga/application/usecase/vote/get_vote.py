"""Get vote use case."""

from uuid import UUID

from pydantic import BaseModel

from jerga.application.usecase.base import BaseUseCase, require_user
from jerga.domain.service import VoteService
from jerga.domain.value import VotableType, VoteType


class GetVoteRequest(BaseModel):
    """Get vote request."""

    votable_type: VotableType
    votable_id: UUID
    user_id: str | None


class GetVoteResponse(BaseModel):
    """The caller's current vote on an item, if any."""

    votable_type: VotableType
    votable_id: str
    user_vote: VoteType | None


class GetVoteUseCase(BaseUseCase[GetVoteRequest, GetVoteResponse]):
    """Use case for reading the caller's vote on an item."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetVoteRequest) -> GetVoteResponse:
        user_id = require_user(request.user_id, "view your votes")

        user_vote = await self.vote_service.get_user_vote(
            user_id, request.votable_type, request.votable_id
        )
        return GetVoteResponse(
            votable_type=request.votable_type,
            votable_id=str(request.votable_id),
            user_vote=user_vote,
        )
