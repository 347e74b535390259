"""Get leaderboard use case."""

from pydantic import BaseModel, Field

from jerga.application.usecase.base import BaseUseCase
from jerga.domain.service import UserService
from jerga.domain.value import LeaderboardField

from .sync_user import UserProfileResponse


class GetLeaderboardRequest(BaseModel):
    """Get leaderboard request."""

    type: LeaderboardField = LeaderboardField.REPUTATION
    limit: int = Field(default=10, ge=1, le=50)


class GetLeaderboardResponse(BaseModel):
    """Get leaderboard response."""

    type: LeaderboardField
    users: list[UserProfileResponse]


class GetLeaderboardUseCase(BaseUseCase[GetLeaderboardRequest, GetLeaderboardResponse]):
    """Use case for the community leaderboard."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetLeaderboardRequest) -> GetLeaderboardResponse:
        users = await self.user_service.get_leaderboard(request.type, request.limit)
        return GetLeaderboardResponse(
            type=request.type,
            users=[UserProfileResponse.from_user(user) for user in users],
        )
