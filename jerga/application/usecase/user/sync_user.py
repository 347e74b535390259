"""Sync user use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from jerga.application.usecase.base import BaseUseCase
from jerga.domain.model import User
from jerga.domain.service import UserService
from jerga.domain.value import Region, UserId, UserRole


class SyncUserRequest(BaseModel):
    """Profile data pushed by the identity provider."""

    user_id: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=200)
    email: str
    username: str | None = None
    avatar_url: str | None = None
    region: Region = Region.GENERAL


class UserProfileResponse(BaseModel):
    """User profile with contribution standing."""

    user_id: str
    name: str
    username: str | None
    avatar_url: str | None
    region: Region
    role: UserRole
    reputation: int
    terms_submitted: int
    definitions_submitted: int
    votes_given: int
    comments_posted: int
    dichos_submitted: int
    badges: list[str]
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserProfileResponse":
        return cls(
            user_id=user.id,
            name=user.name,
            username=user.username,
            avatar_url=user.avatar_url,
            region=user.region,
            role=user.role,
            reputation=user.reputation,
            badges=user.badges,
            created_at=user.created_at,
            **user.contributions.model_dump(),
        )


class SyncUserUseCase(BaseUseCase[SyncUserRequest, UserProfileResponse]):
    """Use case for creating or updating a user from identity provider data.

    Only profile fields are written; counters, reputation and badges of an
    existing user are left untouched.
    """

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: SyncUserRequest) -> UserProfileResponse:
        user = await self.user_service.save(
            User(
                id=UserId(request.user_id),
                name=request.name,
                email=request.email,
                username=request.username,
                avatar_url=request.avatar_url,
                region=request.region,
            )
        )
        return UserProfileResponse.from_user(user)
