"""Flag moderation use cases (moderators and admins only)."""

from uuid import UUID

from pydantic import BaseModel, Field

from jerga.application.usecase.base import BaseUseCase, require_user
from jerga.domain.error import NotAuthorizedError
from jerga.domain.model import User
from jerga.domain.service import FlagService, UserService
from jerga.domain.value import FlagId, FlagStatus

from .create_flag import FlagItem


async def require_moderator(
    user_service: UserService, user_id: str | None, action: str
) -> User:
    """Load the caller and check they may moderate.

    Raises:
        UnauthenticatedError: If there is no authenticated user
        NotFoundError: If the caller has not been synced
        NotAuthorizedError: If the caller is not a moderator or admin
    """
    caller_id = require_user(user_id, action)
    user = await user_service.get_by_id(caller_id)
    if not user.is_moderator:
        raise NotAuthorizedError(caller_id, action)
    return user


class ListFlagsRequest(BaseModel):
    """List flags request."""

    user_id: str | None
    status: FlagStatus | None = FlagStatus.PENDING
    limit: int = Field(default=20, ge=1, le=50)


class ListFlagsResponse(BaseModel):
    """List flags response."""

    flags: list[FlagItem]
    total: int


class ListFlagsUseCase(BaseUseCase[ListFlagsRequest, ListFlagsResponse]):
    """Use case for the moderation queue."""

    def __init__(self, flag_service: FlagService, user_service: UserService) -> None:
        self.flag_service = flag_service
        self.user_service = user_service

    async def execute(self, request: ListFlagsRequest) -> ListFlagsResponse:
        await require_moderator(self.user_service, request.user_id, "view flags")

        flags = await self.flag_service.list_flags(request.status, request.limit)
        return ListFlagsResponse(
            flags=[FlagItem.from_flag(f) for f in flags], total=len(flags)
        )


class ReviewFlagRequest(BaseModel):
    """Review flag request."""

    flag_id: UUID
    status: FlagStatus
    moderator_notes: str | None = Field(default=None, max_length=1000)
    user_id: str | None  # Moderator's user ID


class ReviewFlagUseCase(BaseUseCase[ReviewFlagRequest, FlagItem]):
    """Use case for recording a moderator decision."""

    def __init__(self, flag_service: FlagService, user_service: UserService) -> None:
        self.flag_service = flag_service
        self.user_service = user_service

    async def execute(self, request: ReviewFlagRequest) -> FlagItem:
        moderator = await require_moderator(
            self.user_service, request.user_id, "review flags"
        )

        flag = await self.flag_service.review_flag(
            flag_id=FlagId(request.flag_id),
            status=request.status,
            moderator_id=moderator.id,
            moderator_notes=request.moderator_notes,
        )
        return FlagItem.from_flag(flag)
