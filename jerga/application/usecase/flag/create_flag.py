"""Create flag use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from jerga.application.usecase.base import BaseUseCase, require_user
from jerga.domain.model import Flag
from jerga.domain.service import FlagService
from jerga.domain.value import FlagReason, FlagStatus, FlagTargetType


class FlagItem(BaseModel):
    """Flag in response."""

    flag_id: str
    reporter_id: str
    target_type: FlagTargetType
    target_id: str
    reason: FlagReason
    custom_reason: str | None
    status: FlagStatus
    moderator_id: str | None
    moderator_notes: str | None
    reviewed_at: datetime | None
    created_at: datetime

    @classmethod
    def from_flag(cls, flag: Flag) -> "FlagItem":
        return cls(
            flag_id=str(flag.id),
            reporter_id=flag.reporter_id,
            target_type=flag.target_type,
            target_id=str(flag.target_id),
            reason=flag.reason,
            custom_reason=flag.custom_reason,
            status=flag.status,
            moderator_id=flag.moderator_id,
            moderator_notes=flag.moderator_notes,
            reviewed_at=flag.reviewed_at,
            created_at=flag.created_at,
        )


class CreateFlagRequest(BaseModel):
    """Create flag request."""

    target_type: FlagTargetType
    target_id: UUID
    reason: FlagReason
    custom_reason: str | None = Field(default=None, max_length=500)
    user_id: str | None  # User ID from authenticated user


class CreateFlagUseCase(BaseUseCase[CreateFlagRequest, FlagItem]):
    """Use case for reporting content to moderators."""

    def __init__(self, flag_service: FlagService) -> None:
        self.flag_service = flag_service

    async def execute(self, request: CreateFlagRequest) -> FlagItem:
        """Execute create flag flow.

        Raises:
            UnauthenticatedError: If there is no authenticated user
            NotFoundError: If the target does not exist
            DuplicateFlagError: If the caller already has an open flag on it
        """
        user_id = require_user(request.user_id, "flag content")

        flag = await self.flag_service.create_flag(
            reporter_id=user_id,
            target_type=request.target_type,
            target_id=request.target_id,
            reason=request.reason,
            custom_reason=request.custom_reason,
        )
        return FlagItem.from_flag(flag)
