"""Get user badges use case."""

from pydantic import BaseModel

from jerga.application.usecase.base import BaseUseCase, require_user
from jerga.domain.model import Badge
from jerga.domain.service import BadgeService


class BadgeItem(BaseModel):
    """Badge in response."""

    badge_id: str
    name: str
    description: str
    icon: str
    color: str

    @classmethod
    def from_badge(cls, badge: Badge) -> "BadgeItem":
        return cls(
            badge_id=badge.id,
            name=badge.name,
            description=badge.description,
            icon=badge.icon,
            color=badge.color,
        )


class GetUserBadgesRequest(BaseModel):
    """Get user badges request."""

    user_id: str | None


class GetUserBadgesResponse(BaseModel):
    """Earned badges and progress towards the next ones."""

    earned: list[BadgeItem]
    next: list[BadgeItem]
    progress: dict[str, float]


class GetUserBadgesUseCase(BaseUseCase[GetUserBadgesRequest, GetUserBadgesResponse]):
    """Use case for the caller's badges."""

    def __init__(self, badge_service: BadgeService) -> None:
        self.badge_service = badge_service

    async def execute(self, request: GetUserBadgesRequest) -> GetUserBadgesResponse:
        """Execute get user badges flow.

        Raises:
            UnauthenticatedError: If there is no authenticated user
            NotFoundError: If the user has not been synced
        """
        user_id = require_user(request.user_id, "view badges")

        progress = await self.badge_service.get_progress(user_id)
        return GetUserBadgesResponse(
            earned=[BadgeItem.from_badge(b) for b in progress.earned],
            next=[BadgeItem.from_badge(b) for b in progress.next],
            progress=progress.progress,
        )
