"""Submit dicho use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from jerga.application.usecase.base import BaseUseCase, require_user
from jerga.application.usecase.common import DichoItem, refresh_user_standing
from jerga.domain.service import (
    BadgeService,
    DichoService,
    ReputationService,
    UserService,
)
from jerga.domain.value import ContributionType, Region, TermId


class SubmitDichoRequest(BaseModel):
    """Submit dicho request."""

    term_id: UUID
    content: str = Field(min_length=1, max_length=500)
    translation: str | None = Field(default=None, max_length=500)
    region: Region = Region.GENERAL
    user_id: str | None  # User ID from authenticated user


class SubmitDichoUseCase(BaseUseCase[SubmitDichoRequest, DichoItem]):
    """Use case for adding a saying to a term."""

    def __init__(
        self,
        dicho_service: DichoService,
        user_service: UserService,
        reputation_service: ReputationService,
        badge_service: BadgeService,
    ) -> None:
        """Initialize submit dicho use case.

        Args:
            dicho_service: Dicho domain service
            user_service: User domain service
            reputation_service: Reputation domain service
            badge_service: Badge domain service
        """
        self.dicho_service = dicho_service
        self.user_service = user_service
        self.reputation_service = reputation_service
        self.badge_service = badge_service

    async def execute(self, request: SubmitDichoRequest) -> DichoItem:
        """Execute submit dicho flow.

        Raises:
            UnauthenticatedError: If there is no authenticated user
            NotFoundError: If the term does not exist
        """
        user_id = require_user(request.user_id, "submit dichos")

        dicho = await self.dicho_service.create_dicho(
            term_id=TermId(request.term_id),
            author_id=user_id,
            content=request.content,
            translation=request.translation,
            region=request.region,
        )

        await self.user_service.increment_contribution(
            user_id, ContributionType.DICHOS_SUBMITTED
        )
        await refresh_user_standing(user_id, self.reputation_service, self.badge_service)

        return DichoItem.from_dicho(dicho)
