"""Submit term use case."""

from pydantic import BaseModel, Field

from jerga.application.usecase.base import BaseUseCase, require_user
from jerga.application.usecase.common import (
    DefinitionItem,
    TermItem,
    refresh_user_standing,
)
from jerga.domain.service import (
    BadgeService,
    ReputationService,
    TermService,
    UserService,
)
from jerga.domain.value import ContributionType, Region, Word


class SubmitTermRequest(BaseModel):
    """Submit term request."""

    word: Word
    region: Region = Region.GENERAL
    definition: str = Field(min_length=10, max_length=2000)
    example: str | None = Field(default=None, max_length=500)
    tags: list[str] = Field(default_factory=list)
    synonyms: list[str] = Field(default_factory=list)
    user_id: str | None  # User ID from authenticated user


class SubmitTermResponse(BaseModel):
    """Submit term response."""

    term: TermItem
    definition: DefinitionItem
    is_new_term: bool


class SubmitTermUseCase(BaseUseCase[SubmitTermRequest, SubmitTermResponse]):
    """Use case for adding a definition, creating its term if needed."""

    def __init__(
        self,
        term_service: TermService,
        user_service: UserService,
        reputation_service: ReputationService,
        badge_service: BadgeService,
    ) -> None:
        """Initialize submit term use case.

        Args:
            term_service: Term domain service
            user_service: User domain service
            reputation_service: Reputation domain service
            badge_service: Badge domain service
        """
        self.term_service = term_service
        self.user_service = user_service
        self.reputation_service = reputation_service
        self.badge_service = badge_service

    async def execute(self, request: SubmitTermRequest) -> SubmitTermResponse:
        """Execute submit term flow.

        Steps:
        1. Reuse the term for this word and region, or create it
        2. Create the definition
        3. Count the new term (if any) and the definition for the author
        4. Refresh the author's reputation and badges (best effort)

        Args:
            request: Submit term request

        Returns:
            The term, its new definition and whether the term was created

        Raises:
            UnauthenticatedError: If there is no authenticated user
        """
        user_id = require_user(request.user_id, "submit terms")

        submission = await self.term_service.submit(
            author_id=user_id,
            word=request.word,
            region=request.region,
            content=request.definition,
            example=request.example,
            tags=request.tags,
            synonyms=request.synonyms,
        )

        if submission.is_new_term:
            await self.user_service.increment_contribution(
                user_id, ContributionType.TERMS_SUBMITTED
            )
        await self.user_service.increment_contribution(
            user_id, ContributionType.DEFINITIONS_SUBMITTED
        )

        await refresh_user_standing(user_id, self.reputation_service, self.badge_service)

        return SubmitTermResponse(
            term=TermItem.from_term(submission.term),
            definition=DefinitionItem.from_definition(submission.definition),
            is_new_term=submission.is_new_term,
        )
