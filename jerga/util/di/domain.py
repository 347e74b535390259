"""Domain layer DI providers."""

from dishka import Scope, provide

from jerga.config import AuthSettings, RankingSettings
from jerga.domain.model.common import Clock
from jerga.domain.repository import (
    CommentRepository,
    DefinitionRepository,
    DichoRepository,
    FlagRepository,
    NotificationRepository,
    TermRepository,
    UserRepository,
    VoteRepository,
)
from jerga.domain.service import (
    BadgeService,
    CommentService,
    DichoService,
    FlagService,
    JWTService,
    NotificationService,
    ReputationService,
    ScoreService,
    TermService,
    TrendingService,
    UserService,
    VoteService,
    WordOfDayService,
)
from jerga.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(notification_repository=notification_repository)

    @provide
    def get_score_service(
        self,
        definition_repository: DefinitionRepository,
        comment_repository: CommentRepository,
        dicho_repository: DichoRepository,
    ) -> ScoreService:
        """Provide score aggregation service over all votable repositories."""
        return ScoreService(
            definition_repository=definition_repository,
            comment_repository=comment_repository,
            dicho_repository=dicho_repository,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        score_service: ScoreService,
        user_service: UserService,
    ) -> VoteService:
        """Provide vote ledger service."""
        return VoteService(
            vote_repository=vote_repository,
            score_service=score_service,
            user_service=user_service,
        )

    @provide
    def get_reputation_service(
        self, user_repository: UserRepository
    ) -> ReputationService:
        """Provide reputation service."""
        return ReputationService(user_repository=user_repository)

    @provide
    def get_badge_service(
        self,
        user_repository: UserRepository,
        notification_service: NotificationService,
    ) -> BadgeService:
        """Provide badge service."""
        return BadgeService(
            user_repository=user_repository,
            notification_service=notification_service,
        )

    @provide
    def get_trending_service(
        self,
        term_repository: TermRepository,
        definition_repository: DefinitionRepository,
        ranking_settings: RankingSettings,
    ) -> TrendingService:
        """Provide trending service."""
        return TrendingService(
            term_repository=term_repository,
            definition_repository=definition_repository,
            ranking_settings=ranking_settings,
        )

    @provide
    def get_word_of_day_service(
        self,
        term_repository: TermRepository,
        definition_repository: DefinitionRepository,
        clock: Clock,
    ) -> WordOfDayService:
        """Provide word of the day service."""
        return WordOfDayService(
            term_repository=term_repository,
            definition_repository=definition_repository,
            clock=clock,
        )

    @provide
    def get_term_service(
        self,
        term_repository: TermRepository,
        definition_repository: DefinitionRepository,
    ) -> TermService:
        """Provide term domain service."""
        return TermService(
            term_repository=term_repository,
            definition_repository=definition_repository,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        definition_repository: DefinitionRepository,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            definition_repository=definition_repository,
        )

    @provide
    def get_dicho_service(
        self, dicho_repository: DichoRepository, term_repository: TermRepository
    ) -> DichoService:
        """Provide dicho domain service."""
        return DichoService(
            dicho_repository=dicho_repository, term_repository=term_repository
        )

    @provide
    def get_flag_service(
        self,
        flag_repository: FlagRepository,
        term_repository: TermRepository,
        definition_repository: DefinitionRepository,
        comment_repository: CommentRepository,
        dicho_repository: DichoRepository,
    ) -> FlagService:
        """Provide flag domain service."""
        return FlagService(
            flag_repository=flag_repository,
            term_repository=term_repository,
            definition_repository=definition_repository,
            comment_repository=comment_repository,
            dicho_repository=dicho_repository,
        )
