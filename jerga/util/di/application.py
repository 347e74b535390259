"""Application layer DI providers."""

from dishka import Scope, provide

from jerga.application.usecase.comment import ListCommentsUseCase, PostCommentUseCase
from jerga.application.usecase.dicho import ListDichosUseCase, SubmitDichoUseCase
from jerga.application.usecase.discovery import GetTrendingUseCase, GetWordOfDayUseCase
from jerga.application.usecase.flag import (
    CreateFlagUseCase,
    ListFlagsUseCase,
    ReviewFlagUseCase,
)
from jerga.application.usecase.notification import (
    ListNotificationsUseCase,
    MarkNotificationsReadUseCase,
)
from jerga.application.usecase.term import (
    GetRandomTermUseCase,
    GetTermUseCase,
    SearchTermsUseCase,
    SubmitTermUseCase,
)
from jerga.application.usecase.user import (
    GetLeaderboardUseCase,
    GetUserBadgesUseCase,
    SyncUserUseCase,
)
from jerga.application.usecase.vote import CastVoteUseCase, GetVoteUseCase
from jerga.domain.service import (
    BadgeService,
    CommentService,
    DichoService,
    FlagService,
    NotificationService,
    RateLimiter,
    ReputationService,
    TermService,
    TrendingService,
    UserService,
    VoteService,
    WordOfDayService,
)
from jerga.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self,
        rate_limiter: RateLimiter,
        vote_service: VoteService,
        reputation_service: ReputationService,
        badge_service: BadgeService,
        notification_service: NotificationService,
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            rate_limiter=rate_limiter,
            vote_service=vote_service,
            reputation_service=reputation_service,
            badge_service=badge_service,
            notification_service=notification_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_vote_use_case(self, vote_service: VoteService) -> GetVoteUseCase:
        """Provide get vote use case."""
        return GetVoteUseCase(vote_service=vote_service)

    # Term use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_term_use_case(
        self,
        term_service: TermService,
        user_service: UserService,
        reputation_service: ReputationService,
        badge_service: BadgeService,
    ) -> SubmitTermUseCase:
        """Provide submit term use case."""
        return SubmitTermUseCase(
            term_service=term_service,
            user_service=user_service,
            reputation_service=reputation_service,
            badge_service=badge_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_term_use_case(
        self, term_service: TermService, vote_service: VoteService
    ) -> GetTermUseCase:
        """Provide get term use case."""
        return GetTermUseCase(term_service=term_service, vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_random_term_use_case(
        self, term_service: TermService, vote_service: VoteService
    ) -> GetRandomTermUseCase:
        """Provide random term use case."""
        return GetRandomTermUseCase(
            term_service=term_service, vote_service=vote_service
        )

    @provide(scope=Scope.REQUEST)
    def get_search_terms_use_case(
        self, term_service: TermService
    ) -> SearchTermsUseCase:
        """Provide search use case."""
        return SearchTermsUseCase(term_service=term_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_post_comment_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
        notification_service: NotificationService,
        reputation_service: ReputationService,
        badge_service: BadgeService,
    ) -> PostCommentUseCase:
        """Provide post comment use case."""
        return PostCommentUseCase(
            comment_service=comment_service,
            user_service=user_service,
            notification_service=notification_service,
            reputation_service=reputation_service,
            badge_service=badge_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, comment_service: CommentService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(comment_service=comment_service)

    # Dicho use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_dicho_use_case(
        self,
        dicho_service: DichoService,
        user_service: UserService,
        reputation_service: ReputationService,
        badge_service: BadgeService,
    ) -> SubmitDichoUseCase:
        """Provide submit dicho use case."""
        return SubmitDichoUseCase(
            dicho_service=dicho_service,
            user_service=user_service,
            reputation_service=reputation_service,
            badge_service=badge_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_dichos_use_case(
        self, dicho_service: DichoService
    ) -> ListDichosUseCase:
        """Provide list dichos use case."""
        return ListDichosUseCase(dicho_service=dicho_service)

    # Discovery use cases
    @provide(scope=Scope.REQUEST)
    def get_trending_use_case(
        self, trending_service: TrendingService
    ) -> GetTrendingUseCase:
        """Provide trending use case."""
        return GetTrendingUseCase(trending_service=trending_service)

    @provide(scope=Scope.REQUEST)
    def get_word_of_day_use_case(
        self, word_of_day_service: WordOfDayService
    ) -> GetWordOfDayUseCase:
        """Provide word of the day use case."""
        return GetWordOfDayUseCase(word_of_day_service=word_of_day_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_sync_user_use_case(self, user_service: UserService) -> SyncUserUseCase:
        """Provide sync user use case."""
        return SyncUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_leaderboard_use_case(
        self, user_service: UserService
    ) -> GetLeaderboardUseCase:
        """Provide leaderboard use case."""
        return GetLeaderboardUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_user_badges_use_case(
        self, badge_service: BadgeService
    ) -> GetUserBadgesUseCase:
        """Provide user badges use case."""
        return GetUserBadgesUseCase(badge_service=badge_service)

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_notifications_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkNotificationsReadUseCase:
        """Provide mark notifications read use case."""
        return MarkNotificationsReadUseCase(
            notification_service=notification_service
        )

    # Flag use cases
    @provide(scope=Scope.REQUEST)
    def get_create_flag_use_case(self, flag_service: FlagService) -> CreateFlagUseCase:
        """Provide create flag use case."""
        return CreateFlagUseCase(flag_service=flag_service)

    @provide(scope=Scope.REQUEST)
    def get_list_flags_use_case(
        self, flag_service: FlagService, user_service: UserService
    ) -> ListFlagsUseCase:
        """Provide list flags use case."""
        return ListFlagsUseCase(flag_service=flag_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_review_flag_use_case(
        self, flag_service: FlagService, user_service: UserService
    ) -> ReviewFlagUseCase:
        """Provide review flag use case."""
        return ReviewFlagUseCase(flag_service=flag_service, user_service=user_service)
