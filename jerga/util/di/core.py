"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from jerga.config import AuthSettings, RankingSettings, RateLimitSettings, Settings
from jerga.domain.model.common import Clock
from jerga.domain.service import RateLimiter
from jerga.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_ranking_settings(self, settings: Settings) -> RankingSettings:
        """Provide trending weights and limits."""
        return settings.ranking

    @provide(scope=Scope.APP)
    def provide_rate_limit_settings(self, settings: Settings) -> RateLimitSettings:
        """Provide vote rate limit settings."""
        return settings.rate_limit

    @provide(scope=Scope.APP)
    def provide_rate_limiter(
        self, rate_limit_settings: RateLimitSettings, clock: Clock
    ) -> RateLimiter:
        """Provide the process-wide rate limiter.

        APP scope: every request shares one limiter and its windows.
        """
        return RateLimiter(rate_limit_settings, clock=clock)
