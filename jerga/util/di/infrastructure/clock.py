"""Clock provider."""

from dishka import Scope, provide

from jerga.domain.model.common import Clock, utcnow
from jerga.util.di.base import ProviderBase


class ClockProvider(ProviderBase):
    """Base provider for the clock that drives rate limit windows and "today"."""

    __mock_component__ = "clock"


class ProdClockProvider(ClockProvider):
    """Production clock: the system's UTC time."""

    @provide(scope=Scope.APP)
    def get_clock(self) -> Clock:
        """Provide the system clock."""
        return utcnow
