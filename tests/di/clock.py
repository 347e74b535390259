"""Controllable clock for tests."""

from datetime import datetime, timedelta

from dishka import Scope, provide

from jerga.domain.model.common import Clock, utcnow
from jerga.util.di.infrastructure.clock import ClockProvider


class FrozenClock:
    """A clock that only moves when a test advances it."""

    def __init__(self, now: datetime | None = None) -> None:
        self.now = now or utcnow()

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


class MockClockProvider(ClockProvider):
    """Provides one FrozenClock per container, starting at the real time."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_frozen_clock(self) -> FrozenClock:
        return FrozenClock()

    @provide(scope=Scope.APP)
    def get_clock(self, clock: FrozenClock) -> Clock:
        return clock
