"""Fixed-window rate limiter."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

import logfire

from jerga.config import RateLimitSettings
from jerga.domain.model.common import Clock, utcnow


@dataclass
class RateLimitWindow:
    """Actions counted in the current window and when it resets."""

    count: int
    reset_at: datetime


class RateLimiter:
    """Per-identity fixed-window limiter held in process memory.

    One instance is shared by the whole process. State is lost on restart
    and is not shared between processes.
    """

    def __init__(
        self, settings: RateLimitSettings, clock: Optional[Clock] = None
    ) -> None:
        """Initialize rate limiter.

        Args:
            settings: Window length and action quota
            clock: Source of the current time, defaults to the system clock
        """
        self.window = timedelta(seconds=settings.window_seconds)
        self.max_actions = settings.max_actions
        self._clock = clock or utcnow
        self._windows: dict[str, RateLimitWindow] = {}
        self._next_sweep: Optional[datetime] = None

    @property
    def tracked_identities(self) -> int:
        """Number of identities holding a window."""
        return len(self._windows)

    def allow(self, identity: str) -> bool:
        """Count an action for ``identity`` and say whether it is allowed."""
        now = self._clock()
        self._sweep(now)
        state = self._windows.get(identity)

        if state is None or now > state.reset_at:
            self._windows[identity] = RateLimitWindow(
                count=1, reset_at=now + self.window
            )
            return True

        if state.count < self.max_actions:
            state.count += 1
            return True

        logfire.warn(
            "Rate limit exceeded",
            identity=identity,
            reset_at=state.reset_at.isoformat(),
        )
        return False

    def remaining(self, identity: str) -> int:
        """Actions left in the identity's current window."""
        state = self._current(identity)
        return self.max_actions - state.count if state else self.max_actions

    def reset_at(self, identity: str) -> Optional[datetime]:
        """When the identity's current window ends, None if no window is open."""
        state = self._current(identity)
        return state.reset_at if state else None

    def _current(self, identity: str) -> Optional[RateLimitWindow]:
        state = self._windows.get(identity)
        if state is None:
            return None
        if self._clock() > state.reset_at:
            del self._windows[identity]
            return None
        return state

    def _sweep(self, now: datetime) -> None:
        """Drop expired windows, at most once per window length."""
        if self._next_sweep is not None and now < self._next_sweep:
            return
        expired = [k for k, w in self._windows.items() if now > w.reset_at]
        for identity in expired:
            del self._windows[identity]
        self._next_sweep = now + self.window
        if expired:
            logfire.debug("Dropped expired rate limit windows", count=len(expired))
