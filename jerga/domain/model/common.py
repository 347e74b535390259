"""Base model for all domain entities."""

from datetime import datetime, timezone
from typing import Protocol

from pydantic import BaseModel, ConfigDict


def utcnow() -> datetime:
    """Timezone-aware current time, used for entity timestamps."""
    return datetime.now(timezone.utc)


class Clock(Protocol):
    """Source of the current UTC time for time-windowed rules."""

    def __call__(self) -> datetime: ...


class DomainModel(BaseModel):
    """Base class for all domain entities.

    Entities are immutable; repositories return updated copies.
    """

    model_config = ConfigDict(frozen=True)
