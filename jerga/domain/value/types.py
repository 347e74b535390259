"""Domain value objects for Jerga.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import computed_field, Field, field_validator

from jerga.domain.value.common import RootValueObject, ValueObject


class VoteType(str, Enum):
    """Polarity of a vote."""

    UP = "up"
    DOWN = "down"


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    DEFINITION = "definition"
    COMMENT = "comment"
    DICHO = "dicho"


class Region(str, Enum):
    """Spanish-speaking regions a term or definition can belong to."""

    GENERAL = "General"
    MEXICO = "Mexico"
    SPAIN = "Spain"
    ARGENTINA = "Argentina"
    COLOMBIA = "Colombia"
    VENEZUELA = "Venezuela"
    PERU = "Peru"
    CHILE = "Chile"
    ECUADOR = "Ecuador"
    BOLIVIA = "Bolivia"
    URUGUAY = "Uruguay"
    PARAGUAY = "Paraguay"
    COSTA_RICA = "Costa Rica"
    PANAMA = "Panama"
    GUATEMALA = "Guatemala"
    HONDURAS = "Honduras"
    NICARAGUA = "Nicaragua"
    EL_SALVADOR = "El Salvador"
    DOMINICAN_REPUBLIC = "Dominican Republic"
    PUERTO_RICO = "Puerto Rico"
    CUBA = "Cuba"


def parse_region_filter(value: str | None) -> Region | None:
    """Turn a query-string region into a filter.

    ``None``, empty and ``"all"`` mean no filter.

    Raises:
        ValueError: If the region is not a known region
    """
    if not value or value.lower() == "all":
        return None
    return Region(value)


class UserRole(str, Enum):
    """Role of a user in the community."""

    USER = "user"
    MODERATOR = "moderator"
    ADMIN = "admin"


class ContributionType(str, Enum):
    """Per-user contribution counters.

    Values match the counter attribute names on ``ContributionCounters``
    and the column names in the users table.
    """

    TERMS_SUBMITTED = "terms_submitted"
    DEFINITIONS_SUBMITTED = "definitions_submitted"
    VOTES_GIVEN = "votes_given"
    COMMENTS_POSTED = "comments_posted"
    DICHOS_SUBMITTED = "dichos_submitted"


class LeaderboardField(str, Enum):
    """Fields the community leaderboard can be sorted by."""

    REPUTATION = "reputation"
    TERMS_SUBMITTED = "terms_submitted"
    DEFINITIONS_SUBMITTED = "definitions_submitted"
    VOTES_GIVEN = "votes_given"


class TrendingPeriod(str, Enum):
    """Recency window for trending queries."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    ALL = "all"


class TrendingKind(str, Enum):
    """What a trending query ranks."""

    TERMS = "terms"
    DEFINITIONS = "definitions"
    BOTH = "both"


class NotificationType(str, Enum):
    """Kind of in-app notification."""

    VOTE = "vote"
    COMMENT = "comment"
    DEFINITION_APPROVED = "definition_approved"
    BADGE_EARNED = "badge_earned"
    MENTION = "mention"
    SYSTEM = "system"


class RelatedType(str, Enum):
    """Kind of entity a notification points at."""

    TERM = "term"
    DEFINITION = "definition"
    COMMENT = "comment"
    DICHO = "dicho"
    USER = "user"
    BADGE = "badge"


class FlagTargetType(str, Enum):
    """Kind of content that can be flagged."""

    TERM = "term"
    DEFINITION = "definition"
    COMMENT = "comment"
    DICHO = "dicho"


class FlagReason(str, Enum):
    """Why content was flagged."""

    INAPPROPRIATE_CONTENT = "inappropriate_content"
    SPAM = "spam"
    HARASSMENT = "harassment"
    HATE_SPEECH = "hate_speech"
    MISINFORMATION = "misinformation"
    COPYRIGHT_VIOLATION = "copyright_violation"
    PERSONAL_INFORMATION = "personal_information"
    OTHER = "other"


class FlagStatus(str, Enum):
    """Moderation status of a flag."""

    PENDING = "pending"
    REVIEWED = "reviewed"
    RESOLVED = "resolved"
    DISMISSED = "dismissed"

    @property
    def is_open(self) -> bool:
        """Open flags block a duplicate report from the same user."""
        return self in (FlagStatus.PENDING, FlagStatus.REVIEWED)


class Word(RootValueObject[str]):
    """A dictionary headword.

    Stored trimmed and lower-cased, 1-100 characters.
    Examples: 'chido', 'guay', 'bacán'
    """

    @field_validator("root")
    @classmethod
    def normalize_word(cls, v: str) -> str:
        """Normalize and validate the word."""
        v = v.strip().lower()
        if len(v) < 1 or len(v) > 100:
            raise ValueError("Word must be 1-100 characters")
        return v


class VoteCounters(ValueObject):
    """Up/down tallies embedded in every votable entity.

    ``score`` is always derived from the two counters.
    """

    up: int = Field(default=0, ge=0)
    down: int = Field(default=0, ge=0)

    @computed_field
    @property
    def score(self) -> int:
        """Net score (up minus down), may be negative."""
        return self.up - self.down

    def count_for(self, vote_type: VoteType) -> int:
        """Return the counter for one polarity."""
        return self.up if vote_type == VoteType.UP else self.down


class ContributionCounters(ValueObject):
    """Per-user contribution tallies. Only ever incremented."""

    terms_submitted: int = Field(default=0, ge=0)
    definitions_submitted: int = Field(default=0, ge=0)
    votes_given: int = Field(default=0, ge=0)
    comments_posted: int = Field(default=0, ge=0)
    dichos_submitted: int = Field(default=0, ge=0)

    def get(self, contribution: ContributionType) -> int:
        """Return the counter for one contribution type."""
        return getattr(self, contribution.value)
