"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .definition import InMemoryDefinitionRepository
from .dicho import InMemoryDichoRepository
from .flag import InMemoryFlagRepository
from .notification import InMemoryNotificationRepository
from .term import InMemoryTermRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryDefinitionRepository",
    "InMemoryDichoRepository",
    "InMemoryFlagRepository",
    "InMemoryNotificationRepository",
    "InMemoryTermRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
