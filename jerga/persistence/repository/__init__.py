"""PostgreSQL repository implementations."""

from jerga.persistence.repository.comment import PostgresCommentRepository
from jerga.persistence.repository.definition import PostgresDefinitionRepository
from jerga.persistence.repository.dicho import PostgresDichoRepository
from jerga.persistence.repository.flag import PostgresFlagRepository
from jerga.persistence.repository.notification import PostgresNotificationRepository
from jerga.persistence.repository.term import PostgresTermRepository
from jerga.persistence.repository.user import PostgresUserRepository
from jerga.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresTermRepository",
    "PostgresDefinitionRepository",
    "PostgresCommentRepository",
    "PostgresDichoRepository",
    "PostgresVoteRepository",
    "PostgresNotificationRepository",
    "PostgresFlagRepository",
]
