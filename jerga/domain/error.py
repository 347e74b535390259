"""Domain layer errors."""

from datetime import datetime


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (malformed input to a domain operation)."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class UnauthenticatedError(DomainError):
    """Raised when an operation requires an identity and none was supplied."""

    def __init__(self, action: str = "perform this action"):
        super().__init__(f"Authentication required to {action}")


class NotAuthorizedError(DomainError):
    """Raised when a user lacks the role required for an action."""

    def __init__(self, user_id: str, action: str):
        self.user_id = user_id
        super().__init__(f"User {user_id} is not authorized to {action}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class RateLimitedError(DomainError):
    """Raised when an identity exceeded its action quota for the current window."""

    def __init__(self, identity: str, reset_at: datetime):
        self.identity = identity
        self.reset_at = reset_at
        super().__init__(f"Too many requests from {identity}, retry after {reset_at}")


class DuplicateFlagError(BusinessRuleViolationError):
    """Raised when a user flags content they already have an open flag on."""

    def __init__(self, target_type: str, target_id: str):
        self.target_type = target_type
        self.target_id = target_id
        super().__init__(f"You have already flagged this {target_type}: {target_id}")


class PersistenceError(DomainError):
    """Raised when the storage backend fails transiently.

    Callers may retry; the domain layer never retries on its own.
    """

    pass
