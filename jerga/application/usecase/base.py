"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from jerga.domain.error import UnauthenticatedError
from jerga.domain.value import UserId

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Base use case for orchestrating domain services.

    Requests carry the caller's ``user_id`` as resolved by the interface
    layer, or None for anonymous callers.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass


def require_user(user_id: str | None, action: str) -> UserId:
    """The caller's ID, for actions anonymous callers may not perform.

    Raises:
        UnauthenticatedError: If there is no authenticated user
    """
    if not user_id:
        raise UnauthenticatedError(action)
    return UserId(user_id)
