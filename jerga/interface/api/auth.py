"""Caller identity for API routes."""

from jerga.domain.service import JWTService
from jerga.domain.value import UserId

BEARER_PREFIX = "bearer "


def current_user_id(
    jwt_service: JWTService,
    auth_token: str | None,
    authorization: str | None = None,
) -> UserId | None:
    """Resolve the caller from the ``auth_token`` cookie or a Bearer header.

    The cookie takes precedence. Missing, malformed or expired tokens all
    resolve to None; use cases decide whether anonymity is acceptable.
    """
    token = auth_token
    if not token and authorization and authorization.lower().startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX) :].strip()
    return jwt_service.get_user_id_from_token(token)
