"""JWT token utilities.

Tokens are minted by the identity provider; this module only verifies them.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import BaseModel

from jerga.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims we rely on from an identity provider token."""

    sub: str
    exp: datetime
    email: Optional[str] = None
    name: Optional[str] = None


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str,
    settings: AuthSettings,
    email: Optional[str] = None,
    name: Optional[str] = None,
    expires_in: timedelta = timedelta(hours=1),
) -> str:
    """Create a token signed the way the identity provider signs them.

    Used by local tooling and tests.

    Args:
        user_id: Subject claim
        settings: Authentication settings
        email: Optional email claim
        name: Optional name claim
        expires_in: Token lifetime

    Returns:
        Encoded JWT token
    """
    payload: dict = {
        "sub": user_id,
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    if email:
        payload["email"] = email
    if name:
        payload["name"] = name
    if settings.jwt_audience:
        payload["aud"] = settings.jwt_audience

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            options={"require": ["sub", "exp"]},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
