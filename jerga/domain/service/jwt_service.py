"""JWT token domain service."""

import logfire

from jerga.config import AuthSettings
from jerga.domain.value import UserId
from jerga.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Verifies identity provider tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.sub)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_user_id_from_token(self, token: str | None) -> UserId | None:
        """Extract the user ID from a token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            User ID if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            return UserId(self.verify_token(token).sub)
        except JWTError:
            # Invalid or expired token, treat as unauthenticated
            return None
