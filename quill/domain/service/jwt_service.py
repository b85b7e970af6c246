"""JWT token domain service."""

from datetime import timedelta

import logfire

from quill.config import AuthSettings
from quill.domain.value import Email, UserId
from quill.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for issuing and verifying identity tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings (signing secret, algorithm, expiry)
        """
        self.auth_settings = auth_settings

    def create_token(
        self, user_id: UserId, email: Email, ttl: timedelta | None = None
    ) -> str:
        """Create JWT token binding a user ID and email.

        Args:
            user_id: User ID (becomes the ``sub`` claim)
            email: User email
            ttl: Token lifetime (defaults to the configured expiry)

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(
                {"sub": str(user_id), "email": email.root},
                self.auth_settings,
                ttl=ttl,
            )
            logfire.info("JWT token created", user_id=user_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            InvalidTokenError: If token is malformed, tampered with, or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.debug("JWT token verified", user_id=payload.sub)
                return payload
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
