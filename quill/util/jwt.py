"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import uuid4

import jwt
from pydantic import BaseModel, ValidationError

from quill.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    sub: str  # User ID (JWT requires a string subject)
    email: str
    exp: datetime
    iat: datetime | None = None
    jti: str | None = None


class InvalidTokenError(Exception):
    """Token is malformed, has a bad signature, or has expired."""

    pass


def create_token(
    claims: dict[str, Any], settings: AuthSettings, ttl: timedelta | None = None
) -> str:
    """Create a signed JWT.

    Args:
        claims: Claims to embed (must include ``sub`` and ``email``)
        settings: Authentication settings
        ttl: Token lifetime (defaults to ``settings.jwt_expiry_minutes``)

    Returns:
        Encoded JWT token
    """
    now = datetime.now(timezone.utc)
    if ttl is None:
        ttl = timedelta(minutes=settings.jwt_expiry_minutes)

    payload = {
        **claims,
        "iat": now,
        "exp": now + ttl,
        "jti": uuid4().hex,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        InvalidTokenError: If token is malformed, tampered with, or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "sub", "email"]},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise InvalidTokenError("Token has expired")
    except jwt.InvalidTokenError:
        raise InvalidTokenError("Invalid token")
    except ValidationError:
        raise InvalidTokenError("Invalid token claims")
