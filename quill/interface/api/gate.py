"""Request gate: turns a bearer token into an authenticated user."""

import logging

from fastapi import Request

from quill.domain.error import UnauthorizedError
from quill.domain.model import AuthenticatedUser
from quill.domain.service import AuthService, JWTService
from quill.util.jwt import InvalidTokenError

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: str | None) -> str:
    """Pull the token out of an ``Authorization: Bearer <token>`` header.

    Args:
        authorization: Raw header value, if any

    Returns:
        The token

    Raises:
        UnauthorizedError: If the header is missing or not a bearer credential
    """
    if not authorization:
        raise UnauthorizedError()

    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme.lower() != BEARER_SCHEME or not token or " " in token:
        raise UnauthorizedError()
    return token


async def authenticate_request(
    request: Request, jwt_service: JWTService, auth_service: AuthService
) -> AuthenticatedUser:
    """Verify the request's bearer token and resolve its user.

    Fails closed: every problem with the token or its subject is an
    ``UnauthorizedError``.
    """
    token = extract_bearer_token(request.headers.get("Authorization"))

    try:
        payload = jwt_service.verify_token(token)
    except InvalidTokenError as e:
        logger.info("Rejected bearer token on %s: %s", request.url.path, e)
        raise UnauthorizedError() from e

    user = await auth_service.resolve_identity(payload)
    return AuthenticatedUser.from_user(user)
