"""Register use case."""

import logfire
from pydantic import BaseModel, Field

from quill.application.usecase.base import BaseUseCase
from quill.application.usecase.common import PublicUser
from quill.domain.service import AuthService, JWTService
from quill.domain.value import Email, Password


class RegisterRequest(BaseModel):
    """Register request."""

    name: str = Field(min_length=1, max_length=100)
    email: Email
    password: Password


class AuthResponse(BaseModel):
    """Public user fields plus a freshly issued bearer token."""

    user: PublicUser
    token: str


class RegisterUseCase(BaseUseCase[RegisterRequest, AuthResponse]):
    """Use case for creating an account and signing the new user in."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Execute registration flow.

        Steps:
        1. Create the user (email must be unused, password is hashed)
        2. Issue a token for the new user ID and email
        3. Return public fields and the token

        Raises:
            ConflictError: If the email is already registered
        """
        with logfire.span("register.execute", email=request.email.root):
            user = await self.auth_service.register(
                name=request.name, email=request.email, password=request.password
            )
            token = self.jwt_service.create_token(user.id, user.email)
            return AuthResponse(user=PublicUser.from_user(user), token=token)
