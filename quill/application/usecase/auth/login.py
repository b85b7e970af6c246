"""Login use case."""

import logfire
from pydantic import BaseModel, Field

from quill.application.usecase.auth.register import AuthResponse
from quill.application.usecase.base import BaseUseCase
from quill.application.usecase.common import PublicUser
from quill.domain.service import AuthService, JWTService
from quill.domain.value import Email


class LoginRequest(BaseModel):
    """Login request.

    The password is not length-checked here: a wrong password of any
    length must fail the same way.
    """

    email: Email
    password: str = Field(min_length=1)


class LoginUseCase(BaseUseCase[LoginRequest, AuthResponse]):
    """Use case for email/password login."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Raises:
            UnauthorizedError: If the email is unknown or the password is wrong
        """
        with logfire.span("login.execute", email=request.email.root):
            user = await self.auth_service.authenticate(
                email=request.email, password=request.password
            )
            token = self.jwt_service.create_token(user.id, user.email)
            return AuthResponse(user=PublicUser.from_user(user), token=token)
