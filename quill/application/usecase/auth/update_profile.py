"""Update profile use case."""

import logfire
from pydantic import BaseModel, Field

from quill.application.usecase.auth.get_profile import ProfileResponse
from quill.application.usecase.base import BaseUseCase
from quill.application.usecase.common import PublicUser
from quill.domain.service import AuthService
from quill.domain.value import Email, Password, UserId


class UpdateProfileRequest(BaseModel):
    """Update profile request.

    Omitted (None) fields are left unchanged.
    """

    user_id: int  # From the authenticated user
    name: str | None = Field(default=None, min_length=1, max_length=100)
    email: Email | None = None
    password: Password | None = None


class UpdateProfileUseCase(BaseUseCase[UpdateProfileRequest, ProfileResponse]):
    """Use case for changing the caller's name, email or password."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize update profile use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: UpdateProfileRequest) -> ProfileResponse:
        """Execute update profile flow.

        Raises:
            UnauthorizedError: If the user no longer exists
            ConflictError: If the new email belongs to another user
        """
        with logfire.span("update_profile.execute", user_id=request.user_id):
            user = await self.auth_service.update_profile(
                UserId(request.user_id),
                name=request.name,
                email=request.email,
                password=request.password,
            )
            return ProfileResponse(user=PublicUser.from_user(user))
