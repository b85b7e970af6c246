"""Get profile use case."""

from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.application.usecase.common import PublicUser
from quill.domain.model import User


class GetProfileRequest(BaseModel):
    """Get profile request."""

    identity: User  # Resolved by the request gate


class ProfileResponse(BaseModel):
    """Profile response."""

    user: PublicUser


class GetProfileUseCase(BaseUseCase[GetProfileRequest, ProfileResponse]):
    """Use case for returning the caller's own profile.

    The request gate has already loaded the user, so no lookup is needed.
    """

    async def execute(self, request: GetProfileRequest) -> ProfileResponse:
        """Return the public fields of the authenticated user."""
        return ProfileResponse(user=PublicUser.from_user(request.identity))
