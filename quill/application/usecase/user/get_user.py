"""Get user use case."""

from pydantic import BaseModel

from quill.application.usecase.common import PublicUser
from quill.domain.service import UserService
from quill.domain.value import UserId


class GetUserRequest(BaseModel):
    """Get user request."""

    user_id: int


class GetUserUseCase:
    """Use case for looking up one user's public fields."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> PublicUser:
        """Execute get user flow.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_service.get_by_id(UserId(request.user_id))
        return PublicUser.from_user(user)
