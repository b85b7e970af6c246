"""List users use case."""

from quill.application.usecase.common import PublicUser
from quill.domain.service import UserService


class ListUsersUseCase:
    """Use case for the public user directory."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize list users use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self) -> list[PublicUser]:
        """Return every user's public fields, ordered by ID."""
        users = await self.user_service.list_users()
        return [PublicUser.from_user(user) for user in users]
