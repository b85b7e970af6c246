"""User domain service."""

import logfire

from quill.domain.error import NotFoundError
from quill.domain.model import User
from quill.domain.repository import CommentRepository, PostRepository, UserRepository
from quill.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for the user directory."""

    def __init__(
        self,
        user_repository: UserRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            post_repository: Post repository (for account deletion)
            comment_repository: Comment repository (for account deletion)
        """
        self.user_repository = user_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=user_id)
                raise NotFoundError("User", user_id)
            logfire.info("User found", user_id=user_id)
            return user

    async def get_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Load several users at once, keyed by ID.

        Duplicate and unknown IDs are tolerated; unknown ones are simply
        absent from the result.
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}

        with logfire.span("user_service.get_by_ids", count=len(unique_ids)):
            users = await self.user_repository.find_by_ids(unique_ids)
            return {user.id: user for user in users}

    async def list_users(self) -> list[User]:
        """List every user, ordered by ID."""
        with logfire.span("user_service.list_users"):
            users = await self.user_repository.find_all()
            logfire.info("Users listed", count=len(users))
            return users

    async def delete_user(self, user_id: UserId) -> None:
        """Delete a user together with their posts and comments.

        Comments the user wrote go first, then their posts with any comments
        other users left on them, then the user record.

        Args:
            user_id: User to delete

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.delete_user", user_id=user_id):
            await self.get_by_id(user_id)

            await self.comment_repository.delete_by_author(user_id)
            post_ids = await self.post_repository.delete_by_author(user_id)
            await self.comment_repository.delete_by_posts(post_ids)
            await self.user_repository.delete(user_id)
            logfire.info("User deleted", user_id=user_id, post_count=len(post_ids))
