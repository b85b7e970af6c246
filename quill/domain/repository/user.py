"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from quill.domain.model.user import User
from quill.domain.value import Email, UserId


class UserRepository(ABC):
    """Repository for User aggregate (the Credential Store).

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: List[UserId]) -> List[User]:
        """Find several users in one lookup.

        Args:
            user_ids: User IDs to load (unknown IDs are skipped)

        Returns:
            Users found, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email (exact, case-sensitive match).

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[User]:
        """Find all users ordered by ID.

        Returns:
            All users
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create when ``user.id`` is None, update otherwise).

        Args:
            user: The user to save

        Returns:
            The saved user, with its store-assigned ID

        Raises:
            ConflictError: If another user already has this email
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> None:
        """Delete a user record.

        Args:
            user_id: The user ID to delete
        """
        pass
