"""In-memory user repository for testing."""

from itertools import count
from typing import Optional

from quill.domain.error import ConflictError
from quill.domain.model.user import User
from quill.domain.repository.user import UserRepository
from quill.domain.value import Email, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self._ids = count(1)

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find several users by ID."""
        return [self._users[uid] for uid in user_ids if uid in self._users]

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_all(self) -> list[User]:
        """Find all users ordered by ID."""
        return [self._users[uid] for uid in sorted(self._users)]

    async def save(self, user: User) -> User:
        """Save or update a user, enforcing unique emails."""
        for other in self._users.values():
            if other.email == user.email and other.id != user.id:
                raise ConflictError("User with this email already exists")

        if user.id is None:
            user = user.model_copy(update={"id": UserId(next(self._ids))})
        self._users[user.id] = user
        return user

    async def delete(self, user_id: UserId) -> None:
        """Delete a user."""
        self._users.pop(user_id, None)
