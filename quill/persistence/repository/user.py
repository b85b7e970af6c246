"""PostgreSQL implementation of User repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.error import ConflictError
from quill.domain.model import User
from quill.domain.repository import UserRepository
from quill.domain.value import Email, UserId
from quill.persistence.mappers import row_to_user, user_to_dict
from quill.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_ids(self, user_ids: List[UserId]) -> List[User]:
        """Find several users in one query."""
        if not user_ids:
            return []

        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: Email to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.email == email.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_all(self) -> List[User]:
        """Find all users ordered by ID."""
        stmt = select(users_table).order_by(users_table.c.id)
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def save(self, user: User) -> User:
        """Save a user (insert when new, update otherwise).

        Args:
            user: User to save

        Returns:
            Saved user as stored, including its ID

        Raises:
            ConflictError: If the email is already taken (unique constraint)
        """
        user_dict = user_to_dict(user)

        if user.id is None:
            stmt = insert(users_table).values(**user_dict).returning(users_table)
        else:
            stmt = (
                update(users_table)
                .where(users_table.c.id == user.id)
                .values(**user_dict)
                .returning(users_table)
            )

        # Savepoint keeps the outer transaction usable after a conflict
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
        except IntegrityError as e:
            logfire.warn("User email unique constraint violated", user_id=user.id)
            raise ConflictError("User with this email already exists") from e

        return row_to_user(dict(result.mappings().one()))

    async def delete(self, user_id: UserId) -> None:
        """Delete a user (posts and comments cascade by foreign key)."""
        stmt = delete(users_table).where(users_table.c.id == user_id)
        await self.session.execute(stmt)
        await self.session.flush()
