"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.model import Post
from quill.domain.repository import PostRepository
from quill.domain.value import PostId, UserId
from quill.persistence.mappers import post_to_dict, row_to_post
from quill.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=post_id):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_post(row._asdict()) if row else None

    async def find_by_ids(self, post_ids: List[PostId]) -> List[Post]:
        """Find several posts in one query."""
        if not post_ids:
            return []

        with logfire.span("post_repository.find_by_ids", count=len(post_ids)):
            stmt = select(posts_table).where(posts_table.c.id.in_(post_ids))
            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def find_all(self, limit: int = 5, offset: int = 0) -> List[Post]:
        """Find posts, newest first, with pagination."""
        with logfire.span("post_repository.find_all", limit=limit, offset=offset):
            stmt = (
                select(posts_table)
                .order_by(desc(posts_table.c.id))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def count(self) -> int:
        """Count all posts."""
        stmt = select(func.count()).select_from(posts_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts by a specific author, newest first."""
        with logfire.span(
            "post_repository.find_by_author",
            author_id=author_id,
            limit=limit,
            offset=offset,
        ):
            stmt = (
                select(posts_table)
                .where(posts_table.c.author_id == author_id)
                .order_by(desc(posts_table.c.id))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count posts by a specific author."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(posts_table.c.author_id == author_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Save a post (insert when new, update otherwise)."""
        post_dict = post_to_dict(post)

        if post.id is None:
            stmt = insert(posts_table).values(**post_dict).returning(posts_table)
        else:
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post.id)
                .values(**post_dict)
                .returning(posts_table)
            )

        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_post(dict(result.mappings().one()))

    async def delete(self, post_id: PostId) -> None:
        """Delete a post (comments cascade by foreign key)."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_author(self, author_id: UserId) -> List[PostId]:
        """Delete every post by an author."""
        stmt = (
            delete(posts_table)
            .where(posts_table.c.author_id == author_id)
            .returning(posts_table.c.id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return [PostId(post_id) for post_id in result.scalars().all()]
