"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.model import Comment
from quill.domain.repository import CommentRepository
from quill.domain.value import CommentId, PostId, UserId
from quill.persistence.mappers import comment_to_dict, row_to_comment
from quill.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_where(self, *criteria) -> List[Comment]:
        stmt = select(comments_table).where(*criteria).order_by(comments_table.c.id)
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_all(self) -> List[Comment]:
        """Find all comments ordered by ID."""
        return await self._find_where()

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, oldest first."""
        return await self._find_where(comments_table.c.post_id == post_id)

    async def find_by_posts(self, post_ids: List[PostId]) -> List[Comment]:
        """Find comments for several posts in one query."""
        if not post_ids:
            return []
        return await self._find_where(comments_table.c.post_id.in_(post_ids))

    async def find_by_author(self, author_id: UserId) -> List[Comment]:
        """Find comments by a specific author, oldest first."""
        return await self._find_where(comments_table.c.user_id == author_id)

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (insert when new, update otherwise)."""
        comment_dict = comment_to_dict(comment)

        if comment.id is None:
            stmt = insert(comments_table).values(**comment_dict).returning(comments_table)
        else:
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
                .returning(comments_table)
            )

        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_comment(dict(result.mappings().one()))

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_posts(self, post_ids: List[PostId]) -> None:
        """Delete every comment on the given posts."""
        if not post_ids:
            return
        stmt = delete(comments_table).where(comments_table.c.post_id.in_(post_ids))
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_author(self, author_id: UserId) -> None:
        """Delete every comment by an author."""
        stmt = delete(comments_table).where(comments_table.c.user_id == author_id)
        await self.session.execute(stmt)
        await self.session.flush()
