"""In-memory comment repository for testing."""

from itertools import count
from typing import Optional

from quill.domain.model.comment import Comment
from quill.domain.repository.comment import CommentRepository
from quill.domain.value import CommentId, PostId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._ids = count(1)

    def _ordered(self) -> list[Comment]:
        return [self._comments[cid] for cid in sorted(self._comments)]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_all(self) -> list[Comment]:
        """Find all comments ordered by ID."""
        return self._ordered()

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post."""
        return [c for c in self._ordered() if c.post_id == post_id]

    async def find_by_posts(self, post_ids: list[PostId]) -> list[Comment]:
        """Find comments for several posts."""
        wanted = set(post_ids)
        return [c for c in self._ordered() if c.post_id in wanted]

    async def find_by_author(self, author_id: UserId) -> list[Comment]:
        """Find comments by a specific author."""
        return [c for c in self._ordered() if c.user_id == author_id]

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        if comment.id is None:
            comment = comment.model_copy(update={"id": CommentId(next(self._ids))})
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        self._comments.pop(comment_id, None)

    async def delete_by_posts(self, post_ids: list[PostId]) -> None:
        """Delete every comment on the given posts."""
        wanted = set(post_ids)
        self._comments = {
            cid: c for cid, c in self._comments.items() if c.post_id not in wanted
        }

    async def delete_by_author(self, author_id: UserId) -> None:
        """Delete every comment by an author."""
        self._comments = {
            cid: c for cid, c in self._comments.items() if c.user_id != author_id
        }
