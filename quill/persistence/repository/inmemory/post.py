"""In-memory post repository for testing."""

from itertools import count
from typing import Optional

from quill.domain.model.post import Post
from quill.domain.repository.post import PostRepository
from quill.domain.value import PostId, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}
        self._ids = count(1)

    def _newest_first(self, posts: list[Post]) -> list[Post]:
        return sorted(posts, key=lambda p: p.id, reverse=True)

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_ids(self, post_ids: list[PostId]) -> list[Post]:
        """Find several posts by ID."""
        return [self._posts[pid] for pid in post_ids if pid in self._posts]

    async def find_all(self, limit: int = 5, offset: int = 0) -> list[Post]:
        """Find posts, newest first, with pagination."""
        posts = self._newest_first(list(self._posts.values()))
        return posts[offset : offset + limit]

    async def count(self) -> int:
        """Count all posts."""
        return len(self._posts)

    async def find_by_author(
        self, author_id: UserId, limit: int = 10, offset: int = 0
    ) -> list[Post]:
        """Find posts by a specific author, newest first."""
        posts = self._newest_first(
            [p for p in self._posts.values() if p.author_id == author_id]
        )
        return posts[offset : offset + limit]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count posts by a specific author."""
        return sum(1 for p in self._posts.values() if p.author_id == author_id)

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        if post.id is None:
            post = post.model_copy(update={"id": PostId(next(self._ids))})
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post."""
        self._posts.pop(post_id, None)

    async def delete_by_author(self, author_id: UserId) -> list[PostId]:
        """Delete every post by an author."""
        post_ids = [pid for pid, p in self._posts.items() if p.author_id == author_id]
        for post_id in post_ids:
            del self._posts[post_id]
        return post_ids
