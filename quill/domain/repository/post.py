"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from quill.domain.model.post import Post
from quill.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, post_ids: List[PostId]) -> List[Post]:
        """Find several posts by ID in one lookup.

        Unknown IDs are skipped.
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 5, offset: int = 0) -> List[Post]:
        """Find posts, newest first, with pagination.

        Args:
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts ordered by ID descending
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all posts.

        Returns:
            Total number of posts
        """
        pass

    @abstractmethod
    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts by a specific author, newest first.

        Args:
            author_id: The author's user ID
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts by the author
        """
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count posts by a specific author.

        Args:
            author_id: The author's user ID

        Returns:
            Number of posts by the author
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create when ``post.id`` is None, update otherwise).

        Args:
            post: The post to save

        Returns:
            The saved post, with its store-assigned ID
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post.

        Args:
            post_id: The post ID to delete
        """
        pass

    @abstractmethod
    async def delete_by_author(self, author_id: UserId) -> List[PostId]:
        """Delete every post by an author.

        Args:
            author_id: The author's user ID

        Returns:
            IDs of the deleted posts
        """
        pass
