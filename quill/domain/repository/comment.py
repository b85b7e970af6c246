"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from quill.domain.model.comment import Comment
from quill.domain.value import CommentId, PostId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Comment]:
        """Find all comments ordered by ID.

        Returns:
            All comments
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, oldest first.

        Args:
            post_id: The post ID

        Returns:
            List of comments on the post
        """
        pass

    @abstractmethod
    async def find_by_posts(self, post_ids: List[PostId]) -> List[Comment]:
        """Find comments for several posts in one lookup.

        Args:
            post_ids: Post IDs

        Returns:
            Comments on any of the posts, oldest first
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> List[Comment]:
        """Find comments by a specific author, oldest first.

        Args:
            author_id: The author's user ID

        Returns:
            List of comments by the author
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create when ``comment.id`` is None, update otherwise).

        Args:
            comment: The comment to save

        Returns:
            The saved comment, with its store-assigned ID
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment.

        Args:
            comment_id: The comment ID to delete
        """
        pass

    @abstractmethod
    async def delete_by_posts(self, post_ids: List[PostId]) -> None:
        """Delete every comment on the given posts.

        Args:
            post_ids: Post IDs
        """
        pass

    @abstractmethod
    async def delete_by_author(self, author_id: UserId) -> None:
        """Delete every comment by an author.

        Args:
            author_id: The author's user ID
        """
        pass
