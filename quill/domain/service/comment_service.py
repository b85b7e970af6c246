"""Comment domain service."""

from datetime import datetime, timezone

import logfire

from quill.domain.error import NotFoundError
from quill.domain.model import Comment, User
from quill.domain.repository import CommentRepository, PostRepository
from quill.domain.value import CommentId, PostId, UserId

from .base import Service
from .ownership import ensure_owner


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self, comment_repository: CommentRepository, post_repository: PostRepository
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository (to check the target post exists)
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository

    async def create_comment(
        self, post_id: PostId, content: str, author: User
    ) -> Comment:
        """Comment on a post as the authenticated user.

        Args:
            post_id: Post to comment on
            content: Comment text
            author: Authenticated author

        Returns:
            Created comment

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "comment_service.create_comment", post_id=post_id, author_id=author.id
        ):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Cannot comment on missing post", post_id=post_id)
                raise NotFoundError("Post", post_id)

            comment = Comment(content=content, post_id=post_id, user_id=author.id)
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=saved.id,
                post_id=post_id,
                author_id=author.id,
            )
            return saved

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.get_comment", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=comment_id)
                raise NotFoundError("Comment", comment_id)
            return comment

    async def list_comments(self) -> list[Comment]:
        """List every comment."""
        with logfire.span("comment_service.list_comments"):
            comments = await self.comment_repository.find_all()
            logfire.info("Comments listed", count=len(comments))
            return comments

    async def list_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """List the comments on one post, oldest first."""
        with logfire.span("comment_service.list_comments_for_post", post_id=post_id):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post", post_id=post_id, count=len(comments)
            )
            return comments

    async def list_comments_for_posts(
        self, post_ids: list[PostId]
    ) -> dict[PostId, list[Comment]]:
        """Group the comments on several posts by post ID.

        Args:
            post_ids: Post IDs

        Returns:
            Mapping of every requested post ID to its comments (possibly empty)
        """
        grouped: dict[PostId, list[Comment]] = {post_id: [] for post_id in post_ids}
        if not post_ids:
            return grouped

        with logfire.span(
            "comment_service.list_comments_for_posts", post_count=len(post_ids)
        ):
            for comment in await self.comment_repository.find_by_posts(post_ids):
                grouped[comment.post_id].append(comment)
            return grouped

    async def list_comments_by_author(self, author_id: UserId) -> list[Comment]:
        """List one user's comments, oldest first."""
        with logfire.span(
            "comment_service.list_comments_by_author", author_id=author_id
        ):
            comments = await self.comment_repository.find_by_author(author_id)
            logfire.info(
                "Comments retrieved for author", author_id=author_id, count=len(comments)
            )
            return comments

    async def update_comment(
        self, comment_id: CommentId, content: str, identity: User
    ) -> Comment:
        """Replace the text of a comment owned by the requester.

        Args:
            comment_id: Comment ID
            content: New text
            identity: Authenticated requester

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the requester is not the author
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=comment_id,
            user_id=identity.id,
        ):
            comment = await self.get_comment(comment_id)
            ensure_owner("comment", comment_id, comment.user_id, identity)

            updated = comment.evolve(
                content=content, updated_at=datetime.now(timezone.utc)
            )
            saved = await self.comment_repository.save(updated)
            logfire.info("Comment updated", comment_id=comment_id)
            return saved

    async def delete_comment(self, comment_id: CommentId, identity: User) -> None:
        """Delete a comment owned by the requester.

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the requester is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=comment_id,
            user_id=identity.id,
        ):
            comment = await self.get_comment(comment_id)
            ensure_owner("comment", comment_id, comment.user_id, identity)

            await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=comment_id)
