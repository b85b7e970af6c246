"""Post domain service."""

from datetime import datetime, timezone

import logfire

from quill.domain.error import NotFoundError
from quill.domain.model import Post, User
from quill.domain.repository import CommentRepository, PostRepository
from quill.domain.value import Page, PageRequest, PostId, UserId

from .base import Service
from .ownership import ensure_owner


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self, post_repository: PostRepository, comment_repository: CommentRepository
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository (for cascading deletes)
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def create_post(
        self, title: str, content: str, author: User, image: str | None = None
    ) -> Post:
        """Create a post authored by the given user.

        Args:
            title: Post title
            content: Post body
            author: Authenticated author
            image: Optional image reference

        Returns:
            Created post
        """
        with logfire.span(
            "post_service.create_post", author_id=author.id, title=title
        ):
            post = Post(title=title, content=content, image=image, author_id=author.id)
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=saved.id, author_id=author.id)
            return saved

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.get_post", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=post_id)
                raise NotFoundError("Post", post_id)
            return post

    async def get_by_ids(self, post_ids: list[PostId]) -> dict[PostId, Post]:
        """Load several posts at once, keyed by ID.

        Unknown IDs are absent from the result.
        """
        unique_ids = list(dict.fromkeys(post_ids))
        if not unique_ids:
            return {}

        with logfire.span("post_service.get_by_ids", count=len(unique_ids)):
            posts = await self.post_repository.find_by_ids(unique_ids)
            return {post.id: post for post in posts}

    async def list_posts(self, page: PageRequest) -> Page[Post]:
        """List posts, newest first.

        Args:
            page: Page to fetch

        Returns:
            One page of posts
        """
        with logfire.span("post_service.list_posts", page=page.page, limit=page.limit):
            total = await self.post_repository.count()
            posts = await self.post_repository.find_all(
                limit=page.limit, offset=page.offset
            )
            logfire.info("Posts listed", count=len(posts), total=total)
            return Page[Post](data=posts, total=total, page=page.page, limit=page.limit)

    async def list_posts_by_author(
        self, author_id: UserId, page: PageRequest
    ) -> Page[Post]:
        """List one author's posts, newest first.

        Args:
            author_id: Author's user ID
            page: Page to fetch

        Returns:
            One page of the author's posts
        """
        with logfire.span(
            "post_service.list_posts_by_author",
            author_id=author_id,
            page=page.page,
            limit=page.limit,
        ):
            total = await self.post_repository.count_by_author(author_id)
            posts = await self.post_repository.find_by_author(
                author_id, limit=page.limit, offset=page.offset
            )
            logfire.info(
                "Author posts listed", author_id=author_id, count=len(posts), total=total
            )
            return Page[Post](data=posts, total=total, page=page.page, limit=page.limit)

    async def update_post(
        self,
        post_id: PostId,
        identity: User,
        title: str | None = None,
        content: str | None = None,
        image: str | None = None,
    ) -> Post:
        """Update a post owned by the requester.

        Fields left as None keep their current value.

        Args:
            post_id: Post ID
            identity: Authenticated requester
            title: New title
            content: New body
            image: New image reference

        Returns:
            Updated post

        Raises:
            NotFoundError: If the post does not exist
            ForbiddenError: If the requester is not the author
        """
        with logfire.span(
            "post_service.update_post", post_id=post_id, user_id=identity.id
        ):
            post = await self.get_post(post_id)
            ensure_owner("post", post_id, post.author_id, identity)

            changes: dict = {"updated_at": datetime.now(timezone.utc)}
            if title is not None:
                changes["title"] = title
            if content is not None:
                changes["content"] = content
            if image is not None:
                changes["image"] = image

            updated = post.evolve(**changes)
            saved = await self.post_repository.save(updated)
            logfire.info("Post updated", post_id=post_id)
            return saved

    async def delete_post(self, post_id: PostId, identity: User) -> None:
        """Delete a post owned by the requester, along with its comments.

        Args:
            post_id: Post ID
            identity: Authenticated requester

        Raises:
            NotFoundError: If the post does not exist
            ForbiddenError: If the requester is not the author
        """
        with logfire.span(
            "post_service.delete_post", post_id=post_id, user_id=identity.id
        ):
            post = await self.get_post(post_id)
            ensure_owner("post", post_id, post.author_id, identity)

            await self.comment_repository.delete_by_posts([post_id])
            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=post_id)
