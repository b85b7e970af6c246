"""Create post use case."""

import logfire
from pydantic import BaseModel, Field

from quill.application.usecase.common import PostDetail, build_post_details
from quill.domain.model import User
from quill.domain.service import CommentService, PostService, UserService


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1)
    image: str | None = Field(default=None, max_length=500)
    identity: User  # Author, resolved by the request gate


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        comment_service: CommentService,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            comment_service: Comment domain service
        """
        self.post_service = post_service
        self.user_service = user_service
        self.comment_service = comment_service

    async def execute(self, request: CreatePostRequest) -> PostDetail:
        """Execute create post flow.

        Args:
            request: Post fields and the authenticated author

        Returns:
            Created post with its author
        """
        with logfire.span("create_post.execute", author_id=request.identity.id):
            post = await self.post_service.create_post(
                title=request.title,
                content=request.content,
                image=request.image,
                author=request.identity,
            )
            [detail] = await build_post_details(
                [post], self.user_service, self.comment_service
            )
            return detail
