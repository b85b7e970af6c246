"""Create comment use case."""

import logfire
from pydantic import BaseModel, Field

from quill.application.usecase.common import CommentItem
from quill.domain.model import User
from quill.domain.service import CommentService, PostService
from quill.domain.value import PostId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: int
    content: str = Field(min_length=1)
    identity: User  # Author, resolved by the request gate


class CreateCommentUseCase:
    """Use case for commenting on a post.

    The author is always the authenticated user, never a client-supplied ID.
    """

    def __init__(
        self, comment_service: CommentService, post_service: PostService
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "create_comment.execute",
            post_id=request.post_id,
            author_id=request.identity.id,
        ):
            comment = await self.comment_service.create_comment(
                post_id=PostId(request.post_id),
                content=request.content,
                author=request.identity,
            )
            post = await self.post_service.get_post(comment.post_id)
            return CommentItem.from_comment(comment, request.identity, post)
