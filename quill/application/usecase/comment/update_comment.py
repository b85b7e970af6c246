"""Update comment use case."""

from pydantic import BaseModel, Field

from quill.application.usecase.common import CommentItem
from quill.domain.model import User
from quill.domain.service import CommentService, PostService
from quill.domain.value import CommentId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: int
    content: str = Field(min_length=1)
    identity: User  # Must be the author


class UpdateCommentUseCase:
    """Use case for editing a comment's text."""

    def __init__(
        self, comment_service: CommentService, post_service: PostService
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the requester is not the author
        """
        comment = await self.comment_service.update_comment(
            CommentId(request.comment_id), request.content, request.identity
        )
        post = await self.post_service.get_post(comment.post_id)
        # Only the author gets this far
        return CommentItem.from_comment(comment, request.identity, post)
