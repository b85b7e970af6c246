"""Get comment use case."""

from pydantic import BaseModel

from quill.application.usecase.common import CommentItem, build_comment_items
from quill.domain.service import CommentService, PostService, UserService
from quill.domain.value import CommentId


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: int


class GetCommentUseCase:
    """Use case for retrieving one comment with its author and post."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        post_service: PostService,
    ) -> None:
        """Initialize get comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service
        self.post_service = post_service

    async def execute(self, request: GetCommentRequest) -> CommentItem:
        """Execute get comment flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.comment_service.get_comment(CommentId(request.comment_id))
        [item] = await build_comment_items(
            [comment], self.user_service, self.post_service
        )
        return item
