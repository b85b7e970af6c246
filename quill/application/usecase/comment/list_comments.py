"""List comments use case."""

from pydantic import BaseModel, model_validator

from quill.application.usecase.common import CommentItem, build_comment_items
from quill.domain.service import CommentService, PostService, UserService
from quill.domain.value import PostId, UserId


class ListCommentsRequest(BaseModel):
    """List comments request.

    Filter by post or by author; with neither, every comment is listed.
    """

    post_id: int | None = None
    user_id: int | None = None

    @model_validator(mode="after")
    def check_single_filter(self) -> "ListCommentsRequest":
        """Allow at most one filter."""
        if self.post_id is not None and self.user_id is not None:
            raise ValueError("Filter by post_id or user_id, not both")
        return self


class ListCommentsUseCase:
    """Use case for listing comments, oldest first, with authors and posts."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        post_service: PostService,
    ) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service
        self.post_service = post_service

    async def execute(self, request: ListCommentsRequest) -> list[CommentItem]:
        """Execute list comments flow."""
        if request.post_id is not None:
            comments = await self.comment_service.list_comments_for_post(
                PostId(request.post_id)
            )
        elif request.user_id is not None:
            comments = await self.comment_service.list_comments_by_author(
                UserId(request.user_id)
            )
        else:
            comments = await self.comment_service.list_comments()

        return await build_comment_items(
            comments, self.user_service, self.post_service
        )
