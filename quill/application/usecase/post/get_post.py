"""Get post use case."""

from pydantic import BaseModel

from quill.application.usecase.common import PostDetail, build_post_details
from quill.domain.service import CommentService, PostService, UserService
from quill.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: int


class GetPostUseCase:
    """Use case for retrieving a post with its author and comments."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        comment_service: CommentService,
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            comment_service: Comment domain service
        """
        self.post_service = post_service
        self.user_service = user_service
        self.comment_service = comment_service

    async def execute(self, request: GetPostRequest) -> PostDetail:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.get_post(PostId(request.post_id))
        [detail] = await build_post_details(
            [post], self.user_service, self.comment_service
        )
        return detail
