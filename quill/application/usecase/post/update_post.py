"""Update post use case."""

from pydantic import BaseModel, Field

from quill.application.usecase.common import PostDetail, build_post_details
from quill.domain.model import User
from quill.domain.service import CommentService, PostService, UserService
from quill.domain.value import PostId


class UpdatePostRequest(BaseModel):
    """Update post request.

    Omitted (None) fields are left unchanged.
    """

    post_id: int
    identity: User  # Must be the author
    title: str | None = Field(default=None, min_length=1, max_length=255)
    content: str | None = Field(default=None, min_length=1)
    image: str | None = Field(default=None, max_length=500)


class UpdatePostUseCase:
    """Use case for editing a post."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        comment_service: CommentService,
    ) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            comment_service: Comment domain service
        """
        self.post_service = post_service
        self.user_service = user_service
        self.comment_service = comment_service

    async def execute(self, request: UpdatePostRequest) -> PostDetail:
        """Execute update post flow.

        Raises:
            NotFoundError: If the post does not exist
            ForbiddenError: If the requester is not the author
        """
        post = await self.post_service.update_post(
            PostId(request.post_id),
            request.identity,
            title=request.title,
            content=request.content,
            image=request.image,
        )
        [detail] = await build_post_details(
            [post], self.user_service, self.comment_service
        )
        return detail
