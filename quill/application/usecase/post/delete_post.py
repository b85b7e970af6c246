"""Delete post use case."""

from pydantic import BaseModel

from quill.domain.model import User
from quill.domain.service import PostService
from quill.domain.value import PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: int
    identity: User  # Must be the author


class DeletePostUseCase:
    """Use case for deleting a post and its comments."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> None:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post does not exist
            ForbiddenError: If the requester is not the author
        """
        await self.post_service.delete_post(PostId(request.post_id), request.identity)
