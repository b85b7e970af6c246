"""List posts use case."""

import logfire
from pydantic import BaseModel, Field

from quill.application.usecase.common import (
    PaginatedResponse,
    PostDetail,
    build_post_details,
)
from quill.config import PaginationSettings
from quill.domain.service import CommentService, PostService, UserService
from quill.domain.value import PageRequest, UserId


class ListPostsRequest(BaseModel):
    """List posts request.

    With ``author_id`` set only that user's posts are listed. A missing
    ``limit`` falls back to the configured default for the kind of listing.
    """

    page: int = Field(default=1, ge=1)
    limit: int | None = Field(default=None, ge=1, le=100)
    author_id: int | None = None


class ListPostsUseCase:
    """Use case for paging through posts, newest first."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        comment_service: CommentService,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            comment_service: Comment domain service
            pagination: Pagination defaults
        """
        self.post_service = post_service
        self.user_service = user_service
        self.comment_service = comment_service
        self.pagination = pagination

    async def execute(self, request: ListPostsRequest) -> PaginatedResponse[PostDetail]:
        """Execute list posts flow.

        Args:
            request: Page, page size and optional author filter

        Returns:
            One page of posts, each with author and comments
        """
        if request.author_id is None:
            default_limit = self.pagination.default_limit
        else:
            default_limit = self.pagination.user_posts_default_limit

        page_request = PageRequest(
            page=request.page,
            limit=min(request.limit or default_limit, self.pagination.max_limit),
        )

        with logfire.span(
            "list_posts.execute",
            page=page_request.page,
            limit=page_request.limit,
            author_id=request.author_id,
        ):
            if request.author_id is None:
                page = await self.post_service.list_posts(page_request)
            else:
                page = await self.post_service.list_posts_by_author(
                    UserId(request.author_id), page_request
                )

            details = await build_post_details(
                page.data, self.user_service, self.comment_service
            )
            return PaginatedResponse[PostDetail].from_page(page, details)
