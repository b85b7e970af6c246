"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Response, status
from pydantic import BaseModel, Field

from quill.application.usecase.common import PaginatedResponse, PostDetail
from quill.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from quill.domain.model import AuthenticatedUser

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1)
    image: str | None = Field(default=None, max_length=500)


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    content: str | None = Field(default=None, min_length=1)
    image: str | None = Field(default=None, max_length=500)


@router.get("", response_model=PaginatedResponse[PostDetail])
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1, le=100),
) -> PaginatedResponse[PostDetail]:
    """List posts newest first (default 5 per page)."""
    return await list_posts_use_case.execute(ListPostsRequest(page=page, limit=limit))


@router.get("/user/{user_id}", response_model=PaginatedResponse[PostDetail])
async def list_user_posts(
    user_id: int,
    list_posts_use_case: FromDishka[ListPostsUseCase],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1, le=100),
) -> PaginatedResponse[PostDetail]:
    """List one user's posts newest first (default 10 per page)."""
    return await list_posts_use_case.execute(
        ListPostsRequest(page=page, limit=limit, author_id=user_id)
    )


@router.get("/{post_id}", response_model=PostDetail)
async def get_post(
    post_id: int,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostDetail:
    """Get a post with its author and comments."""
    return await get_post_use_case.execute(GetPostRequest(post_id=post_id))


@router.post("", response_model=PostDetail, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    user: FromDishka[AuthenticatedUser],
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> PostDetail:
    """Create a post authored by the caller."""
    return await create_post_use_case.execute(
        CreatePostRequest(
            title=request.title,
            content=request.content,
            image=request.image,
            identity=user,
        )
    )


@router.patch("/{post_id}", response_model=PostDetail)
async def update_post(
    post_id: int,
    request: UpdatePostAPIRequest,
    user: FromDishka[AuthenticatedUser],
    update_post_use_case: FromDishka[UpdatePostUseCase],
) -> PostDetail:
    """Edit a post. Only its author may do this."""
    return await update_post_use_case.execute(
        UpdatePostRequest(
            post_id=post_id,
            identity=user,
            title=request.title,
            content=request.content,
            image=request.image,
        )
    )


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: int,
    user: FromDishka[AuthenticatedUser],
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> Response:
    """Delete a post and its comments. Only its author may do this."""
    await delete_post_use_case.execute(DeletePostRequest(post_id=post_id, identity=user))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
