"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status
from pydantic import BaseModel, Field

from quill.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from quill.application.usecase.common import CommentItem
from quill.domain.model import AuthenticatedUser

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment.

    There is no author field: comments are always written as the caller.
    """

    content: str = Field(min_length=1)
    post_id: int


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str = Field(min_length=1)


@router.get("", response_model=list[CommentItem])
async def list_comments(
    list_comments_use_case: FromDishka[ListCommentsUseCase],
) -> list[CommentItem]:
    """List every comment."""
    return await list_comments_use_case.execute(ListCommentsRequest())


@router.get("/post/{post_id}", response_model=list[CommentItem])
async def list_post_comments(
    post_id: int,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
) -> list[CommentItem]:
    """List the comments on a post, oldest first."""
    return await list_comments_use_case.execute(ListCommentsRequest(post_id=post_id))


@router.get("/user/{user_id}", response_model=list[CommentItem])
async def list_user_comments(
    user_id: int,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
) -> list[CommentItem]:
    """List the comments a user wrote, oldest first."""
    return await list_comments_use_case.execute(ListCommentsRequest(user_id=user_id))


@router.get("/{comment_id}", response_model=CommentItem)
async def get_comment(
    comment_id: int,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> CommentItem:
    """Get one comment with its author."""
    return await get_comment_use_case.execute(GetCommentRequest(comment_id=comment_id))


@router.post("", response_model=CommentItem, status_code=status.HTTP_201_CREATED)
async def create_comment(
    request: CreateCommentAPIRequest,
    user: FromDishka[AuthenticatedUser],
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CommentItem:
    """Comment on a post as the caller."""
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            post_id=request.post_id, content=request.content, identity=user
        )
    )


@router.patch("/{comment_id}", response_model=CommentItem)
async def update_comment(
    comment_id: int,
    request: UpdateCommentAPIRequest,
    user: FromDishka[AuthenticatedUser],
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
) -> CommentItem:
    """Edit a comment. Only its author may do this."""
    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id, content=request.content, identity=user
        )
    )


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: int,
    user: FromDishka[AuthenticatedUser],
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> Response:
    """Delete a comment. Only its author may do this."""
    await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, identity=user)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
