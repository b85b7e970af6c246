"""User directory routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status

from quill.application.usecase.common import PublicUser
from quill.application.usecase.user import (
    DeleteAccountRequest,
    DeleteAccountUseCase,
    GetUserRequest,
    GetUserUseCase,
    ListUsersUseCase,
)
from quill.domain.model import AuthenticatedUser

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("", response_model=list[PublicUser])
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
) -> list[PublicUser]:
    """List all users (public fields only)."""
    return await list_users_use_case.execute()


@router.delete("/me", status_code=status.HTTP_204_NO_CONTENT)
async def delete_my_account(
    user: FromDishka[AuthenticatedUser],
    delete_account_use_case: FromDishka[DeleteAccountUseCase],
) -> Response:
    """Delete the caller's account, posts and comments.

    Tokens issued to the account are rejected from then on.
    """
    await delete_account_use_case.execute(DeleteAccountRequest(identity=user))
    logger.info("Deleted account %s", user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{user_id}", response_model=PublicUser)
async def get_user(
    user_id: int,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> PublicUser:
    """Get one user's public fields."""
    return await get_user_use_case.execute(GetUserRequest(user_id=user_id))
