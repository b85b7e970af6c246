"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from quill.application.usecase.auth import (
    AuthResponse,
    GetProfileRequest,
    GetProfileUseCase,
    LoginRequest,
    LoginUseCase,
    ProfileResponse,
    RegisterRequest,
    RegisterUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from quill.domain.model import AuthenticatedUser
from quill.domain.value import Email, Password

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating the caller's profile."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    email: Email | None = None
    password: Password | None = None


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> AuthResponse:
    """Create an account and return it with a bearer token.

    Example:
        POST /auth/register
        {"name": "Ana", "email": "ana@x.com", "password": "secret1"}

        Response (201):
        {"user": {"id": 1, "name": "Ana", "email": "ana@x.com"}, "token": "eyJ..."}
    """
    result = await register_use_case.execute(request)
    logger.info("Registered user %s", result.user.id)
    return result


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> AuthResponse:
    """Exchange email and password for a bearer token.

    Unknown email and wrong password both answer 401 "Invalid credentials".
    """
    return await login_use_case.execute(request)


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(
    user: FromDishka[AuthenticatedUser],
    get_profile_use_case: FromDishka[GetProfileUseCase],
) -> ProfileResponse:
    """Return the authenticated user's public fields."""
    return await get_profile_use_case.execute(GetProfileRequest(identity=user))


@router.patch("/profile", response_model=ProfileResponse)
async def update_profile(
    request: UpdateProfileAPIRequest,
    user: FromDishka[AuthenticatedUser],
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
) -> ProfileResponse:
    """Update any of name, email and password; omitted fields keep their value.

    Example:
        PATCH /auth/profile
        Authorization: Bearer eyJ...
        {"name": "Ana Maria"}
    """
    return await update_profile_use_case.execute(
        UpdateProfileRequest(
            user_id=user.id,
            name=request.name,
            email=request.email,
            password=request.password,
        )
    )
