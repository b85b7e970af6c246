"""Authentication use cases."""

from .get_profile import GetProfileRequest, GetProfileUseCase, ProfileResponse
from .login import LoginRequest, LoginUseCase
from .register import AuthResponse, RegisterRequest, RegisterUseCase
from .update_profile import UpdateProfileRequest, UpdateProfileUseCase

__all__ = [
    "AuthResponse",
    "GetProfileRequest",
    "GetProfileUseCase",
    "LoginRequest",
    "LoginUseCase",
    "ProfileResponse",
    "RegisterRequest",
    "RegisterUseCase",
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
]
