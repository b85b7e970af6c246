"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .ownership import ensure_owner
from .password_service import PasswordService
from .post_service import PostService
from .user_service import UserService

__all__ = [
    "AuthService",
    "CommentService",
    "JWTService",
    "PasswordService",
    "PostService",
    "Service",
    "UserService",
    "ensure_owner",
]
