"""User use cases."""

from .delete_account import DeleteAccountRequest, DeleteAccountUseCase
from .get_user import GetUserRequest, GetUserUseCase
from .list_users import ListUsersUseCase

__all__ = [
    "DeleteAccountRequest",
    "DeleteAccountUseCase",
    "GetUserRequest",
    "GetUserUseCase",
    "ListUsersUseCase",
]
