"""Delete account use case."""

import logfire
from pydantic import BaseModel

from quill.domain.model import User
from quill.domain.service import UserService


class DeleteAccountRequest(BaseModel):
    """Delete account request."""

    identity: User  # Resolved by the request gate


class DeleteAccountUseCase:
    """Use case for deleting the caller's own account.

    Tokens already issued to the account stop working because the request
    gate can no longer resolve their subject.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize delete account use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: DeleteAccountRequest) -> None:
        """Delete the user with their posts and comments."""
        with logfire.span("delete_account.execute", user_id=request.identity.id):
            await self.user_service.delete_user(request.identity.id)
