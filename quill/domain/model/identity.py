"""Authenticated request identity."""

from quill.domain.model.user import User


class AuthenticatedUser(User):
    """User resolved from a verified bearer token for the current request.

    Created by the request gate and scoped to a single request. Handlers
    take this type to declare that they require authentication.
    """

    @classmethod
    def from_user(cls, user: User) -> "AuthenticatedUser":
        """Wrap a stored user as the request identity."""
        return cls.model_validate(user.model_dump())
