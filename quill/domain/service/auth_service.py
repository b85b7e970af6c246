"""Authentication domain service."""

from datetime import datetime, timezone

import logfire

from quill.domain.error import ConflictError, UnauthorizedError
from quill.domain.model import User
from quill.domain.repository import UserRepository
from quill.domain.value import MAX_ID, Email, Password, UserId
from quill.util.jwt import TokenPayload

from .base import Service
from .password_service import PasswordService

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService(Service):
    """Domain service for credential checks and the user lifecycle.

    Owns the invariants of the Credential Store: unique emails, hashed
    passwords, and identities that resolve to live users.
    """

    def __init__(
        self, user_repository: UserRepository, password_service: PasswordService
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository (Credential Store)
            password_service: Password hashing service
        """
        self.user_repository = user_repository
        self.password_service = password_service

    async def register(self, name: str, email: Email, password: Password) -> User:
        """Create a new user account.

        Args:
            name: Display name
            email: Email address (must be unused)
            password: Plaintext password

        Returns:
            The newly created user

        Raises:
            ConflictError: If the email is already registered
        """
        with logfire.span("auth_service.register", email=email.root):
            existing = await self.user_repository.find_by_email(email)
            if existing:
                logfire.warn("Registration rejected - email taken", email=email.root)
                raise ConflictError("User with this email already exists")

            user = User(
                name=name,
                email=email,
                password_hash=self.password_service.hash(password),
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=saved.id, email=email.root)
            return saved

    async def authenticate(self, email: Email, password: str) -> User:
        """Check an email/password pair.

        Unknown email and wrong password raise the same error so callers
        cannot tell which emails are registered.

        Args:
            email: Email address
            password: Plaintext password

        Returns:
            The matching user

        Raises:
            UnauthorizedError: If the credentials do not match a user
        """
        with logfire.span("auth_service.authenticate", email=email.root):
            user = await self.user_repository.find_by_email(email)
            if user is None or not self.password_service.verify(
                password, user.password_hash
            ):
                logfire.warn("Login failed", email=email.root)
                raise UnauthorizedError(INVALID_CREDENTIALS)

            logfire.info("Login succeeded", user_id=user.id)
            return user

    async def resolve_identity(self, payload: TokenPayload) -> User:
        """Load the user a verified token refers to.

        Args:
            payload: Verified token payload

        Returns:
            The user named by the token subject

        Raises:
            UnauthorizedError: If the subject no longer resolves to a user
        """
        with logfire.span("auth_service.resolve_identity", subject=payload.sub):
            try:
                user_id = UserId(int(payload.sub))
            except ValueError:
                raise UnauthorizedError()
            if not 1 <= user_id <= MAX_ID:
                logfire.warn("Token subject out of range", subject=payload.sub)
                raise UnauthorizedError()

            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn("Token subject no longer exists", user_id=user_id)
                raise UnauthorizedError()
            return user

    async def update_profile(
        self,
        user_id: UserId,
        name: str | None = None,
        email: Email | None = None,
        password: Password | None = None,
    ) -> User:
        """Merge profile changes into a user.

        Fields left as None are not touched. All checks run before anything
        is written.

        Args:
            user_id: User to update
            name: New display name
            email: New email (must not belong to another user)
            password: New plaintext password (re-hashed)

        Returns:
            The updated user

        Raises:
            UnauthorizedError: If the user does not exist
            ConflictError: If the new email belongs to another user
        """
        with logfire.span(
            "auth_service.update_profile",
            user_id=user_id,
            changes=[
                field
                for field, value in (
                    ("name", name),
                    ("email", email),
                    ("password", password),
                )
                if value is not None
            ],
        ):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                raise UnauthorizedError()

            if email is not None and email != user.email:
                existing = await self.user_repository.find_by_email(email)
                if existing and existing.id != user.id:
                    logfire.warn(
                        "Profile update rejected - email taken",
                        user_id=user_id,
                        email=email.root,
                    )
                    raise ConflictError("User with this email already exists")

            changes: dict = {"updated_at": datetime.now(timezone.utc)}
            if name is not None:
                changes["name"] = name
            if email is not None:
                changes["email"] = email
            if password is not None:
                changes["password_hash"] = self.password_service.hash(password)

            saved = await self.user_repository.save(user.evolve(**changes))
            logfire.info("Profile updated", user_id=user_id)
            return saved
