"""Password hashing domain service."""

import logfire

from quill.config import AuthSettings
from quill.domain.value import Password
from quill.util.password import hash_password, verify_password

from .base import Service


class PasswordService(Service):
    """One-way password hashing with a fixed work factor."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize password service.

        Args:
            auth_settings: Authentication settings (provides bcrypt rounds)
        """
        self.auth_settings = auth_settings

    def hash(self, password: Password) -> str:
        """Hash a password with a fresh random salt.

        Args:
            password: Plaintext password

        Returns:
            bcrypt digest
        """
        with logfire.span(
            "password_service.hash", rounds=self.auth_settings.bcrypt_rounds
        ):
            return hash_password(password.root, rounds=self.auth_settings.bcrypt_rounds)

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a password against a stored digest.

        Args:
            password: Plaintext password to check
            password_hash: Stored bcrypt digest

        Returns:
            True if the password matches
        """
        with logfire.span("password_service.verify"):
            return verify_password(password, password_hash)
