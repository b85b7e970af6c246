"""Test configuration and fixtures."""

import os

import pytest

# Settings are read from the environment; pin the test defaults before any
# container is built. Four bcrypt rounds keep hashing fast.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret-key-with-at-least-32-bytes")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")

from quill.domain.value import Email, Password  # noqa: E402


def make_email(local: str = "ana") -> Email:
    """Build a valid test email."""
    return Email(f"{local}@x.com")


def make_password(raw: str = "secret1") -> Password:
    """Build a valid test password."""
    return Password(raw)


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless QUILL_INTEGRATION=1."""
    if os.environ.get("QUILL_INTEGRATION") == "1":
        return

    skip = pytest.mark.skip(reason="set QUILL_INTEGRATION=1 to run against PostgreSQL")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)
