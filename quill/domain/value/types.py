"""Domain value objects for Quill.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import math
import re
from typing import Generic, TypeVar

from pydantic import Field, field_validator

from quill.domain.value.common import RootValueObject, ValueObject

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+$")

# bcrypt only looks at the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


class Email(RootValueObject[str]):
    """Email address used as the login identifier.

    Compared exactly as stored (case-sensitive).
    """

    @field_validator("root")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        """Validate email shape and length."""
        if len(v) > 255:
            raise ValueError("Email must be at most 255 characters")
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Email must be a valid address")
        return v


class Password(RootValueObject[str]):
    """Plaintext password as submitted by the user.

    Only ever held in memory long enough to hash or verify it.
    """

    @field_validator("root")
    @classmethod
    def validate_password_length(cls, v: str) -> str:
        """Validate password length against bcrypt's input limit."""
        if len(v) < 6:
            raise ValueError("Password must be at least 6 characters")
        if len(v.encode()) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return v

    def __repr__(self) -> str:
        return "Password('********')"

    def __str__(self) -> str:
        return "********"


class PageRequest(ValueObject):
    """One-based page request."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=5, ge=1, le=100)

    @property
    def offset(self) -> int:
        """Number of rows to skip."""
        return (self.page - 1) * self.limit


T = TypeVar("T")


class Page(ValueObject, Generic[T]):
    """A page of results with navigation metadata."""

    data: list[T]
    total: int = Field(ge=0)
    page: int = Field(ge=1)
    limit: int = Field(ge=1)

    @property
    def total_pages(self) -> int:
        """Number of pages needed for ``total`` items."""
        return math.ceil(self.total / self.limit)

    @property
    def has_next(self) -> bool:
        """Whether a later page exists."""
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        """Whether an earlier page exists."""
        return self.page > 1
