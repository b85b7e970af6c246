"""Unit tests for the ownership check."""

import pytest

from quill.domain.error import ForbiddenError
from quill.domain.model import User
from quill.domain.service import ensure_owner
from quill.domain.value import Email, UserId


def make_user(user_id: int) -> User:
    return User(
        id=UserId(user_id),
        name=f"user{user_id}",
        email=Email(f"user{user_id}@x.com"),
        password_hash="$2b$04$irrelevant",
    )


class TestEnsureOwner:
    """Tests for ensure_owner."""

    def test_owner_passes(self):
        ensure_owner("post", 1, UserId(5), make_user(5))

    def test_non_owner_forbidden(self):
        with pytest.raises(ForbiddenError) as exc_info:
            ensure_owner("comment", 9, UserId(5), make_user(6))

        assert exc_info.value.resource == "comment"
        assert exc_info.value.resource_id == 9
        assert exc_info.value.user_id == 6
        assert str(exc_info.value) == "You can only modify your own comments"
