"""Integration tests for the PostgreSQL repositories.

Assumes PostgreSQL is running and migrated. Rows are committed when the
request scope closes, so each test uses fresh email addresses.
"""

from uuid import uuid4

import pytest

from quill.domain.error import ConflictError
from quill.domain.model import Comment, Post, User
from quill.domain.repository import CommentRepository, PostRepository, UserRepository
from quill.domain.value import Email, UserId
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})

pytestmark = pytest.mark.integration


def unique_email() -> Email:
    return Email(f"{uuid4().hex[:12]}@x.com")


class TestPostgresUserRepository:
    """Integration tests for PostgresUserRepository."""

    @pytest.mark.asyncio
    async def test_save_assigns_id_and_round_trips_email(self, integration_env):
        """The store assigns the ID; the email comes back as an Email."""
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        email = unique_email()

        # Act
        saved = await user_repo.save(User(name="Ana", email=email, password_hash="x"))
        found = await user_repo.find_by_email(email)

        # Assert
        assert saved.id is not None
        assert found.id == saved.id
        assert found.email == email

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        email = unique_email()
        await user_repo.save(User(name="Ana", email=email, password_hash="x"))

        with pytest.raises(ConflictError):
            await user_repo.save(User(name="Other", email=email, password_hash="y"))

        # The session is still usable after the conflict
        assert (await user_repo.find_by_email(email)).name == "Ana"

    @pytest.mark.asyncio
    async def test_find_missing(self, integration_env):
        user_repo = await integration_env.get(UserRepository)

        assert await user_repo.find_by_id(UserId(2_000_000_000)) is None


class TestPostgresCascade:
    """Integration tests for deleting users with content."""

    @pytest.mark.asyncio
    async def test_delete_by_author_returns_post_ids(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        comment_repo = await integration_env.get(CommentRepository)
        ana = await user_repo.save(User(name="Ana", email=unique_email(), password_hash="x"))
        bo = await user_repo.save(User(name="Bo", email=unique_email(), password_hash="x"))
        post = await post_repo.save(Post(title="Hi", content="x", author_id=ana.id))
        await comment_repo.save(Comment(content="Nice", post_id=post.id, user_id=bo.id))

        # Act
        await comment_repo.delete_by_author(ana.id)
        post_ids = await post_repo.delete_by_author(ana.id)
        await comment_repo.delete_by_posts(post_ids)
        await user_repo.delete(ana.id)

        # Assert
        assert post_ids == [post.id]
        assert await post_repo.find_by_id(post.id) is None
        assert await comment_repo.find_by_author(bo.id) == []
        assert await user_repo.find_by_id(ana.id) is None
