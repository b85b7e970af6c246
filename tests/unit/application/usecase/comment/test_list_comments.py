"""Unit tests for the comment use cases."""

import pytest
from pydantic import ValidationError

from quill.application.usecase.comment.create_comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from quill.application.usecase.comment.list_comments import (
    ListCommentsRequest,
    ListCommentsUseCase,
)
from quill.domain.error import NotFoundError
from quill.domain.model import Post, User
from quill.domain.repository import PostRepository, UserRepository
from tests.conftest import make_email
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def seed(unit_env) -> tuple[User, User, Post]:
    user_repo = await unit_env.get(UserRepository)
    post_repo = await unit_env.get(PostRepository)
    ana = await user_repo.save(User(name="Ana", email=make_email("ana"), password_hash="x"))
    bo = await user_repo.save(User(name="Bo", email=make_email("bo"), password_hash="x"))
    post = await post_repo.save(Post(title="Hello", content="body", author_id=ana.id))
    return ana, bo, post


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_comment_carries_author(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        _, bo, post = await seed(unit_env)

        item = await use_case.execute(
            CreateCommentRequest(post_id=post.id, content="Nice", identity=bo)
        )

        assert item.user_id == bo.id
        assert item.user.model_dump() == {"id": bo.id, "name": "Bo", "email": "bo@x.com"}

    @pytest.mark.asyncio
    async def test_unknown_post(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        _, bo, _ = await seed(unit_env)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(post_id=42, content="Nice", identity=bo)
            )


class TestListCommentsUseCase:
    """Tests for ListCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_filters_attach_authors(self, unit_env):
        """Listing by post or by user both include each comment's author."""
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        use_case = await unit_env.get(ListCommentsUseCase)
        ana, bo, post = await seed(unit_env)
        await create.execute(CreateCommentRequest(post_id=post.id, content="one", identity=bo))
        await create.execute(CreateCommentRequest(post_id=post.id, content="two", identity=ana))

        # Act
        on_post = await use_case.execute(ListCommentsRequest(post_id=post.id))
        by_bo = await use_case.execute(ListCommentsRequest(user_id=bo.id))
        everything = await use_case.execute(ListCommentsRequest())

        # Assert
        assert [(c.content, c.user.name) for c in on_post] == [("one", "Bo"), ("two", "Ana")]
        assert [c.content for c in by_bo] == ["one"]
        assert {c.post.title for c in everything} == {"Hello"}
        assert len(everything) == 2

    def test_both_filters_rejected(self):
        with pytest.raises(ValidationError):
            ListCommentsRequest(post_id=1, user_id=1)
