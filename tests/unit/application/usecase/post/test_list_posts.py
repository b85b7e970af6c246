"""Unit tests for ListPostsUseCase and the post detail builders."""

import pytest

from quill.application.usecase.post.list_posts import (
    ListPostsRequest,
    ListPostsUseCase,
)
from quill.domain.model import Comment, Post, User
from quill.domain.repository import CommentRepository, PostRepository, UserRepository
from tests.conftest import make_email
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def seed_posts(unit_env, count: int) -> tuple[User, User]:
    """Create Ana and Bo; Ana writes ``count`` posts and Bo comments on the last."""
    user_repo = await unit_env.get(UserRepository)
    post_repo = await unit_env.get(PostRepository)
    comment_repo = await unit_env.get(CommentRepository)

    ana = await user_repo.save(User(name="Ana", email=make_email("ana"), password_hash="x"))
    bo = await user_repo.save(User(name="Bo", email=make_email("bo"), password_hash="x"))
    post = None
    for i in range(count):
        post = await post_repo.save(
            Post(title=f"Post {i + 1}", content="body", author_id=ana.id)
        )
    if post is not None:
        await comment_repo.save(Comment(content="Nice", post_id=post.id, user_id=bo.id))
    return ana, bo


class TestListPostsUseCase:
    """Tests for ListPostsUseCase."""

    @pytest.mark.asyncio
    async def test_feed_defaults_to_five(self, unit_env):
        """The global feed uses the smaller default page size."""
        # Arrange
        use_case = await unit_env.get(ListPostsUseCase)
        await seed_posts(unit_env, 12)

        # Act
        response = await use_case.execute(ListPostsRequest())

        # Assert
        assert response.limit == 5
        assert [p.id for p in response.data] == [12, 11, 10, 9, 8]
        assert response.total == 12
        assert response.total_pages == 3
        assert response.has_next is True
        assert response.has_prev is False

    @pytest.mark.asyncio
    async def test_author_listing_defaults_to_ten(self, unit_env):
        use_case = await unit_env.get(ListPostsUseCase)
        ana, bo = await seed_posts(unit_env, 12)

        mine = await use_case.execute(ListPostsRequest(author_id=ana.id))
        theirs = await use_case.execute(ListPostsRequest(author_id=bo.id))

        assert mine.limit == 10
        assert len(mine.data) == 10
        assert mine.total_pages == 2
        assert theirs.data == []
        assert theirs.total == 0

    @pytest.mark.asyncio
    async def test_posts_carry_author_and_comments(self, unit_env):
        """Each post is expanded with public author fields and commented authors."""
        # Arrange
        use_case = await unit_env.get(ListPostsUseCase)
        await seed_posts(unit_env, 2)

        # Act
        response = await use_case.execute(ListPostsRequest(page=1, limit=2))

        # Assert
        newest, oldest = response.data
        assert newest.author.model_dump() == {"id": 1, "name": "Ana", "email": "ana@x.com"}
        assert [c.content for c in newest.comments] == ["Nice"]
        assert newest.comments[0].user.name == "Bo"
        assert oldest.comments == []
        assert "password_hash" not in response.model_dump_json()

    @pytest.mark.asyncio
    async def test_explicit_page(self, unit_env):
        use_case = await unit_env.get(ListPostsUseCase)
        await seed_posts(unit_env, 12)

        response = await use_case.execute(ListPostsRequest(page=3, limit=5))

        assert [p.title for p in response.data] == ["Post 2", "Post 1"]
        assert response.has_next is False
        assert response.has_prev is True
