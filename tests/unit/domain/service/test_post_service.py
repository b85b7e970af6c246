"""Unit tests for PostService."""

import pytest

from quill.domain.error import ForbiddenError, NotFoundError, ValidationError
from quill.domain.model import Comment, User
from quill.domain.repository import CommentRepository, UserRepository
from quill.domain.service import PostService
from quill.domain.value import PageRequest, PostId
from tests.conftest import make_email
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def create_user(unit_env, local: str) -> User:
    user_repo = await unit_env.get(UserRepository)
    return await user_repo.save(
        User(name=local.title(), email=make_email(local), password_hash="x")
    )


class TestCreatePost:
    """Tests for create_post method."""

    @pytest.mark.asyncio
    async def test_author_is_requester(self, unit_env):
        post_service = await unit_env.get(PostService)
        ana = await create_user(unit_env, "ana")

        post = await post_service.create_post("Hello", "First post", ana)

        assert post.id == 1
        assert post.author_id == ana.id
        assert post.image is None

    @pytest.mark.asyncio
    async def test_keeps_image_reference(self, unit_env):
        post_service = await unit_env.get(PostService)
        ana = await create_user(unit_env, "ana")

        post = await post_service.create_post(
            "Hello", "With a picture", ana, image="https://img.example/1.png"
        )

        assert post.image == "https://img.example/1.png"


class TestListPosts:
    """Tests for list_posts and list_posts_by_author."""

    @pytest.mark.asyncio
    async def test_newest_first_with_page_metadata(self, unit_env):
        """Twelve posts at five per page make three pages."""
        # Arrange
        post_service = await unit_env.get(PostService)
        ana = await create_user(unit_env, "ana")
        for i in range(12):
            await post_service.create_post(f"Post {i + 1}", "body", ana)

        # Act
        first = await post_service.list_posts(PageRequest(page=1, limit=5))
        last = await post_service.list_posts(PageRequest(page=3, limit=5))

        # Assert
        assert [p.id for p in first.data] == [12, 11, 10, 9, 8]
        assert first.total == 12
        assert first.total_pages == 3
        assert first.has_next is True
        assert first.has_prev is False
        assert [p.id for p in last.data] == [2, 1]
        assert last.has_next is False

    @pytest.mark.asyncio
    async def test_page_past_end_is_empty(self, unit_env):
        post_service = await unit_env.get(PostService)
        ana = await create_user(unit_env, "ana")
        await post_service.create_post("Only", "body", ana)

        page = await post_service.list_posts(PageRequest(page=4, limit=5))

        assert page.data == []
        assert page.total == 1

    @pytest.mark.asyncio
    async def test_by_author_filters(self, unit_env):
        post_service = await unit_env.get(PostService)
        ana = await create_user(unit_env, "ana")
        bo = await create_user(unit_env, "bo")
        await post_service.create_post("Ana 1", "body", ana)
        await post_service.create_post("Bo 1", "body", bo)
        await post_service.create_post("Ana 2", "body", ana)

        page = await post_service.list_posts_by_author(
            ana.id, PageRequest(page=1, limit=10)
        )

        assert [p.title for p in page.data] == ["Ana 2", "Ana 1"]
        assert page.total == 2


class TestGetPost:
    """Tests for get_post method."""

    @pytest.mark.asyncio
    async def test_get_by_ids_tolerates_duplicates_and_unknown(self, unit_env):
        post_service = await unit_env.get(PostService)
        ana = await create_user(unit_env, "ana")
        first = await post_service.create_post("One", "body", ana)
        second = await post_service.create_post("Two", "body", ana)

        posts = await post_service.get_by_ids([second.id, first.id, second.id, PostId(99)])

        assert {pid: p.title for pid, p in posts.items()} == {first.id: "One", second.id: "Two"}

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.get_post(PostId(7))


class TestUpdatePost:
    """Tests for update_post method."""

    @pytest.mark.asyncio
    async def test_owner_updates_given_fields(self, unit_env):
        post_service = await unit_env.get(PostService)
        ana = await create_user(unit_env, "ana")
        post = await post_service.create_post("Hello", "body", ana, image="a.png")

        updated = await post_service.update_post(post.id, ana, title="Hi")

        assert updated.title == "Hi"
        assert updated.content == "body"
        assert updated.image == "a.png"
        assert updated.updated_at >= post.updated_at

    @pytest.mark.asyncio
    async def test_non_owner_forbidden(self, unit_env):
        """Another user's edit is rejected and nothing changes."""
        # Arrange
        post_service = await unit_env.get(PostService)
        ana = await create_user(unit_env, "ana")
        bo = await create_user(unit_env, "bo")
        post = await post_service.create_post("Hello", "body", ana)

        # Act
        with pytest.raises(ForbiddenError):
            await post_service.update_post(post.id, bo, title="Hijacked")

        # Assert
        assert (await post_service.get_post(post.id)).title == "Hello"

    @pytest.mark.asyncio
    async def test_invalid_title_rejected(self, unit_env):
        post_service = await unit_env.get(PostService)
        ana = await create_user(unit_env, "ana")
        post = await post_service.create_post("Hello", "body", ana)

        with pytest.raises(ValidationError, match="title"):
            await post_service.update_post(post.id, ana, title="x" * 256)

        assert (await post_service.get_post(post.id)).title == "Hello"


class TestDeletePost:
    """Tests for delete_post method."""

    @pytest.mark.asyncio
    async def test_delete_removes_comments(self, unit_env):
        """Deleting a post takes its comments with it."""
        # Arrange
        post_service = await unit_env.get(PostService)
        comment_repo = await unit_env.get(CommentRepository)
        ana = await create_user(unit_env, "ana")
        bo = await create_user(unit_env, "bo")
        post = await post_service.create_post("Hello", "body", ana)
        other = await post_service.create_post("Other", "body", ana)
        await comment_repo.save(Comment(content="Nice", post_id=post.id, user_id=bo.id))
        kept = await comment_repo.save(
            Comment(content="Also nice", post_id=other.id, user_id=bo.id)
        )

        # Act
        await post_service.delete_post(post.id, ana)

        # Assert
        with pytest.raises(NotFoundError):
            await post_service.get_post(post.id)
        assert [c.id for c in await comment_repo.find_all()] == [kept.id]

    @pytest.mark.asyncio
    async def test_non_owner_forbidden(self, unit_env):
        post_service = await unit_env.get(PostService)
        ana = await create_user(unit_env, "ana")
        bo = await create_user(unit_env, "bo")
        post = await post_service.create_post("Hello", "body", ana)

        with pytest.raises(ForbiddenError):
            await post_service.delete_post(post.id, bo)

        assert await post_service.get_post(post.id)
