"""Response models shared across use cases.

Only public user fields (id, name, email) ever leave the application
layer; password hashes stay behind.
"""

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel

from quill.domain.model import Comment, Post, User
from quill.domain.service import CommentService, PostService, UserService
from quill.domain.value import Page, UserId

T = TypeVar("T")


class PublicUser(BaseModel):
    """User fields safe to return to any client."""

    id: int
    name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "PublicUser":
        return cls(id=user.id, name=user.name, email=user.email.root)


class PostSummary(BaseModel):
    """The post a comment belongs to."""

    id: int
    title: str

    @classmethod
    def from_post(cls, post: Post) -> "PostSummary":
        return cls(id=post.id, title=post.title)


class CommentItem(BaseModel):
    """Comment with its author and the post it is on."""

    id: int
    content: str
    post_id: int
    user_id: int
    user: PublicUser | None
    post: PostSummary | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(
        cls, comment: Comment, author: User | None, post: Post | None = None
    ) -> "CommentItem":
        return cls(
            id=comment.id,
            content=comment.content,
            post_id=comment.post_id,
            user_id=comment.user_id,
            user=PublicUser.from_user(author) if author else None,
            post=PostSummary.from_post(post) if post else None,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class PostDetail(BaseModel):
    """Post with its author and its comments (each with their author)."""

    id: int
    title: str
    content: str
    image: str | None
    author_id: int
    author: PublicUser | None
    comments: list[CommentItem]
    created_at: datetime
    updated_at: datetime


class PaginatedResponse(BaseModel, Generic[T]):
    """One page of results with navigation metadata."""

    data: list[T]
    total: int
    page: int
    limit: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def from_page(cls, page: Page, data: list[T]) -> "PaginatedResponse[T]":
        return cls(
            data=data,
            total=page.total,
            page=page.page,
            limit=page.limit,
            total_pages=page.total_pages,
            has_next=page.has_next,
            has_prev=page.has_prev,
        )


async def build_comment_items(
    comments: list[Comment], user_service: UserService, post_service: PostService
) -> list[CommentItem]:
    """Attach authors and posts to comments.

    One user lookup and one post lookup, however many comments there are.
    """
    authors = await user_service.get_by_ids([c.user_id for c in comments])
    posts = await post_service.get_by_ids([c.post_id for c in comments])
    return [
        CommentItem.from_comment(c, authors.get(c.user_id), posts.get(c.post_id))
        for c in comments
    ]


async def build_post_details(
    posts: list[Post],
    user_service: UserService,
    comment_service: CommentService,
) -> list[PostDetail]:
    """Expand posts with authors and comments.

    One lookup for all comments and one for every user involved, however
    many posts there are.
    """
    comments_by_post = await comment_service.list_comments_for_posts(
        [post.id for post in posts]
    )

    user_ids: list[UserId] = [post.author_id for post in posts]
    for comments in comments_by_post.values():
        user_ids.extend(c.user_id for c in comments)
    users = await user_service.get_by_ids(user_ids)

    return [
        PostDetail(
            id=post.id,
            title=post.title,
            content=post.content,
            image=post.image,
            author_id=post.author_id,
            author=PublicUser.from_user(users[post.author_id])
            if post.author_id in users
            else None,
            comments=[
                CommentItem.from_comment(c, users.get(c.user_id), post)
                for c in comments_by_post[post.id]
            ],
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
        for post in posts
    ]
