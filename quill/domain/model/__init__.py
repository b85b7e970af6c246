"""Domain model entities for Quill."""

from quill.domain.model.comment import Comment
from quill.domain.model.identity import AuthenticatedUser
from quill.domain.model.post import Post
from quill.domain.model.user import User

__all__ = [
    "User",
    "AuthenticatedUser",
    "Post",
    "Comment",
]
