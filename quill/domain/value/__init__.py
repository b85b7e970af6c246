"""Domain value objects for Quill."""

from quill.domain.value.identifiers import MAX_ID, CommentId, PostId, UserId
from quill.domain.value.types import Email, Page, PageRequest, Password

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "MAX_ID",
    # Types
    "Email",
    "Password",
    "PageRequest",
    "Page",
]
