"""Post aggregate root."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.value import PostId, UserId


class Post(DomainModel):
    """Blog post written by a single author.

    ``image`` is an opaque reference (URL or path) to an image stored
    elsewhere.
    """

    id: Optional[PostId] = None
    title: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1)
    image: Optional[str] = Field(default=None, max_length=500)
    author_id: UserId
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
