"""Comment entity."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment left by a user on a post."""

    id: Optional[CommentId] = None
    content: str = Field(min_length=1)
    post_id: PostId
    user_id: UserId
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
