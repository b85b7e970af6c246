"""User aggregate root.

Users are the Credential Store: each record holds the bcrypt digest of the
user's password alongside their public profile.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.value import Email, UserId


class User(DomainModel):
    """User aggregate root.

    ``id`` is None until the store assigns one on first save.
    ``password_hash`` never leaves the domain and persistence layers.
    """

    id: Optional[UserId] = None
    name: str = Field(min_length=1, max_length=100)
    email: Email
    password_hash: str = Field(repr=False)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
