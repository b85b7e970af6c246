"""Strongly typed identifiers for Quill domain entities.

Identifiers are integers assigned by the store on first save. NewType keeps
user, post and comment IDs from being mixed up.
"""

from typing import NewType

UserId = NewType("UserId", int)
PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)

# Largest ID the store can hold (PostgreSQL ``integer``)
MAX_ID = 2_147_483_647
