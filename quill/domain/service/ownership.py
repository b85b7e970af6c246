"""Ownership capability shared by all resource services."""

from quill.domain.error import ForbiddenError
from quill.domain.model import User
from quill.domain.value import UserId


def ensure_owner(
    resource: str, resource_id: int, owner_id: UserId, identity: User
) -> None:
    """Allow an operation only if the requester owns the resource.

    Args:
        resource: Resource kind, e.g. "post" or "comment"
        resource_id: ID of the resource being modified
        owner_id: ID of the user who owns the resource
        identity: Authenticated user making the request

    Raises:
        ForbiddenError: If the requester is not the owner
    """
    if owner_id != identity.id:
        raise ForbiddenError(resource, resource_id, identity.id)
