"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class ConflictError(DomainError):
    """Raised when a write would violate a uniqueness rule."""

    pass


class UnauthorizedError(DomainError):
    """Raised for bad credentials or a missing, invalid or orphaned identity.

    The message is deliberately generic: callers must not learn which part
    of a credential check failed.
    """

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class ForbiddenError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: int, user_id: int):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(f"You can only modify your own {resource}s")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: int | str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} with ID {identifier} not found")
