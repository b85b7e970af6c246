"""Base model for Quill entities."""

from typing import Any, Self

import pydantic
from pydantic import BaseModel, ConfigDict

from quill.domain.error import ValidationError


class DomainModel(BaseModel):
    """Base class for users, posts and comments.

    Entities are immutable. Edits go through ``evolve``, which returns a
    new instance and re-runs field validation on the merged values.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # Allow custom value objects
    )

    def evolve(self, **changes: Any) -> Self:
        """Return a validated copy with ``changes`` applied.

        Raises:
            ValidationError: If a changed field is invalid
        """
        try:
            return self.model_validate({**self.model_dump(), **changes})
        except pydantic.ValidationError as e:
            fields = ", ".join(
                ".".join(str(part) for part in error["loc"]) for error in e.errors()
            )
            raise ValidationError(
                f"Invalid {type(self).__name__.lower()} fields: {fields}"
            ) from e
