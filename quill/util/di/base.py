"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests can swap for an in-memory variant
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all Quill providers.

    A provider class with subclasses is a mockable component: its
    subclasses are the production and mock variants, told apart by
    ``__is_mock__``. A provider without subclasses is used as-is.

    Attributes:
        __mock_component__: Component name, None for concrete providers
        __is_mock__: Whether this is a mock implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        """Whether this provider has production/mock variants."""
        return bool(cls.__subclasses__())
