"""Base service class for domain services."""


class Service:
    """Base class for Quill domain services.

    Services are created per request by the container, work only through
    repository interfaces and report failures as domain errors.
    """
