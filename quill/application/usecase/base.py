"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Use case taking one request DTO and returning one response DTO."""

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
