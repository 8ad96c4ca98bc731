"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One operation of the service, taking a typed request to a typed response.

    Use cases check scopes and call domain services. Everything below them
    works with decoded tokens and domain types only.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
