"""Response envelope shared by the API routes."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Successful responses wrap their payload as {"response": ...}."""

    response: T
