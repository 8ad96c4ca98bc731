"""Transaction interface."""

from abc import ABC, abstractmethod


class Transaction(ABC):
    """The unit of work the repositories of one request write in.

    Whatever is still open when the request ends is committed then. Use
    cases commit early when a side effect outside the store must only
    happen once the writes are durable.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Make the writes so far durable and release held locks."""
        pass
