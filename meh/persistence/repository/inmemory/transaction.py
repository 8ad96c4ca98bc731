"""In-memory transaction for testing."""

from meh.domain.repository.transaction import Transaction


class InMemoryTransaction(Transaction):
    """Counts commits. In-memory writes are visible immediately."""

    def __init__(self) -> None:
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1
