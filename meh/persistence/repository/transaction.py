"""Transaction backed by the request's SQLAlchemy session."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from meh.domain.repository import Transaction


class SessionTransaction(Transaction):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def commit(self) -> None:
        # Frees the advisory locks and hands the connection back to the
        # pool. Later statements of the request start a new transaction.
        await self.session.commit()
        logfire.info("Request transaction committed")
