from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from app.application.interfaces.transaction_manager import TransactionManager


class NoopTransactionManager(TransactionManager):
    """The in-memory store applies each write without suspending; nothing to commit."""

    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        yield
