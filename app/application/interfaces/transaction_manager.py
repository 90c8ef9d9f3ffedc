from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Protocol


class TransactionManager(Protocol):
    """Unit of work around a store write: either it commits whole or not at all."""

    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        yield
