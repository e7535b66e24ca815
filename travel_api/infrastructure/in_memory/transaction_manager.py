from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from travel_api.application.interfaces.transaction_manager import TransactionManager


class NoopTransactionManager(TransactionManager):
    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        yield
