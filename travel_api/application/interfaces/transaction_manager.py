from contextlib import AbstractAsyncContextManager
from typing import Protocol


class TransactionManager(Protocol):
    """
    Unit of work around repository writes.

    Leaving `start()` normally commits; an exception rolls back and propagates.
    """

    def start(self) -> AbstractAsyncContextManager[None]: ...
