"""Error taxonomy for persistence_lib.

Every failure coming out of a backend or a serializer during a store
operation is re-raised as a single :class:`PersistenceError`. Cancellation
is never wrapped; it propagates as ``asyncio.CancelledError``.
"""
from __future__ import annotations
from typing import Any, Optional


class PersistenceError(Exception):
    """Raised when a persistence operation fails.

    Attributes:
        operation: name of the failed operation (``store``, ``retrieve`` ...)
        key: stringified key, or ``None`` for namespace-wide operations
        cause: the underlying exception
        provider: provider name of the backend involved, if known
    """

    def __init__(
        self,
        operation: str,
        key: Any = None,
        cause: Optional[BaseException] = None,
        provider: Optional[str] = None,
    ) -> None:
        self.operation = operation
        self.key = None if key is None else str(key)
        self.cause = cause
        self.provider = provider

        if self.key is not None:
            msg = f"Failed to {operation} object with key '{self.key}'"
        else:
            msg = f"Failed to {operation}"
        if provider:
            msg += f" in {provider}"
        if cause is not None:
            msg += f": {cause}"
        super().__init__(msg)
