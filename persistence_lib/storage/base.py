"""Storage backend interface definitions.

Defines the StorageBackend abstract class used by
:class:`persistence_lib.storage.store.PersistenceStore`. A backend only moves
text around under names (encoded keys); it knows nothing about keys,
values or serialization.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, List, Optional


class StorageBackend(ABC):
    """Abstract storage backend.

    Implementations must be thread-safe: the store dispatches blocking
    backends to worker threads, so calls can overlap.
    """

    #: Human readable name reported by the store (``"Memory"``, ...).
    provider_name: str = ""
    #: Whether entries survive the process.
    is_persistent: bool = False
    #: False for backends that cannot list or bulk-clear their namespace.
    supports_enumeration: bool = True
    #: True when calls hit the disk and should run off the event loop.
    blocking_io: bool = False

    @abstractmethod
    def ensure_namespace(self) -> None:
        """Create the backing directory/map if absent. Idempotent."""

    @abstractmethod
    def namespace_exists(self) -> bool:
        """Return True if the namespace currently exists."""

    @abstractmethod
    def write_text(self, name: str, content: str, checkpoint: Optional[Callable[[], None]] = None) -> None:
        """Store `content` under `name`, replacing any previous content.

        Multi-step backends call `checkpoint` between steps; it raises to
        abort the write.
        """

    @abstractmethod
    def read_text(self, name: str) -> Optional[str]:
        """Return content stored under `name` or None if absent."""

    @abstractmethod
    def exists(self, name: str) -> bool:
        """Return True if an entry is stored under `name`."""

    @abstractmethod
    def delete_text(self, name: str) -> bool:
        """Delete `name`. Return True iff something was deleted."""

    @abstractmethod
    def list_names(self) -> List[str]:
        """Return the names of all entries in the namespace (snapshot)."""

    @abstractmethod
    def delete_namespace(self, recursive: bool = True) -> None:
        """Remove the namespace itself."""

    def close(self) -> None:
        """Release resources. Never deletes stored data."""
        return
