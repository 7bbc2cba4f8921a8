"""Simple memory-backed storage backend

This backend keeps serialized text in a dict `{<name>: <text>}` owned by
the instance. Nothing survives the process.
"""
from threading import RLock
from typing import Callable, Dict, List, Optional

from .base import StorageBackend


class MemoryStorage(StorageBackend):
    provider_name = "Memory"
    is_persistent = False

    def __init__(self):
        self._lock = RLock()
        self._store: Dict[str, str] = {}

    def ensure_namespace(self) -> None:
        return

    def namespace_exists(self) -> bool:
        return True

    def write_text(self, name: str, content: str, checkpoint: Optional[Callable[[], None]] = None) -> None:
        with self._lock:
            self._store[name] = content

    def read_text(self, name: str) -> Optional[str]:
        with self._lock:
            return self._store.get(name)

    def exists(self, name: str) -> bool:
        with self._lock:
            return name in self._store

    def delete_text(self, name: str) -> bool:
        with self._lock:
            return self._store.pop(name, None) is not None

    def list_names(self) -> List[str]:
        with self._lock:
            return list(self._store.keys())

    def delete_namespace(self, recursive: bool = True) -> None:
        with self._lock:
            self._store.clear()
