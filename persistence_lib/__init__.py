"""persistence_lib: interchangeable key-value persistence backends.

One store contract (:class:`PersistenceStore`) over memory, file system,
application-data and temp-directory backends.
"""

from persistence_lib.config import StoreConfig, create_store, load_config
from persistence_lib.errors import PersistenceError
from persistence_lib.storage import (
    AppDataRepositoryBackend,
    AppDataStorageBackend,
    FileStorageBackend,
    JSONSerializer,
    KeyCodec,
    MemoryStorage,
    PersistenceProtocol,
    PersistenceStore,
    StorageBackend,
    TempStorageBackend,
    YAMLSerializer,
)

__all__ = [
    "AppDataRepositoryBackend",
    "AppDataStorageBackend",
    "FileStorageBackend",
    "JSONSerializer",
    "KeyCodec",
    "MemoryStorage",
    "PersistenceError",
    "PersistenceProtocol",
    "PersistenceStore",
    "StorageBackend",
    "StoreConfig",
    "TempStorageBackend",
    "YAMLSerializer",
    "create_store",
    "load_config",
]
