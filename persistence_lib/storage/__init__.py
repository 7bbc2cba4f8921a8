"""Storage backends and the uniform persistence store."""

from .appdata_backend import AppDataRepositoryBackend, AppDataStorageBackend, resolve_app_data_root
from .base import StorageBackend
from .codec import KeyCodec, decode_key, encode_key
from .file_backend import FileStorageBackend
from .interfaces import PersistenceProtocol
from .memory_backend import MemoryStorage
from .serializer import JSONSerializer, Serializer, YAMLSerializer
from .store import PersistenceStore
from .temp_backend import TempStorageBackend

__all__ = [
    "AppDataRepositoryBackend",
    "AppDataStorageBackend",
    "FileStorageBackend",
    "JSONSerializer",
    "KeyCodec",
    "MemoryStorage",
    "PersistenceProtocol",
    "PersistenceStore",
    "Serializer",
    "StorageBackend",
    "TempStorageBackend",
    "YAMLSerializer",
    "decode_key",
    "encode_key",
    "resolve_app_data_root",
]
