"""Store configuration and factory.

A host application describes the store it wants in a small YAML file::

    backend: filesystem
    base_directory: ./data/settings
    serializer: json
    key_type: str
    log_level: INFO

and calls :func:`create_store` with the loaded :class:`StoreConfig`.
"""
from __future__ import annotations
import logging
import uuid
from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from pydantic import BaseModel

from persistence_lib.storage.appdata_backend import AppDataRepositoryBackend, AppDataStorageBackend
from persistence_lib.storage.base import StorageBackend
from persistence_lib.storage.file_backend import FileStorageBackend
from persistence_lib.storage.memory_backend import MemoryStorage
from persistence_lib.storage.serializer import get_serializer
from persistence_lib.storage.store import PersistenceStore
from persistence_lib.storage.temp_backend import TempStorageBackend

logger = logging.getLogger(__name__)

KEY_TYPES = {"str": str, "int": int, "uuid": uuid.UUID}


class StoreConfig(BaseModel):
    backend: Literal["memory", "filesystem", "appdata", "appdata_repository", "temp"] = "memory"
    base_directory: Optional[str] = None
    application_name: Optional[str] = None
    subdirectory: Optional[str] = None
    # Overrides the resolved app-data root or the system temp root.
    root_directory: Optional[str] = None
    temp_label: Optional[str] = None
    serializer: Literal["json", "yaml"] = "json"
    key_type: Literal["str", "int", "uuid"] = "str"
    log_level: Optional[str] = None


def load_config(path: str | Path) -> StoreConfig:
    """Load a StoreConfig from a YAML file. A missing file yields defaults."""
    p = Path(path)
    if not p.exists():
        logger.debug("No store config at %s, using defaults", p)
        return StoreConfig()
    with p.open('r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Store config {p} must be a mapping")
    return StoreConfig(**data)


def _create_backend(cfg: StoreConfig, extension: str) -> StorageBackend:
    if cfg.backend == "memory":
        return MemoryStorage()
    if cfg.backend == "filesystem":
        if not cfg.base_directory:
            raise ValueError("filesystem backend requires base_directory")
        return FileStorageBackend(cfg.base_directory, extension=extension)
    if cfg.backend in ("appdata", "appdata_repository"):
        cls = AppDataRepositoryBackend if cfg.backend == "appdata_repository" else AppDataStorageBackend
        return cls(cfg.application_name or "", cfg.subdirectory, root=cfg.root_directory, extension=extension)
    return TempStorageBackend(cfg.temp_label, temp_root=cfg.root_directory, extension=extension)


def create_store(config: Optional[StoreConfig] = None, **overrides: Any) -> PersistenceStore:
    """Build a PersistenceStore from `config`, with keyword overrides applied."""
    cfg = config or StoreConfig()
    if overrides:
        cfg = StoreConfig(**{**cfg.model_dump(), **overrides})
    serializer = get_serializer(cfg.serializer)
    backend = _create_backend(cfg, serializer.file_extension)
    logger.debug("Created %s store (serializer=%s, key_type=%s)", backend.provider_name, cfg.serializer, cfg.key_type)
    return PersistenceStore(backend, serializer, KEY_TYPES[cfg.key_type])
