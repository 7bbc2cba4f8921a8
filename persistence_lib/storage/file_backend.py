"""File-backed storage backend.

This backend stores one text file per entry under
`<base_directory>/<name><extension>` (``.json`` by default). Writes go to
`<path>.tmp` first and are then renamed over the target, so a reader sees
either the previous or the new content, never a partial file.
"""
from __future__ import annotations
import logging
import os
import shutil
import threading
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .base import StorageBackend

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".json"
TEMP_SUFFIX = ".tmp"


class FileStorageBackend(StorageBackend):
    provider_name = "FileSystem"
    is_persistent = True
    blocking_io = True

    def __init__(self, base_directory: str | Path, extension: str = DEFAULT_EXTENSION) -> None:
        if not extension.startswith("."):
            extension = "." + extension
        self.base_directory = Path(base_directory)
        self.extension = extension
        self._locks_guard = threading.Lock()
        self._locks: Dict[str, threading.Lock] = {}

    def _path_for(self, name: str) -> Path:
        return self.base_directory / f"{name}{self.extension}"

    def _lock_for(self, name: str) -> threading.Lock:
        # One writer per name within this process; the .tmp file is shared.
        with self._locks_guard:
            lock = self._locks.get(name)
            if lock is None:
                lock = self._locks[name] = threading.Lock()
            return lock

    def ensure_namespace(self) -> None:
        if not self.base_directory.is_dir():
            self.base_directory.mkdir(parents=True, exist_ok=True)
            logger.info("Created storage directory %s", self.base_directory)

    def namespace_exists(self) -> bool:
        return self.base_directory.is_dir()

    def write_text(self, name: str, content: str, checkpoint: Optional[Callable[[], None]] = None) -> None:
        path = self._path_for(name)
        tmp = path.with_name(path.name + TEMP_SUFFIX)
        with self._lock_for(name):
            with open(tmp, "w", encoding="utf-8") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            if checkpoint is not None:
                checkpoint()
            # os.replace overwrites the target in one step on POSIX and Windows.
            tmp.replace(path)
        logger.debug("Wrote %s (%d chars)", path, len(content))

    def read_text(self, name: str) -> Optional[str]:
        path = self._path_for(name)
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError:
            return None

    def exists(self, name: str) -> bool:
        return self._path_for(name).is_file()

    def delete_text(self, name: str) -> bool:
        path = self._path_for(name)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        logger.debug("Deleted %s", path)
        return True

    def list_names(self) -> List[str]:
        if not self.base_directory.is_dir():
            return []
        ext = self.extension
        names = []
        for p in self.base_directory.iterdir():
            # Non-recursive; `<name>.json.tmp` leftovers do not match. The
            # empty key is stored as `.json` and lists as "".
            if p.name.endswith(ext) and p.is_file():
                names.append(p.name[: -len(ext)])
        return names

    def delete_namespace(self, recursive: bool = True) -> None:
        if recursive:
            shutil.rmtree(self.base_directory)
        else:
            self.base_directory.rmdir()
        logger.info("Removed storage directory %s", self.base_directory)
