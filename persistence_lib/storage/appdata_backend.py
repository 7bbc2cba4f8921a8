"""Per-application data directory backends.

`AppDataStorageBackend` is a FileStorageBackend rooted at the OS specific
application data directory (``%APPDATA%``, ``~/Library/Application Support``
or ``$XDG_DATA_HOME``) plus the application name and an optional
subdirectory.

`AppDataRepositoryBackend` is the degraded variant for hosts whose data
repository cannot list its contents: enumeration yields nothing, bulk clear
is a no-op and existence checks never raise.
"""
from __future__ import annotations
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .file_backend import DEFAULT_EXTENSION, FileStorageBackend

logger = logging.getLogger(__name__)


def resolve_app_data_root() -> Path:
    """Return the per-user application data root for this platform."""
    if sys.platform.startswith("win"):
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".local" / "share"


def app_data_directory(application_name: str, subdirectory: Optional[str] = None,
                       root: Optional[str | Path] = None) -> Path:
    if not application_name or not application_name.strip():
        raise ValueError("application_name cannot be empty or whitespace")
    base = Path(root) if root is not None else resolve_app_data_root()
    path = base / application_name
    if subdirectory and subdirectory.strip():
        path = path / subdirectory
    return path


class AppDataStorageBackend(FileStorageBackend):
    provider_name = "AppData"
    is_persistent = True

    def __init__(
        self,
        application_name: str,
        subdirectory: Optional[str] = None,
        root: Optional[str | Path] = None,
        extension: str = DEFAULT_EXTENSION,
    ) -> None:
        super().__init__(app_data_directory(application_name, subdirectory, root), extension)
        self.application_name = application_name
        self.subdirectory = subdirectory


class AppDataRepositoryBackend(AppDataStorageBackend):
    supports_enumeration = False

    def list_names(self) -> List[str]:
        return []

    def exists(self, name: str) -> bool:
        try:
            return super().exists(name)
        except OSError:
            logger.debug("Existence check for %s failed; reporting absent", name, exc_info=True)
            return False
