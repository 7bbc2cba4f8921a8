"""Temporary-directory storage backend.

Each instance owns a fresh directory
`<temp root>/<label or "PersistenceProvider">/<8 hex chars>`, created on
construction. Closing the backend keeps the directory and its files; only
:meth:`TempStorageBackend.cleanup_directory` deletes them.
"""
from __future__ import annotations
import logging
import shutil
import tempfile
import uuid
from pathlib import Path
from typing import Optional

from .file_backend import DEFAULT_EXTENSION, FileStorageBackend

logger = logging.getLogger(__name__)

DEFAULT_LABEL = "PersistenceProvider"


def create_temp_directory(label: Optional[str] = None, temp_root: Optional[str | Path] = None) -> Path:
    root = Path(temp_root) if temp_root is not None else Path(tempfile.gettempdir())
    path = root / (label or DEFAULT_LABEL) / uuid.uuid4().hex[:8]
    path.mkdir(parents=True, exist_ok=True)
    logger.info("Created temp storage directory %s", path)
    return path


class TempStorageBackend(FileStorageBackend):
    provider_name = "Temp"
    # The OS may purge temp directories at any time.
    is_persistent = False

    def __init__(
        self,
        label: Optional[str] = None,
        temp_root: Optional[str | Path] = None,
        extension: str = DEFAULT_EXTENSION,
    ) -> None:
        super().__init__(create_temp_directory(label, temp_root), extension)
        self.label = label or DEFAULT_LABEL

    def cleanup_directory(self) -> None:
        """Recursively delete the temp directory. Errors are ignored."""
        try:
            if self.base_directory.is_dir():
                shutil.rmtree(self.base_directory)
                logger.info("Cleaned up temp storage directory %s", self.base_directory)
        except Exception:
            logger.warning("Could not clean up %s", self.base_directory, exc_info=True)
