"""Local filesystem storage backend."""

from __future__ import annotations

import asyncio
from pathlib import Path

from artfolio.core.errors import StorageError
from artfolio.core.logging_config import get_logger

from .base import StorageBackend, StoredFile, build_object_name

logger = get_logger(__name__)


class LocalStorageBackend(StorageBackend):
    """Stores images below a root directory served by the web app.

    Keys are paths relative to ``root`` using forward slashes; URLs are the key
    prefixed with ``url_prefix``.
    """

    name = "local"

    def __init__(self, root: str | Path, url_prefix: str = "/uploads") -> None:
        self.root = Path(root).resolve()
        self.url_prefix = url_prefix.rstrip("/")
        self.root.mkdir(parents=True, exist_ok=True)

    def _resolve(self, key: str) -> Path:
        path = (self.root / key).resolve()
        if not path.is_relative_to(self.root):
            raise StorageError(f"Refusing to access path outside storage root: {key}")
        return path

    async def save(self, data: bytes, filename: str, content_type: str, folder: str) -> StoredFile:
        key = f"{folder.strip('/')}/{build_object_name(filename)}"
        path = self._resolve(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            await asyncio.to_thread(path.write_bytes, data)
        except OSError as e:
            logger.error(f"Failed to write {path}: {e}", exc_info=True)
            raise StorageError() from e
        logger.info(f"Stored {len(data)} bytes at {key}")
        return StoredFile(key=key, url=f"{self.url_prefix}/{key}")

    async def delete(self, key: str) -> None:
        path = self._resolve(key)
        try:
            await asyncio.to_thread(path.unlink, missing_ok=True)
        except OSError as e:
            logger.error(f"Failed to delete {path}: {e}", exc_info=True)
            raise StorageError("Failed to delete the stored image.") from e
        logger.info(f"Deleted {key}")
