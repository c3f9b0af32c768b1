"""Storage backend abstraction.

Uploaded images live outside the database. Each backend stores raw bytes under
a folder and hands back a public URL plus a key that can later be used to
delete the object.
"""

from __future__ import annotations

import re
import time
from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel, Field

_WHITESPACE = re.compile(r"\s")


class StoredFile(BaseModel):
    """Result of a successful upload.

    Attributes:
        key: Backend identifier used for deletion (relative path, ImageKit fileId, ...)
        url: Public URL of the stored object
        width: Image width when the backend reports it
        height: Image height when the backend reports it
    """

    key: str = Field(..., description="Backend-specific identifier of the stored object")
    url: str = Field(..., description="Public URL of the stored object")
    width: Optional[int] = Field(None, ge=1)
    height: Optional[int] = Field(None, ge=1)


def sanitize_filename(filename: str) -> str:
    """Strip directory parts and replace whitespace with underscores."""
    name = filename.replace("\\", "/").rsplit("/", 1)[-1]
    name = _WHITESPACE.sub("_", name).lstrip(".")
    return name or "upload"


def build_object_name(filename: str, timestamp_ms: Optional[int] = None) -> str:
    """Name an uploaded object ``<epoch ms>-<sanitized filename>``."""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return f"{timestamp_ms}-{sanitize_filename(filename)}"


class StorageBackend(ABC):
    """Abstract base class for image storage backends.

    Subclasses must implement:
    - save(): store bytes and return a ``StoredFile``
    - delete(): remove a stored object; missing objects are not an error
    """

    name: str = "base"

    @abstractmethod
    async def save(self, data: bytes, filename: str, content_type: str, folder: str) -> StoredFile:
        """Store ``data`` under ``folder``.

        Raises:
            StorageError: If the object could not be stored
        """

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Delete the object identified by ``key``.

        Raises:
            StorageError: If the backend refused the deletion
        """

    async def close(self) -> None:
        """Release backend resources."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name})"
