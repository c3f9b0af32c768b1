"""Storage backend selection."""

from __future__ import annotations

from artfolio.core.logging_config import get_logger
from artfolio.server.core.config import Settings

from .base import StorageBackend
from .imagekit import ImageKitStorageBackend
from .local import LocalStorageBackend

logger = get_logger(__name__)


def get_storage_backend(settings: Settings) -> StorageBackend:
    """Build the storage backend named by ``ARTFOLIO_STORAGE_BACKEND``.

    Raises:
        ValueError: If the backend name is unknown
        StorageError: If the selected backend is missing credentials
    """
    name = settings.storage_backend
    if name == "local":
        local = settings.local_storage
        backend: StorageBackend = LocalStorageBackend(local.upload_dir, local.url_prefix)
    elif name == "imagekit":
        backend = ImageKitStorageBackend(settings.imagekit)
    else:
        raise ValueError(f"Unknown storage backend: {name}")
    logger.info(f"Using {backend!r} for image storage")
    return backend
