"""Pluggable image storage backends."""

from .base import StorageBackend, StoredFile, build_object_name, sanitize_filename
from .factory import get_storage_backend
from .imagekit import ImageKitStorageBackend
from .local import LocalStorageBackend

__all__ = [
    "ImageKitStorageBackend",
    "LocalStorageBackend",
    "StorageBackend",
    "StoredFile",
    "build_object_name",
    "get_storage_backend",
    "sanitize_filename",
]
