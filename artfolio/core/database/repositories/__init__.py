"""Repositories for the database layer."""

from .artworks import ArtworkRepository
from .base import AsyncBaseRepository
from .profiles import ProfileRepository

__all__ = ["ArtworkRepository", "AsyncBaseRepository", "ProfileRepository"]
