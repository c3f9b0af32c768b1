"""
Service Dependencies.

FastAPI dependencies wiring settings, storage, the AI describer and the
services to the routers.
"""

from __future__ import annotations

from typing import Annotated, Optional

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from artfolio.ai import ArtworkDescriberBase, get_describer as _get_shared_describer
from artfolio.core.database import get_session
from artfolio.server.core.config import Settings, settings
from artfolio.storage import StorageBackend, get_storage_backend

from .gallery import GalleryService
from .profile import ProfileService

_storage: Optional[StorageBackend] = None


def get_settings() -> Settings:
    return settings


def get_storage(app_settings: Annotated[Settings, Depends(get_settings)]) -> StorageBackend:
    """Return the process-wide storage backend."""
    global _storage
    if _storage is None:
        _storage = get_storage_backend(app_settings)
    return _storage


async def close_storage() -> None:
    global _storage
    if _storage is not None:
        await _storage.close()
    _storage = None


async def get_describer(app_settings: Annotated[Settings, Depends(get_settings)]) -> ArtworkDescriberBase:
    return await _get_shared_describer(app_settings)


SettingsDep = Annotated[Settings, Depends(get_settings)]
SessionDep = Annotated[AsyncSession, Depends(get_session)]
StorageDep = Annotated[StorageBackend, Depends(get_storage)]
DescriberDep = Annotated[ArtworkDescriberBase, Depends(get_describer)]


def get_gallery_service(session: SessionDep, storage: StorageDep, app_settings: SettingsDep) -> GalleryService:
    return GalleryService(session, storage, max_upload_bytes=app_settings.max_upload_bytes)


def get_profile_service(session: SessionDep, storage: StorageDep, app_settings: SettingsDep) -> ProfileService:
    return ProfileService(session, storage, max_upload_bytes=app_settings.max_upload_bytes)


GalleryServiceDep = Annotated[GalleryService, Depends(get_gallery_service)]
ProfileServiceDep = Annotated[ProfileService, Depends(get_profile_service)]
