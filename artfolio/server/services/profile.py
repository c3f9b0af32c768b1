"""
Profile service.

Reads and edits the artist header: name, bio, contact details and profile
picture.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from artfolio.core.database.entities.profiles import Profile
from artfolio.core.database.repositories import ProfileRepository
from artfolio.core.errors import StorageError
from artfolio.core.logging_config import get_logger
from artfolio.core.models.io.profiles import ContactEntry, ProfileRead, ProfileUpdate
from artfolio.server.core.constant import PLACEHOLDER_PROFILE_PICTURE, PROFILE_FOLDER
from artfolio.storage import StorageBackend

from .gallery import DEFAULT_MAX_UPLOAD_BYTES
from .uploads import validate_image_upload

logger = get_logger(__name__)


def to_profile_read(profile: Profile) -> ProfileRead:
    data = profile.model_dump()
    data["profile_picture_src"] = profile.profile_picture_url or PLACEHOLDER_PROFILE_PICTURE
    return ProfileRead.model_validate(data)


def contact_entries(profile: Profile) -> List[ContactEntry]:
    """Contact options for the "Contact Me" dialog, skipping the ones not filled in."""
    entries: List[ContactEntry] = []
    if profile.instagram:
        entries.append(
            ContactEntry(kind="instagram", label="Instagram", value="View Profile", href=profile.instagram)
        )
    if profile.email:
        entries.append(ContactEntry(kind="email", label="Email", value=profile.email, href=f"mailto:{profile.email}"))
    if profile.phone_number:
        tel = "".join(ch for ch in profile.phone_number if ch.isdigit() or ch == "+")
        entries.append(
            ContactEntry(kind="phone", label="Phone Number", value=profile.phone_number, href=f"tel:{tel}" if tel else None)
        )
    return entries


class ProfileService:
    """Service for the singleton artist profile."""

    def __init__(
        self,
        session: AsyncSession,
        storage: StorageBackend,
        max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
    ) -> None:
        self.session = session
        self.storage = storage
        self.max_upload_bytes = max_upload_bytes
        self.profiles = ProfileRepository(session)

    async def get_profile(self) -> Profile:
        return await self.profiles.get_or_create()

    async def update_profile(self, update: ProfileUpdate) -> Profile:
        profile = await self.profiles.get_or_create()
        for key, value in update.model_dump().items():
            setattr(profile, key, value)
        profile = await self.profiles.save(profile)
        logger.info("Profile updated")
        return profile

    async def upload_profile_picture(
        self,
        data: Optional[bytes],
        filename: str,
        content_type: Optional[str],
    ) -> Profile:
        """
        Replace the profile picture.

        The previous picture is removed from storage; failing to remove it is
        logged and does not undo the change.
        """
        info = validate_image_upload(data, content_type, self.max_upload_bytes)
        stored = await self.storage.save(data, filename, info.content_type, PROFILE_FOLDER)

        profile = await self.profiles.get_or_create()
        previous_key = profile.profile_picture_key
        profile.profile_picture_url = stored.url
        profile.profile_picture_key = stored.key
        profile = await self.profiles.save(profile)
        logger.info(f"Profile picture replaced with {stored.key}")

        if previous_key and previous_key != stored.key:
            try:
                await self.storage.delete(previous_key)
            except StorageError as e:
                logger.warning(f"Could not delete previous profile picture {previous_key}: {e.message}")
        return profile
