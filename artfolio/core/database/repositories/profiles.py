"""
Profile repository.

The profile is a singleton; ``get_or_create`` seeds it with defaults on first use.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from artfolio.core.logging_config import get_logger

from ..entities.profiles import PROFILE_ID, Profile
from .base import AsyncBaseRepository

logger = get_logger(__name__)


class ProfileRepository(AsyncBaseRepository[Profile]):
    """Repository for the artist profile."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Profile)

    async def get(self) -> Optional[Profile]:
        return await self.get_by_id(PROFILE_ID)

    async def get_or_create(self) -> Profile:
        profile = await self.get()
        if profile is not None:
            return profile
        profile = Profile(id=PROFILE_ID)
        self.session.add(profile)
        await self.session.commit()
        await self.session.refresh(profile)
        logger.info("Created default artist profile")
        return profile
