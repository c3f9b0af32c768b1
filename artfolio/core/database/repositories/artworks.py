"""
Artwork repository.

Data access for the gallery's artworks, including the collage ordering query.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from ..base import utc_now
from ..entities.artworks import Artwork
from .base import AsyncBaseRepository


class ArtworkRepository(AsyncBaseRepository[Artwork]):
    """Repository for artwork data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Artwork)

    async def create(self, entity: Artwork) -> Artwork:
        self.session.add(entity)
        await self.session.commit()
        await self.session.refresh(entity)
        return entity

    async def update(self, entity: Artwork) -> Artwork:
        return await self.save(entity)

    async def update_many(self, entities: Sequence[Artwork]) -> None:
        """Persist several modified artworks in one transaction."""
        now = utc_now()
        for entity in entities:
            entity.updated_at = now
            self.session.add(entity)
        await self.session.commit()

    async def delete(self, entity_id: int) -> bool:
        artwork = await self.get_by_id(entity_id)
        if artwork is None:
            return False
        await self.session.delete(artwork)
        await self.session.commit()
        return True

    async def list_ordered(self) -> List[Artwork]:
        """List artworks in collage order: pinned first, then by position, newest first on ties."""
        stmt = select(Artwork).order_by(
            col(Artwork.pinned).desc(),
            col(Artwork.position).asc(),
            col(Artwork.created_at).desc(),
            col(Artwork.id).desc(),
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def min_position(self) -> Optional[int]:
        """Smallest position in use, or None for an empty gallery."""
        result = await self.session.execute(select(func.min(Artwork.position)))
        return result.scalar()
