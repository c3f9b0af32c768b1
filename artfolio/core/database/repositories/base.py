"""
Base repository.

Session handling shared by the artwork and profile repositories.
"""

from __future__ import annotations

from typing import Generic, Optional, Type, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from ..base import utc_now

EntityType = TypeVar("EntityType", bound=SQLModel)


class AsyncBaseRepository(Generic[EntityType]):
    """Lookup by primary key and commit-and-refresh for one SQLModel table."""

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        """
        Args:
            session: Async session for database operations
            model: SQLModel entity class for this repository
        """
        self.session = session
        self.model = model

    async def get_by_id(self, entity_id: int) -> Optional[EntityType]:
        return await self.session.get(self.model, entity_id)

    async def save(self, entity: EntityType) -> EntityType:
        """Commit ``entity`` with a fresh ``updated_at`` and reload generated fields."""
        if hasattr(entity, "updated_at"):
            entity.updated_at = utc_now()
        self.session.add(entity)
        await self.session.commit()
        await self.session.refresh(entity)
        return entity
