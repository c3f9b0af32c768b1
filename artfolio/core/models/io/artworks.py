"""
API schemas for artworks.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from artfolio.core.database.entities.artworks import AI_HINT_MAX_LENGTH, TITLE_MAX_LENGTH, ArtworkBase


class ArtworkRead(ArtworkBase):
    """Schema for reading an artwork."""

    id: int
    created_at: datetime
    updated_at: datetime


class ArtworkUpdate(BaseModel):
    """Schema for partially updating an artwork. Only provided fields change."""

    title: Optional[str] = Field(default=None, max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = None
    ai_hint: Optional[str] = Field(default=None, max_length=AI_HINT_MAX_LENGTH)
    pinned: Optional[bool] = None

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        value = value.strip()
        if not value:
            raise ValueError("Title cannot be empty.")
        return value


class ArtworkOrder(BaseModel):
    """Complete collage order as a list of artwork ids."""

    ids: list[int] = Field(description="Every artwork id, in the desired order")


class ArtworkMove(BaseModel):
    """Move a single artwork to a new index in the collage."""

    to_index: int = Field(ge=0, description="Target index in the current collage order")
