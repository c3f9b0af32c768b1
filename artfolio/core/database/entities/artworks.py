"""
Artwork entity.

One row per piece shown in the gallery collage. ``storage_key`` identifies the
image in whichever storage backend received it; ``position`` and ``pinned``
drive the collage order.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field

from ..base import Base, utc_now

TITLE_MAX_LENGTH = 200
AI_HINT_MAX_LENGTH = 100


class ArtworkBase(Base):
    """Base fields for an artwork."""

    title: str = Field(
        min_length=1, max_length=TITLE_MAX_LENGTH, description="Artwork title shown as alt text and caption"
    )
    description: str = Field(default="", description="Artist or AI written description")
    src: str = Field(description="Public URL of the image")
    storage_key: str = Field(description="Backend-specific identifier used to delete the image")
    width: int = Field(ge=1, description="Image width in pixels")
    height: int = Field(ge=1, description="Image height in pixels")
    content_type: str = Field(default="image/jpeg", description="MIME type of the stored image")
    ai_hint: Optional[str] = Field(
        default=None, max_length=AI_HINT_MAX_LENGTH, description="Short keyword hint for the image"
    )
    position: int = Field(default=0, index=True, description="Ordering key within the collage")
    pinned: bool = Field(default=False, description="Pinned artworks are listed before the rest")


class Artwork(ArtworkBase, table=True):
    """Persistent artwork record."""

    __tablename__ = "artworks"

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime, nullable=False), description="Upload timestamp"
    )
    updated_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime, nullable=False), description="Last update timestamp"
    )
