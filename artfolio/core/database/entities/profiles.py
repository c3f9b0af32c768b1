"""
Artist profile entity.

The gallery has exactly one profile; it is stored as the row with ``id == 1``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field

from ..base import Base, utc_now

PROFILE_ID = 1

DEFAULT_PROFILE_NAME = "Artist Name"
DEFAULT_PROFILE_DESCRIPTION = "A short bio about the artist and their work."


class ProfileBase(Base):
    """Base fields for the artist profile."""

    name: str = Field(default=DEFAULT_PROFILE_NAME, description="Artist display name")
    description: str = Field(default=DEFAULT_PROFILE_DESCRIPTION, description="Artist bio")
    instagram: str = Field(default="", description="Instagram profile URL or empty")
    email: str = Field(default="", description="Contact email address")
    phone_number: Optional[str] = Field(default=None, description="Contact phone number")
    profile_picture_url: Optional[str] = Field(default=None, description="Public URL of the profile picture")
    profile_picture_key: Optional[str] = Field(default=None, description="Storage key of the profile picture")


class Profile(ProfileBase, table=True):
    """Persistent artist profile."""

    __tablename__ = "profiles"

    id: Optional[int] = Field(default=PROFILE_ID, primary_key=True)
    updated_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime, nullable=False), description="Last update timestamp"
    )
