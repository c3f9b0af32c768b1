"""
API schemas for the artist profile and its contact entries.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from artfolio.core.database.entities.profiles import ProfileBase

_URL_PREFIXES = ("http://", "https://")


class ProfileRead(ProfileBase):
    """Schema for reading the profile; adds the picture URL to display."""

    updated_at: datetime
    profile_picture_src: str = Field(description="Profile picture URL, or a placeholder when none is set")


class ProfileUpdate(BaseModel):
    """Schema for editing the public profile."""

    name: str = Field(min_length=1, description="Name is required.")
    description: str = Field(min_length=1, description="Description is required.")
    instagram: str = Field(default="", description="Instagram URL or empty")
    email: EmailStr
    phone_number: Optional[str] = None

    @field_validator("name", "description")
    @classmethod
    def _strip_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("This field is required.")
        return value

    @field_validator("instagram")
    @classmethod
    def _instagram_url(cls, value: str) -> str:
        value = value.strip()
        if value and (not value.startswith(_URL_PREFIXES) or len(value) <= len("https://")):
            raise ValueError("Must be a valid URL (e.g., https://...)")
        return value

    @field_validator("phone_number")
    @classmethod
    def _blank_phone_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


class ContactEntry(BaseModel):
    """One way of reaching the artist, as shown in the contact dialog."""

    kind: Literal["instagram", "email", "phone"]
    label: str
    value: str
    href: Optional[str] = None
