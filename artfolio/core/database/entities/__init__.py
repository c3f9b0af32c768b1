"""SQLModel table models."""

from .artworks import Artwork, ArtworkBase
from .profiles import Profile, ProfileBase

__all__ = ["Artwork", "ArtworkBase", "Profile", "ProfileBase"]
