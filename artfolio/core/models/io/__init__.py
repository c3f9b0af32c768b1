"""Request and response schemas for the HTTP API."""

from .artworks import ArtworkMove, ArtworkOrder, ArtworkRead, ArtworkUpdate
from .common import ActionResult
from .descriptions import ArtworkDescription, DescribeArtworkRequest, DescribeArtworkResponse
from .profiles import ContactEntry, ProfileRead, ProfileUpdate

__all__ = [
    "ActionResult",
    "ArtworkDescription",
    "ArtworkMove",
    "ArtworkOrder",
    "ArtworkRead",
    "ArtworkUpdate",
    "ContactEntry",
    "DescribeArtworkRequest",
    "DescribeArtworkResponse",
    "ProfileRead",
    "ProfileUpdate",
]
