"""Business logic behind the API routers."""

from .gallery import GalleryService
from .profile import ProfileService, contact_entries, to_profile_read

__all__ = ["GalleryService", "ProfileService", "contact_entries", "to_profile_read"]
