"""
Gallery service.

Business logic behind the collage: listing, uploading, editing, deleting and
reordering artworks. Image bytes go to the configured storage backend, metadata
to the database.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from artfolio.core.database.entities.artworks import AI_HINT_MAX_LENGTH, TITLE_MAX_LENGTH, Artwork
from artfolio.core.database.repositories import ArtworkRepository
from artfolio.core.errors import ArtworkNotFoundError, InvalidInputError, StorageError
from artfolio.core.logging_config import get_logger
from artfolio.core.models.io.artworks import ArtworkUpdate
from artfolio.server.core.constant import ARTWORKS_FOLDER
from artfolio.storage import StorageBackend

from .ordering import apply_order, array_move
from .uploads import validate_image_upload

logger = get_logger(__name__)

DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024


class GalleryService:
    """Service for managing the artworks shown in the collage."""

    def __init__(
        self,
        session: AsyncSession,
        storage: StorageBackend,
        max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
    ) -> None:
        self.session = session
        self.storage = storage
        self.max_upload_bytes = max_upload_bytes
        self.artworks = ArtworkRepository(session)

    async def list_artworks(self) -> List[Artwork]:
        return await self.artworks.list_ordered()

    async def get_artwork(self, artwork_id: int) -> Artwork:
        artwork = await self.artworks.get_by_id(artwork_id)
        if artwork is None:
            raise ArtworkNotFoundError(artwork_id)
        return artwork

    async def upload_artwork(
        self,
        data: Optional[bytes],
        filename: str,
        content_type: Optional[str],
        title: str,
        description: str = "",
        ai_hint: Optional[str] = None,
    ) -> Artwork:
        """
        Store a new artwork and put it at the top of the unpinned collage.

        Args:
            data: Raw file bytes
            filename: Original file name, used to name the stored object
            content_type: MIME type sent by the client
            title: Artwork title, required
            description: Optional description
            ai_hint: Optional short keyword hint

        Returns:
            The persisted Artwork

        Raises:
            InvalidInputError: Missing file, blank or over-long title, over-long hint, or not an image
            PayloadTooLargeError: File above the upload limit
            StorageError: The storage backend failed
        """
        title = (title or "").strip()
        if not title:
            raise InvalidInputError("Please enter a title for the artwork.")
        if len(title) > TITLE_MAX_LENGTH:
            raise InvalidInputError(f"Title must be at most {TITLE_MAX_LENGTH} characters.")
        ai_hint = (ai_hint or "").strip() or None
        if ai_hint is not None and len(ai_hint) > AI_HINT_MAX_LENGTH:
            raise InvalidInputError(f"AI hint must be at most {AI_HINT_MAX_LENGTH} characters.")
        info = validate_image_upload(data, content_type, self.max_upload_bytes)

        stored = await self.storage.save(data, filename, info.content_type, ARTWORKS_FOLDER)

        min_position = await self.artworks.min_position()
        artwork = Artwork(
            title=title,
            description=(description or "").strip(),
            src=stored.url,
            storage_key=stored.key,
            width=stored.width or info.width,
            height=stored.height or info.height,
            content_type=info.content_type,
            ai_hint=ai_hint,
            position=0 if min_position is None else min_position - 1,
        )
        try:
            artwork = await self.artworks.create(artwork)
        except SQLAlchemyError:
            logger.error(f"Saving artwork '{title}' failed, removing stored file {stored.key}", exc_info=True)
            await self.session.rollback()
            await self.storage.delete(stored.key)
            raise

        logger.info(f"Uploaded artwork {artwork.id} '{artwork.title}' ({artwork.width}x{artwork.height})")
        return artwork

    async def update_artwork(self, artwork_id: int, update: ArtworkUpdate) -> Artwork:
        artwork = await self.get_artwork(artwork_id)
        update_data = update.model_dump(exclude_unset=True)
        if "title" in update_data and update_data["title"] is None:
            raise InvalidInputError("Title cannot be empty.")
        for key, value in update_data.items():
            if key in ("description", "pinned") and value is None:
                continue
            setattr(artwork, key, value)
        artwork = await self.artworks.update(artwork)
        logger.info(f"Updated artwork {artwork_id}: {sorted(update_data)}")
        return artwork

    async def delete_artwork(self, artwork_id: int) -> None:
        """
        Delete an artwork and its stored image.

        The record is kept when the storage backend refuses the deletion.

        Raises:
            ArtworkNotFoundError: Unknown id
            StorageError: The stored image could not be deleted
        """
        artwork = await self.get_artwork(artwork_id)
        try:
            await self.storage.delete(artwork.storage_key)
        except StorageError:
            logger.error(f"Keeping artwork {artwork_id}: stored image {artwork.storage_key} could not be deleted")
            raise
        await self.artworks.delete(artwork_id)
        logger.info(f"Deleted artwork {artwork_id} '{artwork.title}'")

    async def reorder(self, ids: List[int]) -> List[Artwork]:
        """Persist a complete collage order given as artwork ids."""
        current = await self.artworks.list_ordered()
        ordered = apply_order(current, ids)
        await self.artworks.update_many(ordered)
        logger.info(f"Reordered {len(ordered)} artworks")
        return await self.artworks.list_ordered()

    async def move_artwork(self, artwork_id: int, to_index: int) -> List[Artwork]:
        """Move one artwork to ``to_index`` in the current order and renumber positions."""
        current = await self.artworks.list_ordered()
        ids = [artwork.id for artwork in current]
        if artwork_id not in ids:
            raise ArtworkNotFoundError(artwork_id)
        moved = array_move(ids, ids.index(artwork_id), to_index)
        ordered = apply_order(current, moved)
        await self.artworks.update_many(ordered)
        logger.info(f"Moved artwork {artwork_id} to index {to_index}")
        return await self.artworks.list_ordered()
