"""
API endpoints for gallery artworks.

Listing is public; uploading, editing, deleting and reordering require the
admin key.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from artfolio.core.logging_config import get_logger
from artfolio.core.models.io.artworks import ArtworkMove, ArtworkOrder, ArtworkRead, ArtworkUpdate
from artfolio.server.core.security import require_admin
from artfolio.server.services.deps import GalleryServiceDep

logger = get_logger(__name__)

router = APIRouter(tags=["artworks"])


@router.get(
    "",
    response_model=list[ArtworkRead],
    summary="List Artworks",
    description="Retrieve every artwork in collage order: pinned artworks first, then by position.",
)
async def list_artworks(gallery: GalleryServiceDep) -> list[ArtworkRead]:
    artworks = await gallery.list_artworks()
    logger.debug(f"Listing {len(artworks)} artworks")
    return [ArtworkRead.model_validate(artwork) for artwork in artworks]


@router.post(
    "",
    response_model=ArtworkRead,
    status_code=status.HTTP_201_CREATED,
    summary="Upload Artwork",
    description="Upload an image with a title and optional description. The new artwork appears first.",
    responses={
        201: {"description": "Artwork uploaded"},
        400: {"description": "Missing file, blank title or not an image"},
        413: {"description": "File too large"},
        502: {"description": "Storage backend failure"},
    },
    dependencies=[Depends(require_admin)],
)
async def upload_artwork(
    gallery: GalleryServiceDep,
    file: Optional[UploadFile] = File(None, description="Image file"),
    title: str = Form("", description="Artwork title"),
    description: str = Form("", description="Artwork description"),
    ai_hint: Optional[str] = Form(None, description="Short keyword hint"),
) -> ArtworkRead:
    """
    Upload a new artwork.

    - **file**: The image (any ``image/*`` type Pillow can read).
    - **title**: Required, surrounding whitespace is ignored.
    - **description**: Optional, may come from the AI description helper.
    """
    data = await file.read() if file is not None else None
    artwork = await gallery.upload_artwork(
        data=data,
        filename=(file.filename if file is not None else None) or "artwork",
        content_type=file.content_type if file is not None else None,
        title=title,
        description=description,
        ai_hint=ai_hint,
    )
    return ArtworkRead.model_validate(artwork)


@router.put(
    "/order",
    response_model=list[ArtworkRead],
    summary="Reorder Artworks",
    description="Persist the collage order after a drag and drop. The list must contain every artwork id once.",
    responses={400: {"description": "Ids are not a permutation of the current artworks"}},
    dependencies=[Depends(require_admin)],
)
async def reorder_artworks(order: ArtworkOrder, gallery: GalleryServiceDep) -> list[ArtworkRead]:
    artworks = await gallery.reorder(order.ids)
    return [ArtworkRead.model_validate(artwork) for artwork in artworks]


@router.get(
    "/{artwork_id}",
    response_model=ArtworkRead,
    summary="Get Artwork",
    responses={404: {"description": "Artwork not found"}},
)
async def get_artwork(artwork_id: int, gallery: GalleryServiceDep) -> ArtworkRead:
    return ArtworkRead.model_validate(await gallery.get_artwork(artwork_id))


@router.patch(
    "/{artwork_id}",
    response_model=ArtworkRead,
    summary="Update Artwork",
    description="Partially update an artwork: edit its title or description, or pin / unpin it.",
    responses={404: {"description": "Artwork not found"}},
    dependencies=[Depends(require_admin)],
)
async def update_artwork(artwork_id: int, update: ArtworkUpdate, gallery: GalleryServiceDep) -> ArtworkRead:
    return ArtworkRead.model_validate(await gallery.update_artwork(artwork_id, update))


@router.post(
    "/{artwork_id}/move",
    response_model=list[ArtworkRead],
    summary="Move Artwork",
    description="Move one artwork to a new index in the current collage order.",
    responses={400: {"description": "Index out of range"}, 404: {"description": "Artwork not found"}},
    dependencies=[Depends(require_admin)],
)
async def move_artwork(artwork_id: int, move: ArtworkMove, gallery: GalleryServiceDep) -> list[ArtworkRead]:
    artworks = await gallery.move_artwork(artwork_id, move.to_index)
    return [ArtworkRead.model_validate(artwork) for artwork in artworks]


@router.delete(
    "/{artwork_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Artwork",
    description="Delete an artwork and its stored image.",
    responses={
        204: {"description": "Artwork deleted"},
        404: {"description": "Artwork not found"},
        502: {"description": "Stored image could not be deleted; the artwork is kept"},
    },
    dependencies=[Depends(require_admin)],
)
async def delete_artwork(artwork_id: int, gallery: GalleryServiceDep) -> None:
    await gallery.delete_artwork(artwork_id)
