"""
Collage ordering helpers.

The page reorders artworks by dragging one tile onto another index; the server
mirrors that with ``array_move`` and persists the result as ``position``
values. Pinned artworks always come first.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Sequence, Tuple, TypeVar

from artfolio.core.database.entities.artworks import Artwork
from artfolio.core.errors import InvalidInputError

T = TypeVar("T")


def array_move(items: Sequence[T], from_index: int, to_index: int) -> List[T]:
    """Return a copy of ``items`` with the element at ``from_index`` moved to ``to_index``.

    Raises:
        InvalidInputError: If either index is outside the list
    """
    size = len(items)
    if not 0 <= from_index < size or not 0 <= to_index < size:
        raise InvalidInputError(f"Index out of range for a list of {size} artworks.")
    moved = list(items)
    moved.insert(to_index, moved.pop(from_index))
    return moved


def sort_key(artwork: Artwork) -> Tuple[int, int, float, int]:
    """Pinned first, then ascending position, then newest upload first."""
    created = artwork.created_at or datetime.min
    return (
        0 if artwork.pinned else 1,
        artwork.position,
        -(created - datetime.min).total_seconds(),
        -(artwork.id or 0),
    )


def sort_artworks(artworks: Sequence[Artwork]) -> List[Artwork]:
    return sorted(artworks, key=sort_key)


def apply_order(artworks: Sequence[Artwork], ids: Sequence[int]) -> List[Artwork]:
    """Assign ``position = index`` following ``ids``.

    ``ids`` must name every artwork exactly once and keep pinned artworks ahead
    of unpinned ones, since the collage always lists pinned artworks first.

    Returns:
        The artworks in their new order

    Raises:
        InvalidInputError: If ``ids`` has duplicates, unknown ids, misses artworks
            or places an unpinned artwork before a pinned one
    """
    by_id = {artwork.id: artwork for artwork in artworks}
    if len(set(ids)) != len(ids):
        raise InvalidInputError("Order contains duplicate artwork ids.")
    unknown = [artwork_id for artwork_id in ids if artwork_id not in by_id]
    if unknown:
        raise InvalidInputError(f"Unknown artwork ids: {unknown}")
    missing = sorted(set(by_id) - set(ids))
    if missing:
        raise InvalidInputError(f"Order is missing artwork ids: {missing}")

    ordered = [by_id[artwork_id] for artwork_id in ids]
    pinned_flags = [artwork.pinned for artwork in ordered]
    if pinned_flags != sorted(pinned_flags, reverse=True):
        raise InvalidInputError("Pinned artworks must stay before unpinned ones.")
    for index, artwork in enumerate(ordered):
        artwork.position = index
    return ordered
