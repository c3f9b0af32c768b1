"""
Validation shared by the upload flows.
"""

from __future__ import annotations

from typing import Optional

from artfolio.core.errors import InvalidInputError, PayloadTooLargeError
from artfolio.core.images import ImageInfo, inspect_image

KB = 1024
MB = 1024 * KB


def format_size(num_bytes: int) -> str:
    """Human readable size, e.g. ``"10 MB"``, ``"1.5 KB"`` or ``"10 bytes"``."""
    if num_bytes >= MB:
        return f"{round(num_bytes / MB, 1):g} MB"
    if num_bytes >= KB:
        return f"{round(num_bytes / KB, 1):g} KB"
    return f"{num_bytes} bytes"


def validate_image_upload(
    data: Optional[bytes],
    content_type: Optional[str],
    max_bytes: int,
) -> ImageInfo:
    """Check an uploaded file and return its image information.

    Raises:
        InvalidInputError: If no file was sent, it is not an image or cannot be decoded
        PayloadTooLargeError: If the file exceeds ``max_bytes``
    """
    if not data:
        raise InvalidInputError("No file provided.")
    if len(data) > max_bytes:
        raise PayloadTooLargeError(f"File is too large (limit {format_size(max_bytes)}).")
    if content_type and not content_type.lower().startswith("image/"):
        raise InvalidInputError("Only image files can be uploaded.")
    return inspect_image(data)
