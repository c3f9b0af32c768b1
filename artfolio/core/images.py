"""
Image inspection and data URI helpers.

Pillow reads the dimensions the collage needs for its layout; data URIs carry
images to the description model.
"""

from __future__ import annotations

import base64
import binascii
import io
import re
from typing import NamedTuple

from PIL import Image, UnidentifiedImageError

from artfolio.core.errors import InvalidInputError

_DATA_URI = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)(?P<params>(?:;[\w.+-]+=[\w.+-]+)*);base64,(?P<data>.*)$", re.S)


class ImageInfo(NamedTuple):
    width: int
    height: int
    format: str
    content_type: str


def inspect_image(data: bytes) -> ImageInfo:
    """Read the size and format of an encoded image.

    Raises:
        InvalidInputError: If Pillow cannot identify the data as an image
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            width, height = img.size
            fmt = img.format or "UNKNOWN"
            content_type = Image.MIME.get(fmt, "application/octet-stream")
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise InvalidInputError("File is not a valid image.") from e
    if width < 1 or height < 1:
        raise InvalidInputError("File is not a valid image.")
    return ImageInfo(width=width, height=height, format=fmt, content_type=content_type)


def parse_data_uri(uri: str) -> tuple[str, bytes]:
    """Split ``data:<mime>;base64,<payload>`` into its MIME type and decoded bytes.

    Raises:
        InvalidInputError: If the URI is malformed, not base64, not an image or empty
    """
    match = _DATA_URI.match(uri.strip())
    if match is None:
        raise InvalidInputError("Expected a base64 data URI: 'data:<mimetype>;base64,<encoded_data>'.")
    mime_type = match.group("mime").lower()
    if not mime_type.startswith("image/"):
        raise InvalidInputError(f"Unsupported media type: {mime_type}")
    try:
        data = base64.b64decode(match.group("data"), validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidInputError("Data URI payload is not valid base64.") from e
    if not data:
        raise InvalidInputError("Data URI payload is empty.")
    return mime_type, data


def to_data_uri(data: bytes, mime_type: str) -> str:
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"
