"""
Artwork description flow.

- describe_artwork: generate a description for an image given as a data URI
- get_describer: shared, lazily initialized describer built from settings
"""

from __future__ import annotations

import asyncio
from typing import Optional

from artfolio.core.errors import DescriptionGenerationError, DescriptionUnavailableError
from artfolio.core.images import parse_data_uri
from artfolio.core.logging_config import get_logger
from artfolio.server.core.config import Settings

from .adapters import PydanticAIDescriber
from .base import ArtworkDescriberBase, DescriberConfig

logger = get_logger(__name__)

SYSTEM_PROMPT = (
    "You are an art critic with a poetic and insightful voice. Analyze the following image of an artwork. "
    "Write a short, engaging description suitable for an artist's portfolio. Focus on the mood, style, "
    "color palette, and potential themes or emotions conveyed by the piece. Answer in 2-3 sentences."
)

_describer: Optional[ArtworkDescriberBase] = None
_describer_lock = asyncio.Lock()


def build_describer(settings: Settings) -> ArtworkDescriberBase:
    ai = settings.ai
    return PydanticAIDescriber(
        DescriberConfig(
            name="describe_artwork",
            model=ai.model,
            system_prompt=SYSTEM_PROMPT,
            temperature=ai.temperature,
            timeout=ai.timeout,
        )
    )


async def get_describer(settings: Settings) -> ArtworkDescriberBase:
    """Return the shared describer, creating and initializing it on first use.

    Raises:
        DescriptionUnavailableError: If the helper is disabled or the model cannot be set up
    """
    global _describer
    if not settings.ai.enabled:
        raise DescriptionUnavailableError()
    if _describer is not None:
        return _describer
    async with _describer_lock:
        if _describer is None:
            describer = build_describer(settings)
            try:
                await describer.initialize()
            except RuntimeError as e:
                logger.error(f"AI describer unavailable: {e}")
                raise DescriptionUnavailableError() from e
            _describer = describer
    return _describer


async def reset_describer() -> None:
    """Drop the shared describer so the next call rebuilds it."""
    global _describer, _describer_lock
    if _describer is not None:
        await _describer.cleanup()
    _describer = None
    _describer_lock = asyncio.Lock()


async def describe_artwork(photo_data_uri: str, describer: ArtworkDescriberBase) -> str:
    """Generate a portfolio description for the image in ``photo_data_uri``.

    Raises:
        InvalidInputError: If the data URI is malformed
        DescriptionGenerationError: If the model failed or returned nothing
    """
    media_type, image = parse_data_uri(photo_data_uri)
    result = await describer.describe(image, media_type)
    if not result.success:
        raise DescriptionGenerationError()
    if not result.content:
        logger.warning(f"Model {describer.model} returned an empty description")
        raise DescriptionGenerationError()
    logger.info(f"Generated description ({len(result.content)} chars) with {describer.model}")
    return result.content
