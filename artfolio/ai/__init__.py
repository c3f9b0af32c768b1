"""AI-generated artwork descriptions."""

from .base import ArtworkDescriberBase, DescriberConfig, DescriptionResult
from .describe_artwork import describe_artwork, get_describer, reset_describer

__all__ = [
    "ArtworkDescriberBase",
    "DescriberConfig",
    "DescriptionResult",
    "describe_artwork",
    "get_describer",
    "reset_describer",
]
