"""Framework adapters implementing ``ArtworkDescriberBase``."""

from .pydantic_ai import PydanticAIDescriber

__all__ = ["PydanticAIDescriber"]
