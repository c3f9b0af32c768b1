"""Pydantic AI describer.

Sends the artwork image to a multimodal model through a pydantic-ai ``Agent``
with a structured ``ArtworkDescription`` output.
"""

from typing import Any, Dict

from artfolio.core.logging_config import get_logger
from artfolio.core.models.io.descriptions import ArtworkDescription

from ..base import ArtworkDescriberBase, DescriberConfig, DescriptionResult

logger = get_logger(__name__)

DESCRIBE_INSTRUCTION = "Describe this artwork for the portfolio."


class PydanticAIDescriber(ArtworkDescriberBase):
    """Describer backed by a pydantic-ai ``Agent``.

    Attributes:
        _agent: The underlying pydantic-ai agent, created by ``initialize``
    """

    def __init__(self, config: DescriberConfig) -> None:
        super().__init__(config)
        self._agent = None

    def build_init_kwargs(self) -> Dict[str, Any]:
        """Build the keyword arguments for the pydantic-ai ``Agent`` constructor."""
        kwargs: Dict[str, Any] = {
            "model": self._config.model,
            "output_type": ArtworkDescription,
        }
        if self._config.system_prompt:
            kwargs["system_prompt"] = self._config.system_prompt

        model_settings: Dict[str, Any] = {"temperature": self._config.temperature}
        if self._config.max_tokens is not None:
            model_settings["max_tokens"] = self._config.max_tokens
        if self._config.timeout is not None:
            model_settings["timeout"] = self._config.timeout
        kwargs["model_settings"] = model_settings

        if self._config.metadata:
            kwargs.update(self._config.metadata)

        logger.debug(f"Built initialization kwargs for {self._config.name}: {list(kwargs.keys())}")
        return kwargs

    async def initialize(self) -> None:
        """Create the pydantic-ai agent.

        Raises:
            RuntimeError: If pydantic-ai is missing or the model cannot be set up
        """
        try:
            from pydantic_ai import Agent

            logger.debug(f"Initializing describer {self._config.name} with model {self._config.model}")
            self._agent = Agent(**self.build_init_kwargs())
            self._initialized = True
        except ImportError as e:
            raise RuntimeError("Pydantic AI is not installed. Install it with: pip install pydantic-ai") from e
        except Exception as e:
            raise RuntimeError(f"Failed to initialize describer: {e}") from e

    async def describe(self, image: bytes, media_type: str) -> DescriptionResult:
        if not self._initialized or self._agent is None:
            raise RuntimeError("Describer not initialized. Call initialize() first.")

        from pydantic_ai import BinaryContent

        try:
            logger.debug(f"Requesting description from {self._config.model} for {len(image)} bytes of {media_type}")
            result = await self._agent.run(
                [DESCRIBE_INSTRUCTION, BinaryContent(data=image, media_type=media_type)],
            )

            output = result.output
            content = output.description if isinstance(output, ArtworkDescription) else str(output)

            metadata: Dict[str, Any] = {"model": self._config.model, "framework": "pydantic_ai"}
            usage = getattr(result, "usage", None)
            if callable(usage):
                usage = usage()
            if usage is not None:
                metadata["usage"] = {
                    "input_tokens": getattr(usage, "input_tokens", None),
                    "output_tokens": getattr(usage, "output_tokens", None),
                }

            return DescriptionResult(content=content.strip(), metadata=metadata, success=True)

        except Exception as e:
            logger.error(f"Description request failed: {self._config.name}: {e}", exc_info=True)
            return DescriptionResult(content=None, error=str(e), success=False)

    async def cleanup(self) -> None:
        logger.debug(f"Cleaning up describer: {self._config.name}")
        self._agent = None
        self._initialized = False
