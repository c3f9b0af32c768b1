"""Base abstraction for artwork describers.

This module defines the interface every description backend implements, so the
rest of the application never depends on a particular AI framework.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class DescriberConfig(BaseModel):
    """Configuration for initializing a describer.

    Attributes:
        name: Identifier used in logs
        model: The LLM model identifier (e.g., 'google-gla:gemini-2.0-flash')
        system_prompt: Instructions for the model
        temperature: Sampling temperature
        max_tokens: Maximum tokens for the response
        timeout: Request timeout in seconds
        metadata: Additional framework-specific constructor arguments
    """

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    name: str = Field(..., description="Identifier of the describer instance")
    model: str = Field(..., description="The LLM model identifier")
    system_prompt: Optional[str] = Field(None, description="System prompt/instructions for the model")
    temperature: float = Field(default=0.8, ge=0.0, le=2.0, description="Model temperature")
    max_tokens: Optional[int] = Field(None, ge=1, description="Maximum tokens for response generation")
    timeout: Optional[float] = Field(None, description="Request timeout in seconds")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Additional framework-specific configuration")


class DescriptionResult(BaseModel):
    """Outcome of a description request.

    Attributes:
        content: The generated description, None on failure
        metadata: Model name, token usage and similar details
        error: Error message if the request failed
        success: Whether the request was successful
    """

    content: Optional[str] = Field(None, description="Generated description")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Additional response metadata")
    error: Optional[str] = Field(None, description="Error message if the request failed")
    success: bool = Field(default=True, description="Whether the request was successful")


class ArtworkDescriberBase(ABC):
    """Abstract base class for artwork describers.

    Subclasses must implement:
    - initialize(): Set up the underlying model client
    - describe(): Produce a description for one image
    - cleanup(): Release resources
    """

    def __init__(self, config: DescriberConfig) -> None:
        self._config = config
        self._initialized = False

    @property
    def config(self) -> DescriberConfig:
        return self._config

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def model(self) -> str:
        return self._config.model

    @abstractmethod
    async def initialize(self) -> None:
        """Prepare the describer for use.

        Raises:
            RuntimeError: If initialization fails
        """

    @abstractmethod
    async def describe(self, image: bytes, media_type: str) -> DescriptionResult:
        """Describe an artwork image.

        Args:
            image: Encoded image bytes
            media_type: MIME type of ``image``

        Returns:
            DescriptionResult, with ``success=False`` when the model call failed
        """

    @abstractmethod
    async def cleanup(self) -> None:
        """Release held resources."""

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.cleanup()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._config.name}, model={self._config.model})"
