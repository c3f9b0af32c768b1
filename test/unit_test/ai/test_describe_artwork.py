"""Unit tests for the artwork description flow."""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from artfolio.ai import DescriptionResult, describe_artwork, get_describer, reset_describer
from artfolio.ai.adapters import PydanticAIDescriber
from artfolio.ai.describe_artwork import SYSTEM_PROMPT, build_describer
from artfolio.core.errors import DescriptionGenerationError, DescriptionUnavailableError, InvalidInputError
from artfolio.core.images import to_data_uri
from artfolio.server.core.config import Settings

pytestmark = pytest.mark.asyncio


@pytest.fixture(autouse=True)
async def _fresh_describer():
    await reset_describer()
    yield
    await reset_describer()


def _describer(result: DescriptionResult):
    describer = AsyncMock()
    describer.model = "test:model"
    describer.describe.return_value = result
    return describer


class TestDescribeArtwork:
    async def test_returns_content(self, png_bytes):
        describer = _describer(DescriptionResult(content="Soft pastel dawn."))

        description = await describe_artwork(to_data_uri(png_bytes, "image/png"), describer)

        assert description == "Soft pastel dawn."
        describer.describe.assert_awaited_once_with(png_bytes, "image/png")

    async def test_invalid_data_uri(self):
        describer = _describer(DescriptionResult(content="unused"))

        with pytest.raises(InvalidInputError):
            await describe_artwork("data:image/png;base64", describer)
        describer.describe.assert_not_awaited()

    async def test_failed_result(self, png_bytes):
        describer = _describer(DescriptionResult(content=None, error="boom", success=False))

        with pytest.raises(DescriptionGenerationError):
            await describe_artwork(to_data_uri(png_bytes, "image/png"), describer)

    async def test_empty_result(self, png_bytes):
        describer = _describer(DescriptionResult(content=""))

        with pytest.raises(DescriptionGenerationError):
            await describe_artwork(to_data_uri(png_bytes, "image/png"), describer)


class TestSharedDescriber:
    def test_build_describer_from_settings(self):
        describer = build_describer(Settings(ai_model="test", ai_temperature=0.3, ai_timeout=12))

        assert isinstance(describer, PydanticAIDescriber)
        assert describer.config.model == "test"
        assert describer.config.temperature == 0.3
        assert describer.config.timeout == 12
        assert describer.config.system_prompt == SYSTEM_PROMPT

    async def test_disabled(self):
        with pytest.raises(DescriptionUnavailableError):
            await get_describer(Settings(ai_enabled=False))

    async def test_initialized_once(self):
        settings = Settings(ai_model="test")

        with patch("pydantic_ai.Agent") as mock_agent_cls:
            first = await get_describer(settings)
            second = await get_describer(settings)

        assert first is second
        assert first.is_initialized
        mock_agent_cls.assert_called_once()

    async def test_initialization_failure_is_unavailable(self):
        with patch("pydantic_ai.Agent", side_effect=Exception("no credentials")):
            with pytest.raises(DescriptionUnavailableError):
                await get_describer(Settings(ai_model="test"))

    async def test_reset_cleans_up(self):
        with patch("pydantic_ai.Agent"):
            describer = await get_describer(Settings(ai_model="test"))

        await reset_describer()

        assert describer.is_initialized is False

    async def test_concurrent_first_calls_build_one_describer(self):
        built = []

        def slow_describer(settings):
            describer = AsyncMock()

            async def initialize():
                await asyncio.sleep(0.01)

            describer.initialize.side_effect = initialize
            built.append(describer)
            return describer

        with patch("artfolio.ai.describe_artwork.build_describer", side_effect=slow_describer):
            first, second = await asyncio.gather(
                get_describer(Settings(ai_model="test")),
                get_describer(Settings(ai_model="test")),
            )

        assert first is second
        assert len(built) == 1
        built[0].initialize.assert_awaited_once()
