"""Unit tests for ProfileRepository."""

import pytest

from artfolio.core.database.entities.profiles import (
    DEFAULT_PROFILE_DESCRIPTION,
    DEFAULT_PROFILE_NAME,
    PROFILE_ID,
)
from artfolio.core.database.repositories import ProfileRepository

pytestmark = pytest.mark.asyncio


async def test_get_returns_none_before_seeding(in_memory_session):
    assert await ProfileRepository(in_memory_session).get() is None


async def test_get_or_create_seeds_defaults(in_memory_session):
    repo = ProfileRepository(in_memory_session)

    profile = await repo.get_or_create()
    assert profile.id == PROFILE_ID
    assert profile.name == DEFAULT_PROFILE_NAME
    assert profile.description == DEFAULT_PROFILE_DESCRIPTION
    assert profile.instagram == ""
    assert profile.phone_number is None

    again = await repo.get_or_create()
    assert again.id == profile.id


async def test_save(in_memory_session):
    repo = ProfileRepository(in_memory_session)
    profile = await repo.get_or_create()

    profile.name = "Mira"
    await repo.save(profile)

    assert (await repo.get()).name == "Mira"
