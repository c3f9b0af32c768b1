"""Unit tests for ArtworkRepository."""

from datetime import datetime, timedelta

import pytest

from artfolio.core.database.entities.artworks import Artwork
from artfolio.core.database.repositories import ArtworkRepository

pytestmark = pytest.mark.asyncio


def _artwork(title: str, **kwargs) -> Artwork:
    return Artwork(
        title=title,
        src=f"/uploads/artworks/{title}.png",
        storage_key=f"artworks/{title}.png",
        width=100,
        height=80,
        **kwargs,
    )


@pytest.fixture
def repo(in_memory_session) -> ArtworkRepository:
    return ArtworkRepository(in_memory_session)


class TestCrud:
    async def test_create_and_get(self, repo):
        created = await repo.create(_artwork("one", description="first"))

        assert created.id is not None
        assert created.created_at is not None
        fetched = await repo.get_by_id(created.id)
        assert fetched.title == "one"
        assert fetched.description == "first"

    async def test_get_missing(self, repo):
        assert await repo.get_by_id(404) is None

    async def test_update_bumps_updated_at(self, repo):
        created = await repo.create(_artwork("one"))
        before = created.updated_at

        created.title = "renamed"
        created.updated_at = before - timedelta(days=1)
        updated = await repo.update(created)

        assert updated.title == "renamed"
        assert updated.updated_at >= before

    async def test_delete(self, repo):
        created = await repo.create(_artwork("one"))

        assert await repo.delete(created.id) is True
        assert await repo.get_by_id(created.id) is None
        assert await repo.delete(created.id) is False

    async def test_save_is_shared_with_update(self, repo):
        created = await repo.create(_artwork("one"))
        created.pinned = True

        saved = await repo.save(created)

        assert saved.pinned is True
        assert (await repo.get_by_id(created.id)).pinned is True


class TestOrdering:
    async def test_list_ordered(self, repo):
        now = datetime(2024, 1, 1, 12, 0, 0)
        old = await repo.create(_artwork("old", position=0, created_at=now - timedelta(hours=1)))
        new = await repo.create(_artwork("new", position=0, created_at=now))
        top = await repo.create(_artwork("top", position=-1))
        pinned = await repo.create(_artwork("pinned", position=5, pinned=True))

        ordered = await repo.list_ordered()
        assert [a.id for a in ordered] == [pinned.id, top.id, new.id, old.id]

    async def test_min_position(self, repo):
        assert await repo.min_position() is None

        await repo.create(_artwork("a", position=3))
        await repo.create(_artwork("b", position=-2))
        assert await repo.min_position() == -2

    async def test_update_many(self, repo):
        a = await repo.create(_artwork("a", position=0))
        b = await repo.create(_artwork("b", position=1))

        a.position, b.position = 1, 0
        await repo.update_many([a, b])

        assert [x.title for x in await repo.list_ordered()] == ["b", "a"]
