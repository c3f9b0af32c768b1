"""Unit tests for database engine helpers."""

import pytest
from sqlalchemy import inspect

from artfolio.core.database.utils import create_all, create_engine, create_sessionmaker


@pytest.mark.parametrize(
    "url",
    [
        "postgres://user:pw@db:5432/artfolio",
        "postgresql://user:pw@db:5432/artfolio",
        "postgresql+psycopg://user:pw@db:5432/artfolio",
    ],
)
def test_postgres_urls_use_asyncpg(url):
    engine = create_engine(url)
    assert engine.url.drivername == "postgresql+asyncpg"
    assert engine.url.database == "artfolio"


def test_sqlite_url_unchanged():
    engine = create_engine("sqlite+aiosqlite:///./artfolio.db")
    assert engine.url.drivername == "sqlite+aiosqlite"


def test_sessionmaker_keeps_objects_after_commit():
    maker = create_sessionmaker(create_engine("sqlite+aiosqlite:///:memory:"))
    assert maker.kw["expire_on_commit"] is False


@pytest.mark.asyncio
async def test_create_all_creates_tables():
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    try:
        await create_all(engine)
        async with engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        assert {"artworks", "profiles"} <= set(tables)
    finally:
        await engine.dispose()
