from typing import AsyncGenerator, Optional
from unittest.mock import patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.pool import StaticPool

from artfolio.ai import ArtworkDescriberBase, DescriberConfig, DescriptionResult
from artfolio.core.database.utils import create_all
from artfolio.storage import LocalStorageBackend

# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class FakeDescriber(ArtworkDescriberBase):
    """Describer returning a canned answer and recording what it was sent."""

    def __init__(self, content: Optional[str] = "A quiet study in red.", success: bool = True) -> None:
        super().__init__(DescriberConfig(name="fake", model="test:fake"))
        self.content = content
        self.success = success
        self.calls: list[tuple[bytes, str]] = []

    async def initialize(self) -> None:
        self._initialized = True

    async def describe(self, image: bytes, media_type: str) -> DescriptionResult:
        self.calls.append((image, media_type))
        if not self.success:
            return DescriptionResult(content=None, error="model failed", success=False)
        return DescriptionResult(content=self.content, metadata={"model": self.model})

    async def cleanup(self) -> None:
        self._initialized = False


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory database engine for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a new session for each test."""
    async_session_maker = sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

    async with async_session_maker() as session:  # type: ignore[attr-defined]
        yield session


@pytest.fixture
def storage(tmp_path) -> LocalStorageBackend:
    return LocalStorageBackend(tmp_path / "uploads", url_prefix="/uploads")


@pytest.fixture
def describer() -> FakeDescriber:
    return FakeDescriber()


@pytest_asyncio.fixture(name="client")
async def client_fixture(
    session: AsyncSession, storage: LocalStorageBackend, describer: FakeDescriber
) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with mocked lifespan and overridden dependencies."""
    from artfolio.core.database import get_session
    from artfolio.server.main import app
    from artfolio.server.services.deps import get_describer, get_storage

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_describer] = lambda: describer

    # Mock the lifespan to prevent database initialization during tests
    async def mock_lifespan(app):
        yield

    with patch("artfolio.server.main.lifespan", mock_lifespan):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
            yield client

    app.dependency_overrides.clear()
