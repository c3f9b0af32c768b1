from __future__ import annotations

import io
import os
import tempfile
from pathlib import Path
from typing import Iterable

import httpx
import pytest
from dotenv import load_dotenv

TEST_ROOT = Path(__file__).resolve().parent

# Load test/.env if present so fixtures can read overrides via os.getenv
load_dotenv(TEST_ROOT / ".env", override=False)

# Settings are read at import time, so the test environment must be in place
# before anything from artfolio is imported.
TEST_ADMIN_KEY = "test-admin-key"
TEST_UPLOAD_DIR = tempfile.mkdtemp(prefix="artfolio-uploads-")

os.environ["ARTFOLIO_DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ARTFOLIO_ADMIN_SECRET_KEY"] = TEST_ADMIN_KEY
os.environ["ARTFOLIO_STORAGE_BACKEND"] = "local"
os.environ["ARTFOLIO_UPLOAD_DIR"] = TEST_UPLOAD_DIR
os.environ["ARTFOLIO_LOG_FILE_ENABLED"] = "false"


@pytest.fixture(autouse=True)
def _global_offline_http_guard(monkeypatch: pytest.MonkeyPatch):
    allowed_prefixes: Iterable[str] = (
        "http://mock",
        "https://mock",
        "http://localhost",
        "http://127.0.0.1",
        "http://0.0.0.0",
        "/",  # Allow relative paths (used by ASGI transport)
    )

    orig_sync = httpx._client.Client.request
    orig_async = httpx._client.AsyncClient.request

    def _is_allowed(url_str: str) -> bool:
        return any(url_str.startswith(p) for p in allowed_prefixes)

    def offline_sync(self, method, url, *args, **kwargs):
        url_str = str(url)
        if _is_allowed(url_str):
            return orig_sync(self, method, url, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard: {url_str}")

    async def offline_async(self, method, url, *args, **kwargs):
        url_str = str(url)
        if _is_allowed(url_str):
            return await orig_async(self, method, url, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard (async): {url_str}")

    monkeypatch.setattr(httpx._client.Client, "request", offline_sync, raising=True)
    monkeypatch.setattr(httpx._client.AsyncClient, "request", offline_async, raising=True)


@pytest.fixture
def admin_key() -> str:
    return TEST_ADMIN_KEY


@pytest.fixture
def admin_headers(admin_key: str) -> dict[str, str]:
    return {"X-Admin-Key": admin_key}


def make_image_bytes(width: int = 40, height: int = 30, fmt: str = "PNG", color: str = "red") -> bytes:
    from PIL import Image

    buffer = io.BytesIO()
    Image.new("RGB", (width, height), color=color).save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    """A small valid 40x30 PNG image."""
    return make_image_bytes()


@pytest.fixture
def jpeg_bytes() -> bytes:
    """A small valid 64x48 JPEG image."""
    return make_image_bytes(64, 48, fmt="JPEG", color="blue")
