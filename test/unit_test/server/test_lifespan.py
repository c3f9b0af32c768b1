"""
Unit tests for FastAPI application lifespan management.

Tests verify that the application creates its tables on startup, survives a
failing database, and releases the storage client and AI describer on
shutdown.
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi import FastAPI

pytestmark = pytest.mark.asyncio


class TestLifespanStartup:
    """Test application startup lifespan events."""

    async def test_lifespan_startup_initializes_database(self):
        from artfolio.server.main import lifespan

        with (
            patch("artfolio.server.main.init_db", new_callable=AsyncMock) as mock_init_db,
            patch("artfolio.server.main.close_storage", new_callable=AsyncMock),
            patch("artfolio.server.main.reset_describer", new_callable=AsyncMock),
        ):
            async with lifespan(FastAPI()):
                mock_init_db.assert_awaited_once()

    async def test_lifespan_startup_logs_success(self):
        from artfolio.server.main import lifespan

        with (
            patch("artfolio.server.main.init_db", new_callable=AsyncMock),
            patch("artfolio.server.main.close_storage", new_callable=AsyncMock),
            patch("artfolio.server.main.reset_describer", new_callable=AsyncMock),
            patch("artfolio.server.main.logger") as mock_logger,
        ):
            async with lifespan(FastAPI()):
                pass

            calls = [call[0][0] for call in mock_logger.info.call_args_list]
            assert any("Starting up" in call for call in calls)
            assert any("Database initialized successfully" in call for call in calls)

    async def test_lifespan_startup_handles_init_db_exception(self):
        """A failing database is logged and the application still starts."""
        from artfolio.server.main import lifespan

        with (
            patch("artfolio.server.main.init_db", new_callable=AsyncMock) as mock_init_db,
            patch("artfolio.server.main.close_storage", new_callable=AsyncMock),
            patch("artfolio.server.main.reset_describer", new_callable=AsyncMock),
            patch("artfolio.server.main.logger") as mock_logger,
        ):
            mock_init_db.side_effect = Exception("Database connection failed")

            async with lifespan(FastAPI()):
                pass

            mock_logger.error.assert_called_once()
            assert "Database initialization failed" in mock_logger.error.call_args[0][0]

    async def test_lifespan_warns_when_admin_disabled(self):
        from artfolio.server.main import lifespan

        with (
            patch("artfolio.server.main.init_db", new_callable=AsyncMock),
            patch("artfolio.server.main.close_storage", new_callable=AsyncMock),
            patch("artfolio.server.main.reset_describer", new_callable=AsyncMock),
            patch("artfolio.server.main.settings.admin_secret_key", None),
            patch("artfolio.server.main.logger") as mock_logger,
        ):
            async with lifespan(FastAPI()):
                pass

            mock_logger.warning.assert_called_once()


class TestLifespanShutdown:
    """Test application shutdown lifespan events."""

    async def test_lifespan_shutdown_releases_resources(self):
        from artfolio.server.main import lifespan

        with (
            patch("artfolio.server.main.init_db", new_callable=AsyncMock),
            patch("artfolio.server.main.close_storage", new_callable=AsyncMock) as mock_close_storage,
            patch("artfolio.server.main.reset_describer", new_callable=AsyncMock) as mock_reset_describer,
            patch("artfolio.server.main.logger") as mock_logger,
        ):
            async with lifespan(FastAPI()):
                mock_close_storage.assert_not_awaited()

            mock_close_storage.assert_awaited_once()
            mock_reset_describer.assert_awaited_once()
            shutdown_logs = [c[0][0] for c in mock_logger.info.call_args_list if "Shutting down" in c[0][0]]
            assert len(shutdown_logs) == 1
