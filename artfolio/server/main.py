"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware
(CORS, request logging), registers exception handlers, mounts the static
assets and includes all routers. It serves as the root of the web server.
"""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from artfolio.ai import reset_describer
from artfolio.core.database import init_db
from artfolio.core.logging_config import get_logger, setup_logging

from .api import pages
from .api.v1 import artworks, auth, descriptions, health, profile
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import RequestLoggingMiddleware
from .services.deps import close_storage

setup_logging(enable_file=settings.log_file_enabled)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates the database tables on startup and releases the storage client
    and AI describer on shutdown.
    """
    try:
        logger.info("Starting up Artfolio Server...")
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    if not settings.admin_enabled:
        logger.warning("ARTFOLIO_ADMIN_SECRET_KEY is not set; admin actions are disabled")

    yield

    logger.info("Shutting down Artfolio Server...")
    await close_storage()
    await reset_describer()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    Artfolio Server API

    Backend for a single-artist portfolio gallery: a collage of artworks,
    the artist profile, and an AI helper that drafts artwork descriptions.
    """,
    version=constant.VERSION,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

setup_exception_handlers(app)

app.mount("/static", StaticFiles(directory=str(pages.STATIC_DIR)), name="static")

if settings.storage_backend == "local":
    upload_root = Path(settings.local_storage.upload_dir)
    upload_root.mkdir(parents=True, exist_ok=True)
    app.mount(settings.local_storage.url_prefix, StaticFiles(directory=str(upload_root)), name="uploads")

app.include_router(health.router, tags=["health"])
app.include_router(auth.router, prefix=f"{constant.API_V1_STR}/auth")
app.include_router(artworks.router, prefix=f"{constant.API_V1_STR}/artworks")
app.include_router(profile.router, prefix=f"{constant.API_V1_STR}/profile")
app.include_router(descriptions.router, prefix=f"{constant.API_V1_STR}/descriptions")
app.include_router(pages.router)


def run() -> None:
    """Run the server with uvicorn using the configured host and port."""
    import uvicorn

    uvicorn.run(app, host=settings.server_host, port=settings.server_port, log_config=None)
