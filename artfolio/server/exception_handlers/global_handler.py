"""
Exception Handlers for the FastAPI Application.

Domain errors (``ArtfolioError``) become ``{"success": false, "error": ...}``
responses with the status the error carries. Anything else is logged with
its request context and answered with a generic 500
``{"detail": "Internal server error", "error_id", "error_type"}``.
"""

import traceback

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from artfolio.core.errors import ArtfolioError
from artfolio.core.logging_config import get_logger

logger = get_logger(__name__)


async def artfolio_error_handler(request: Request, exc: ArtfolioError) -> JSONResponse:
    """
    Translate a domain error into the JSON error shape used by the page.

    Args:
        request: The HTTP request that caused the error
        exc: The domain error that was raised

    Returns:
        JSONResponse with the error message and its status code
    """
    log = logger.warning if exc.status_code >= 500 else logger.info
    log(
        f"{type(exc).__name__} in {request.method} {request.url.path}: {exc.message}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": exc.status_code,
            "error_type": type(exc).__name__,
        },
    )
    return JSONResponse(status_code=exc.status_code, content={"success": False, "error": exc.message})


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to log detailed error information.

    This handler is called for any unhandled exception in the application.
    It logs the full error context and returns a JSON response with an error ID
    that clients can use to reference the error when reporting issues.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with error details and error ID
    """
    error_id = id(exc)

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {str(exc)}",
        exc_info=True,
        extra={
            "error_id": error_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
            "traceback": traceback.format_exc(),
        },
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "error_type": type(exc).__name__,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(ArtfolioError, artfolio_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
