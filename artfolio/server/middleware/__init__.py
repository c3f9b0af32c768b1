"""
Middleware modules for the Artfolio server.
"""

from .request_logging import SLOW_REQUEST_MS, RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware", "SLOW_REQUEST_MS"]
