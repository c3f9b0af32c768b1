"""
Exception handlers for the Artfolio server.

This package contains the handlers for domain errors and unhandled exceptions
and a setup function to register them with the FastAPI application.
"""

from .global_handler import artfolio_error_handler, global_exception_handler, setup_exception_handlers

__all__ = ["artfolio_error_handler", "global_exception_handler", "setup_exception_handlers"]
