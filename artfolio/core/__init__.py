"""
Core utilities for Artfolio.

This package provides core functionality including logging configuration,
domain errors, database setup and API schemas.
"""

from artfolio.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
