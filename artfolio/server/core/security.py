"""
Admin access.

Every mutating endpoint requires the admin secret key in the ``X-Admin-Key``
header. Without a configured key the admin actions are disabled entirely.
"""

from __future__ import annotations

import secrets
from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import APIKeyHeader

from artfolio.core.errors import AdminDisabledError, AuthenticationError
from artfolio.core.logging_config import get_logger
from artfolio.server.core.config import Settings
from artfolio.server.services.deps import get_settings

logger = get_logger(__name__)

ADMIN_KEY_HEADER = "X-Admin-Key"

admin_key_header = APIKeyHeader(name=ADMIN_KEY_HEADER, auto_error=False, description="Admin secret key")


def check_admin_key(provided: Optional[str], expected: Optional[str]) -> None:
    """
    Validate an admin key.

    Raises:
        AdminDisabledError: If no admin key is configured
        AuthenticationError: If the provided key is missing or wrong
    """
    if not expected:
        raise AdminDisabledError()
    if not provided or not secrets.compare_digest(provided.encode("utf-8"), expected.encode("utf-8")):
        logger.warning("Rejected admin request with an invalid secret key")
        raise AuthenticationError()


async def require_admin(
    app_settings: Annotated[Settings, Depends(get_settings)],
    api_key: Annotated[Optional[str], Depends(admin_key_header)] = None,
) -> None:
    check_admin_key(api_key, app_settings.admin_secret_key)
