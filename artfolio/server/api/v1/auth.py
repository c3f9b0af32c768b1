"""
Admin key verification endpoint.

The page calls this once the artist enters the secret key, and shows the
editing controls only when it succeeds.
"""

from fastapi import APIRouter, Depends

from artfolio.core.models.io import ActionResult
from artfolio.server.core.security import require_admin

router = APIRouter(tags=["auth"])


@router.get(
    "/verify",
    response_model=ActionResult,
    response_model_exclude_none=True,
    summary="Verify Admin Key",
    description="Check the X-Admin-Key header against the configured admin secret key.",
    responses={
        200: {"description": "Key accepted"},
        401: {"description": "Invalid secret key"},
        403: {"description": "Admin access is not configured"},
    },
    dependencies=[Depends(require_admin)],
)
async def verify_admin_key() -> ActionResult:
    return ActionResult(success=True)
