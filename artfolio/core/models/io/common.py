from typing import Optional

from pydantic import BaseModel


class ActionResult(BaseModel):
    """Outcome of an admin action, mirrored by error responses."""

    success: bool
    error: Optional[str] = None
