"""
HTML page.

Serves the single gallery page. The page itself loads artworks and the
profile from the JSON API; the server only renders the shell with the
profile name and the endpoint locations.
"""

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from artfolio.server.core import constant
from artfolio.server.core.security import ADMIN_KEY_HEADER
from artfolio.server.services import to_profile_read
from artfolio.server.services.deps import ProfileServiceDep

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
STATIC_DIR = Path(__file__).resolve().parent.parent / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index(request: Request, profiles: ProfileServiceDep) -> HTMLResponse:
    profile = to_profile_read(await profiles.get_profile())
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "project_name": constant.PROJECT_NAME,
            "profile": profile,
            "api_base": constant.API_V1_STR,
            "admin_key_header": ADMIN_KEY_HEADER,
        },
    )
