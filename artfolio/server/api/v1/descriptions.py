"""
API endpoints for the AI description helper.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from artfolio.ai import describe_artwork
from artfolio.core.images import to_data_uri
from artfolio.core.models.io.descriptions import DescribeArtworkRequest, DescribeArtworkResponse
from artfolio.server.core.security import require_admin
from artfolio.server.services.deps import DescriberDep, SettingsDep
from artfolio.server.services.uploads import validate_image_upload

router = APIRouter(tags=["descriptions"], dependencies=[Depends(require_admin)])

_RESPONSES = {
    400: {"description": "Invalid image or data URI"},
    413: {"description": "Uploaded file exceeds the size limit"},
    502: {"description": "The model failed to produce a description"},
    503: {"description": "AI description generation is disabled or not configured"},
}


@router.post(
    "",
    response_model=DescribeArtworkResponse,
    summary="Describe Artwork",
    description="Generate a short, poetic portfolio description for an image sent as a base64 data URI.",
    responses=_RESPONSES,
)
async def describe_from_data_uri(request: DescribeArtworkRequest, describer: DescriberDep) -> DescribeArtworkResponse:
    description = await describe_artwork(request.photo_data_uri, describer)
    return DescribeArtworkResponse(description=description)


@router.post(
    "/upload",
    response_model=DescribeArtworkResponse,
    summary="Describe Uploaded Artwork",
    description="Generate a description for an image sent as a multipart file.",
    responses=_RESPONSES,
)
async def describe_from_upload(
    describer: DescriberDep,
    app_settings: SettingsDep,
    file: Optional[UploadFile] = File(None, description="Image file"),
) -> DescribeArtworkResponse:
    data = await file.read() if file is not None else None
    content_type = file.content_type if file is not None else None
    info = validate_image_upload(data, content_type, app_settings.max_upload_bytes)
    description = await describe_artwork(to_data_uri(data, info.content_type), describer)
    return DescribeArtworkResponse(description=description)
