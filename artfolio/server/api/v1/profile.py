"""
API endpoints for the artist profile shown in the page header.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from artfolio.core.models.io.profiles import ContactEntry, ProfileRead, ProfileUpdate
from artfolio.server.core.security import require_admin
from artfolio.server.services import contact_entries, to_profile_read
from artfolio.server.services.deps import ProfileServiceDep

router = APIRouter(tags=["profile"])


@router.get("", response_model=ProfileRead, summary="Get Profile")
async def get_profile(profiles: ProfileServiceDep) -> ProfileRead:
    return to_profile_read(await profiles.get_profile())


@router.put(
    "",
    response_model=ProfileRead,
    summary="Update Profile",
    description="Replace the name, bio and contact details shown in the header.",
    responses={422: {"description": "Validation failed"}},
    dependencies=[Depends(require_admin)],
)
async def update_profile(update: ProfileUpdate, profiles: ProfileServiceDep) -> ProfileRead:
    return to_profile_read(await profiles.update_profile(update))


@router.post(
    "/picture",
    response_model=ProfileRead,
    summary="Upload Profile Picture",
    responses={400: {"description": "Missing file or not an image"}, 502: {"description": "Storage failure"}},
    dependencies=[Depends(require_admin)],
)
async def upload_profile_picture(
    profiles: ProfileServiceDep,
    file: Optional[UploadFile] = File(None, description="Image file"),
) -> ProfileRead:
    data = await file.read() if file is not None else None
    profile = await profiles.upload_profile_picture(
        data=data,
        filename=(file.filename if file is not None else None) or "profile",
        content_type=file.content_type if file is not None else None,
    )
    return to_profile_read(profile)


@router.get(
    "/contact",
    response_model=list[ContactEntry],
    summary="Get Contact Options",
    description="Instagram, email and phone entries for the contact dialog; empty fields are omitted.",
)
async def get_contact(profiles: ProfileServiceDep) -> list[ContactEntry]:
    return contact_entries(await profiles.get_profile())
