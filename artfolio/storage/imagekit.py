"""ImageKit storage backend.

Talks to the ImageKit REST API with httpx:

- upload: ``POST {upload_url}`` (multipart) authenticated with the private key
- delete: ``DELETE {api_url}/files/{fileId}``
"""

from __future__ import annotations

from typing import Optional

import httpx

from artfolio.core.errors import StorageError
from artfolio.core.logging_config import get_logger
from artfolio.server.core.config import ImageKitConfig

from .base import StorageBackend, StoredFile, build_object_name

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30.0


class ImageKitStorageBackend(StorageBackend):
    """Stores images in an ImageKit media library.

    The ImageKit ``fileId`` is used as the storage key.
    """

    name = "imagekit"

    def __init__(self, config: ImageKitConfig, client: Optional[httpx.AsyncClient] = None) -> None:
        if not config.is_configured:
            raise StorageError("ImageKit environment variables are not fully set.")
        self._config = config
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=DEFAULT_TIMEOUT)
        self._auth = httpx.BasicAuth(config.private_key or "", "")

    @property
    def config(self) -> ImageKitConfig:
        return self._config

    async def save(self, data: bytes, filename: str, content_type: str, folder: str) -> StoredFile:
        object_name = build_object_name(filename)
        form = {
            "fileName": object_name,
            "folder": f"/{folder.strip('/')}",
            "useUniqueFileName": "false",
        }
        try:
            response = await self._client.post(
                self._config.upload_url,
                data=form,
                files={"file": (object_name, data, content_type)},
                auth=self._auth,
            )
        except httpx.HTTPError as e:
            logger.error(f"ImageKit upload request failed for {object_name}: {e}", exc_info=True)
            raise StorageError() from e

        if response.status_code >= 400:
            logger.error(f"ImageKit upload rejected ({response.status_code}): {response.text}")
            raise StorageError()

        try:
            payload = response.json()
            stored = StoredFile(
                key=payload["fileId"],
                url=payload["url"],
                width=payload.get("width") or None,
                height=payload.get("height") or None,
            )
        except (KeyError, ValueError) as e:
            logger.error(f"Unexpected ImageKit upload response: {response.text}")
            raise StorageError() from e

        logger.info(f"Uploaded {object_name} to ImageKit as {stored.key}")
        return stored

    async def delete(self, key: str) -> None:
        url = f"{self._config.api_url.rstrip('/')}/files/{key}"
        try:
            response = await self._client.delete(url, auth=self._auth)
        except httpx.HTTPError as e:
            logger.error(f"ImageKit delete request failed for {key}: {e}", exc_info=True)
            raise StorageError("Failed to delete the stored image.") from e

        if response.status_code == 404:
            logger.warning(f"ImageKit file {key} was already deleted")
            return
        if response.status_code >= 400:
            logger.error(f"ImageKit delete rejected ({response.status_code}): {response.text}")
            raise StorageError("Failed to delete the stored image.")
        logger.info(f"Deleted ImageKit file {key}")

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()
