"""
Cloudinary storage implementation.

This module provides the Cloudinary-backed asset store used in production.
The SDK is synchronous, so every call runs in the default thread pool.
"""

from asyncio import get_event_loop
from functools import partial
from typing import Any

from cloudinary import config
from cloudinary.uploader import destroy, upload

from blog_service.configs.settings import settings
from blog_service.errors.asset import AssetRemovalError, AssetUploadError
from blog_service.services.photo import PhotoData
from blog_service.services.storage.base import AssetUploadResult

DESTROY_OK = "ok"
DESTROY_NOT_FOUND = "not found"


class CloudinaryStorage:
    """
    Cloudinary storage implementation.

    Photos are uploaded under Cloudinary-generated public ids. With an empty
    ``CLOUDINARY_FOLDER`` the public id is also the last segment of the
    delivery URL, which keeps URL decoding valid for legacy records.
    """

    def __init__(self) -> None:
        """Initialize Cloudinary with configured credentials."""
        config(
            cloud_name=settings.CLOUDINARY_CLOUD_NAME,
            api_key=settings.CLOUDINARY_API_KEY,
            api_secret=settings.CLOUDINARY_API_SECRET.get_secret_value(),
            secure=True,
        )
        self.folder = settings.CLOUDINARY_FOLDER.strip("/")

    async def _run(self, func: partial[Any]) -> Any:
        """Run a blocking SDK call in the thread pool."""
        loop = get_event_loop()
        return await loop.run_in_executor(None, func)

    async def upload(self, photo: PhotoData) -> AssetUploadResult:
        """
        Upload a photo to Cloudinary.

        Args:
            photo: Validated image bytes and content type

        Returns:
            AssetUploadResult: Secure delivery URL and Cloudinary public id
        """
        upload_options: dict[str, Any] = {
            "resource_type": "image",
            "unique_filename": True,
            "overwrite": False,
        }
        if self.folder:
            upload_options["folder"] = self.folder

        result = await self._run(partial(upload, photo.data, **upload_options))

        access_url = result.get("secure_url") or result.get("url")
        asset_id = result.get("public_id")
        if not access_url or not asset_id:
            mssg = "Cloudinary upload response is missing the URL or public id"
            raise AssetUploadError(mssg)

        return AssetUploadResult(access_url=access_url, asset_id=asset_id)

    async def remove(self, asset_id: str) -> bool:
        """
        Delete a photo from Cloudinary.

        Args:
            asset_id: Cloudinary public id

        Returns:
            bool: True if deleted, False if Cloudinary did not know the id

        Raises:
            AssetRemovalError: If Cloudinary rejects the request
        """
        result = await self._run(partial(destroy, asset_id, resource_type="image"))

        outcome = result.get("result")
        if outcome == DESTROY_OK:
            return True
        if outcome == DESTROY_NOT_FOUND:
            return False
        raise AssetRemovalError(asset_id, reason=str(outcome))
