"""
Local filesystem storage implementation.

This module provides a local storage backend for development
and testing purposes. Files are stored in the local filesystem and served
by the application under ``/uploads``.
"""

from pathlib import Path
from uuid import uuid4

import aiofiles
import aiofiles.os

from blog_service.configs.settings import settings
from blog_service.services.photo import CONTENT_TYPE_EXTENSIONS, PhotoData
from blog_service.services.storage.base import AssetUploadResult

PHOTO_FOLDER = "blog_photos"


class LocalStorage:
    """
    Local filesystem storage implementation.

    Stores photos as ``<uploads>/blog_photos/<asset_id>.<ext>`` and hands out
    URLs whose last path segment is ``<asset_id>.<ext>``.
    """

    def __init__(self, uploads_dir: Path | None = None, base_url: str | None = None) -> None:
        """Initialize local storage with configured paths."""
        self.uploads_dir = uploads_dir or settings.UPLOADS_DIR
        self.base_path = self.uploads_dir / PHOTO_FOLDER
        self.base_url = (base_url or settings.PUBLIC_BASE_URL).rstrip("/")
        self._ensure_directory()

    def _ensure_directory(self) -> None:
        """Ensure the upload directory exists."""
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _find_file(self, asset_id: str) -> Path | None:
        """Return the stored file for an asset id, whatever its extension."""
        # Asset ids never contain path separators
        if not asset_id or "/" in asset_id or "\\" in asset_id or asset_id.startswith("."):
            return None
        for ext in {*CONTENT_TYPE_EXTENSIONS.values(), "bin"}:
            file_path = self.base_path / f"{asset_id}.{ext}"
            if file_path.exists():
                return file_path
        return None

    async def upload(self, photo: PhotoData) -> AssetUploadResult:
        """
        Write a photo to the uploads directory.

        Args:
            photo: Validated image bytes and content type

        Returns:
            AssetUploadResult: Public URL and generated asset id
        """
        asset_id = uuid4().hex
        file_name = f"{asset_id}.{photo.extension}"

        async with aiofiles.open(self.base_path / file_name, "wb") as f:
            await f.write(photo.data)

        return AssetUploadResult(
            access_url=f"{self.base_url}/uploads/{PHOTO_FOLDER}/{file_name}",
            asset_id=asset_id,
        )

    async def remove(self, asset_id: str) -> bool:
        """
        Delete a photo from the uploads directory.

        Args:
            asset_id: Identifier returned at upload time

        Returns:
            bool: True if a file was deleted, False if none existed
        """
        file_path = self._find_file(asset_id)
        if file_path is None:
            return False
        await aiofiles.os.remove(file_path)
        return True
