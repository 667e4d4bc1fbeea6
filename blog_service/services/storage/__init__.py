"""
Storage services package.

This package provides object storage backends for blog photos,
with support for local filesystem and Cloudinary.
"""

from blog_service.configs.settings import settings
from blog_service.services.storage.base import AssetUploadResult, StorageService
from blog_service.services.storage.cloudinary_storage import CloudinaryStorage
from blog_service.services.storage.local import LocalStorage


def get_storage_service() -> StorageService:
    """
    Get the configured storage service.

    Returns the appropriate storage implementation based on
    the STORAGE_PROVIDER setting.

    Returns:
        StorageService: Configured storage service instance
    """
    if settings.STORAGE_PROVIDER == "cloudinary":
        return CloudinaryStorage()
    return LocalStorage()


__all__ = [
    "AssetUploadResult",
    "CloudinaryStorage",
    "LocalStorage",
    "StorageService",
    "get_storage_service",
]
