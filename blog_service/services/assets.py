"""
Asset store gateway.

This module is the only caller of the object storage backends. It validates
photo payloads, uploads them, and removes stored photos, translating every
backend failure into ``AssetStoreError``.
"""

from blog_service.configs.settings import settings
from blog_service.errors.asset import (
    AssetRemovalError,
    AssetStoreError,
    AssetUploadError,
)
from blog_service.monitoring import get_logger, metrics
from blog_service.services.photo import PhotoPayload, decode_photo_payload
from blog_service.services.storage import (
    AssetUploadResult,
    StorageService,
    get_storage_service,
)

logger = get_logger(__name__)


class AssetGateway:
    """
    Gateway to the external asset store.

    Uploads are not idempotent: two uploads of the same bytes produce two
    assets. Removing an unknown asset is not an error.
    """

    def __init__(self, storage: StorageService | None = None) -> None:
        """
        Initialize the asset gateway.

        Args:
            storage: Optional storage service instance. If not provided,
                    the configured storage service will be used.
        """
        self.storage = storage or get_storage_service()
        self.max_size_bytes = settings.photo_max_size_bytes
        self.allowed_types = settings.PHOTO_ALLOWED_TYPES

    async def upload(self, payload: PhotoPayload) -> AssetUploadResult:
        """
        Validate and store a photo.

        Args:
            payload: Base64 data URL or raw image bytes

        Returns:
            AssetUploadResult: Access URL and asset identifier

        Raises:
            ValidationError: If the payload is not an acceptable image
            AssetUploadError: If the asset store fails
        """
        photo = decode_photo_payload(
            payload,
            max_size_bytes=self.max_size_bytes,
            allowed_types=self.allowed_types,
        )

        try:
            result = await self.storage.upload(photo)
        except AssetStoreError:
            metrics.record_asset_operation("upload", "failure")
            raise
        except Exception as e:
            metrics.record_asset_operation("upload", "failure")
            logger.exception("asset_upload_failed", content_type=photo.content_type)
            raise AssetUploadError from e

        metrics.record_asset_operation("upload", "success")
        logger.info(
            "asset_uploaded",
            asset_id=result.asset_id,
            content_type=photo.content_type,
            size=photo.size,
        )
        return result

    async def remove(self, asset_id: str) -> None:
        """
        Remove a stored photo.

        Args:
            asset_id: Identifier of the asset to remove

        Raises:
            AssetStoreError: If the asset store fails
        """
        try:
            removed = await self.storage.remove(asset_id)
        except AssetStoreError:
            metrics.record_asset_operation("remove", "failure")
            raise
        except Exception as e:
            metrics.record_asset_operation("remove", "failure")
            raise AssetRemovalError(asset_id, reason=str(e) or type(e).__name__) from e

        if removed:
            metrics.record_asset_operation("remove", "success")
            logger.info("asset_removed", asset_id=asset_id)
        else:
            metrics.record_asset_operation("remove", "not_found")
            logger.info("asset_already_absent", asset_id=asset_id)

    async def discard(self, asset_id: str, *, blog_id: str, operation: str) -> bool:
        """
        Remove a photo, logging instead of raising on failure.

        Args:
            asset_id: Identifier of the asset to remove
            blog_id: Blog the asset belonged to, for the log record
            operation: Lifecycle operation requesting the removal

        Returns:
            bool: True if the asset store accepted the removal
        """
        try:
            await self.remove(asset_id)
        except AssetStoreError as e:
            metrics.record_asset_cleanup_failure(operation)
            logger.warning(
                "asset_cleanup_failed",
                asset_id=asset_id,
                blog_id=blog_id,
                operation=operation,
                error=e.detail,
            )
            return False
        return True
