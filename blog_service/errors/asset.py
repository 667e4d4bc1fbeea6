"""
Photo asset error classes.

Payload problems are validation errors raised before the asset store is
contacted. Asset store failures are ``AssetStoreError`` subclasses.
"""

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_413_CONTENT_TOO_LARGE,
    HTTP_415_UNSUPPORTED_MEDIA_TYPE,
    HTTP_502_BAD_GATEWAY,
)

from blog_service.errors.base import BaseAppError, create_exception_handler
from blog_service.errors.validation import ValidationError
from blog_service.monitoring import get_logger

logger = get_logger(__name__)


class InvalidPhotoError(ValidationError):
    """Exception raised when the photo payload is not a decodable image."""

    def __init__(
        self,
        detail: str = "This file doesn't appear to be a valid image. Please try a different file.",
    ) -> None:
        super().__init__(detail=detail, status_code=HTTP_400_BAD_REQUEST)


class UnsupportedPhotoTypeError(ValidationError):
    """Exception raised when the photo type is not allowed."""

    def __init__(
        self,
        content_type: str,
        allowed_types: list[str] | None = None,
    ) -> None:
        allowed = allowed_types or ["image/jpeg", "image/png", "image/webp"]
        detail = "This image format isn't supported. Please use JPEG, PNG, or WebP images."
        super().__init__(detail=detail, status_code=HTTP_415_UNSUPPORTED_MEDIA_TYPE)
        self.content_type = content_type
        self.allowed_types = allowed


class PhotoTooLargeError(ValidationError):
    """Exception raised when the photo exceeds the size limit."""

    def __init__(
        self,
        max_size_mb: int = 5,
        actual_size_mb: float | None = None,
    ) -> None:
        detail = f"Your image is too large. Please use an image smaller than {max_size_mb}MB."
        if actual_size_mb is not None:
            detail += f" Your file is {actual_size_mb:.1f}MB."
        super().__init__(detail=detail, status_code=HTTP_413_CONTENT_TOO_LARGE)
        self.max_size_mb = max_size_mb
        self.actual_size_mb = actual_size_mb


class InvalidAssetReferenceError(ValidationError):
    """Exception raised when no asset identifier can be recovered from an access URL."""

    def __init__(self, access_url: str) -> None:
        super().__init__(detail="Could not recover an asset identifier from the photo URL")
        self.access_url = access_url


class AssetStoreError(BaseAppError):
    """Base exception for object storage failures."""

    def __init__(
        self,
        detail: str = "The photo storage service is unavailable. Please try again later.",
        status_code: int = HTTP_502_BAD_GATEWAY,
    ) -> None:
        super().__init__(detail=detail, status_code=status_code)


class AssetUploadError(AssetStoreError):
    """Exception raised when an upload fails; nothing is assumed stored."""

    def __init__(self, detail: str = "We couldn't upload your photo. Please try again.") -> None:
        super().__init__(detail=detail)


class AssetRemovalError(AssetStoreError):
    """Exception raised when the storage service rejects or cannot process a removal."""

    def __init__(self, asset_id: str, reason: str = "unknown") -> None:
        super().__init__(detail=f"Failed to remove photo asset '{asset_id}': {reason}")
        self.asset_id = asset_id
        self.reason = reason


asset_exception_handler = create_exception_handler(logger)
