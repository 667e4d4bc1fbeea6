from blog_service.errors.asset import (
    AssetRemovalError,
    AssetStoreError,
    AssetUploadError,
    InvalidAssetReferenceError,
    InvalidPhotoError,
    PhotoTooLargeError,
    UnsupportedPhotoTypeError,
    asset_exception_handler,
)
from blog_service.errors.base import BaseAppError, create_exception_handler
from blog_service.errors.database import (
    DatabaseInitializationError,
    DuplicateEntryError,
    NotFoundError,
    StoreConnectionError,
    StoreError,
    store_exception_handler,
)
from blog_service.errors.validation import (
    InvalidIdentifierError,
    ValidationError,
    app_validation_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "AssetRemovalError",
    "AssetStoreError",
    "AssetUploadError",
    "BaseAppError",
    "DatabaseInitializationError",
    "DuplicateEntryError",
    "InvalidAssetReferenceError",
    "InvalidIdentifierError",
    "InvalidPhotoError",
    "NotFoundError",
    "PhotoTooLargeError",
    "StoreConnectionError",
    "StoreError",
    "UnsupportedPhotoTypeError",
    "ValidationError",
    "app_validation_exception_handler",
    "asset_exception_handler",
    "create_exception_handler",
    "store_exception_handler",
    "validation_exception_handler",
]
