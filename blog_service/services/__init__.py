from blog_service.services.asset_codec import decode_asset_id, resolve_asset_id
from blog_service.services.assets import AssetGateway
from blog_service.services.blog_lifecycle import BlogLifecycle, ensure_object_id
from blog_service.services.comments import CommentService
from blog_service.services.photo import PhotoData, PhotoPayload, decode_photo_payload
from blog_service.services.projection import to_comment, to_detail, to_summary
from blog_service.services.storage import (
    AssetUploadResult,
    CloudinaryStorage,
    LocalStorage,
    StorageService,
    get_storage_service,
)

__all__ = [
    "AssetGateway",
    "AssetUploadResult",
    "BlogLifecycle",
    "CloudinaryStorage",
    "CommentService",
    "LocalStorage",
    "PhotoData",
    "PhotoPayload",
    "StorageService",
    "decode_asset_id",
    "decode_photo_payload",
    "ensure_object_id",
    "get_storage_service",
    "resolve_asset_id",
    "to_comment",
    "to_detail",
    "to_summary",
]
