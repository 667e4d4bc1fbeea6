"""
Photo payload decoding and validation.

Clients send photos either as base64 data URLs
(``data:image/png;base64,...``) or as raw image bytes. Payloads are checked
here, before the asset store is contacted. Images are stored as sent: no
resizing or transcoding happens.
"""

from base64 import b64decode
from binascii import Error as BinasciiError
from dataclasses import dataclass
from io import BytesIO
from re import DOTALL, IGNORECASE
from re import compile as re_compile

from PIL import Image

from blog_service.configs import settings
from blog_service.errors.asset import (
    InvalidPhotoError,
    PhotoTooLargeError,
    UnsupportedPhotoTypeError,
)

DATA_URL_RE = re_compile(
    r"^data:(?P<mime>image/[a-z0-9.+-]+);base64,(?P<data>.+)$",
    DOTALL | IGNORECASE,
)

# Pillow format name -> MIME type
FORMAT_CONTENT_TYPES: dict[str, str] = {
    "JPEG": "image/jpeg",
    "PNG": "image/png",
    "WEBP": "image/webp",
    "GIF": "image/gif",
    "BMP": "image/bmp",
    "TIFF": "image/tiff",
}

CONTENT_TYPE_EXTENSIONS: dict[str, str] = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
}

type PhotoPayload = str | bytes


@dataclass(frozen=True, slots=True)
class PhotoData:
    """A validated image ready to be stored."""

    data: bytes
    content_type: str

    @property
    def extension(self) -> str:
        return CONTENT_TYPE_EXTENSIONS.get(self.content_type, "bin")

    @property
    def size(self) -> int:
        return len(self.data)


def _too_large(max_size: int, actual_size: float) -> PhotoTooLargeError:
    return PhotoTooLargeError(
        max_size_mb=max_size // (1024 * 1024),
        actual_size_mb=actual_size / (1024 * 1024),
    )


def _decode_data_url(payload: str, max_size: int) -> tuple[bytes, str]:
    """
    Split a data URL into raw bytes and its declared MIME type.

    Oversized payloads are rejected from their encoded length, before decoding.
    """
    matched = DATA_URL_RE.match(payload.strip())
    if matched is None:
        mssg = "Photo must be a base64 encoded data URL (data:image/<type>;base64,...)"
        raise InvalidPhotoError(mssg)

    encoded = matched.group("data")
    # Base64 encodes every 3 bytes as 4 characters
    if len(encoded) > 4 * ((max_size + 2) // 3):
        raise _too_large(max_size, len(encoded) * 3 / 4)

    try:
        data = b64decode(encoded, validate=True)
    except (BinasciiError, ValueError) as e:
        mssg = f"Photo data is not valid base64: {e!s}"
        raise InvalidPhotoError(mssg) from e

    declared = matched.group("mime").lower()
    # Browsers still emit the non-standard image/jpg
    return data, "image/jpeg" if declared == "image/jpg" else declared


def _detect_content_type(data: bytes) -> str:
    """Verify the bytes are an image and return its actual MIME type."""
    try:
        with Image.open(BytesIO(data)) as img:
            image_format = img.format or ""
            img.verify()
    except Exception as e:
        mssg = f"Invalid or corrupted image file: {e!s}"
        raise InvalidPhotoError(mssg) from e

    return FORMAT_CONTENT_TYPES.get(image_format, f"image/{image_format.lower() or 'unknown'}")


def decode_photo_payload(
    payload: PhotoPayload,
    *,
    max_size_bytes: int | None = None,
    allowed_types: list[str] | None = None,
) -> PhotoData:
    """
    Decode and validate a photo payload.

    Args:
        payload: Base64 data URL or raw image bytes
        max_size_bytes: Size limit of the decoded image (default from settings)
        allowed_types: Accepted MIME types (default from settings)

    Returns:
        PhotoData: Decoded image bytes with their detected content type

    Raises:
        InvalidPhotoError: If the payload is empty, not base64 or not an image
        PhotoTooLargeError: If the decoded image exceeds the size limit
        UnsupportedPhotoTypeError: If the image type is not allowed
    """
    max_size = max_size_bytes if max_size_bytes is not None else settings.photo_max_size_bytes
    allowed = allowed_types if allowed_types is not None else settings.PHOTO_ALLOWED_TYPES

    if not payload:
        mssg = "Photo is required"
        raise InvalidPhotoError(mssg)

    if isinstance(payload, str):
        data, declared_type = _decode_data_url(payload, max_size)
        if declared_type not in allowed:
            raise UnsupportedPhotoTypeError(content_type=declared_type, allowed_types=allowed)
    else:
        data = bytes(payload)

    if len(data) > max_size:
        raise _too_large(max_size, len(data))

    content_type = _detect_content_type(data)
    if content_type not in allowed:
        raise UnsupportedPhotoTypeError(content_type=content_type, allowed_types=allowed)

    return PhotoData(data=data, content_type=content_type)
