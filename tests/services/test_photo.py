"""Tests for photo payload decoding and validation."""

from base64 import b64encode
from unittest.mock import patch

import pytest

from blog_service.errors import InvalidPhotoError, PhotoTooLargeError, UnsupportedPhotoTypeError
from blog_service.services.photo import decode_photo_payload

ALLOWED = ["image/jpeg", "image/png", "image/webp"]


def test_png_data_url_decoded(png_data_url: str, png_bytes: bytes) -> None:
    photo = decode_photo_payload(png_data_url, allowed_types=ALLOWED)

    assert photo.data == png_bytes
    assert photo.content_type == "image/png"
    assert photo.extension == "png"
    assert photo.size == len(png_bytes)


def test_raw_bytes_accepted(jpeg_bytes: bytes) -> None:
    photo = decode_photo_payload(jpeg_bytes, allowed_types=ALLOWED)

    assert photo.content_type == "image/jpeg"
    assert photo.extension == "jpg"


def test_image_jpg_alias_normalized(jpeg_bytes: bytes) -> None:
    payload = f"data:image/jpg;base64,{b64encode(jpeg_bytes).decode()}"

    assert decode_photo_payload(payload, allowed_types=ALLOWED).content_type == "image/jpeg"


@pytest.mark.parametrize("payload", ["", b""])
def test_empty_payload_rejected(payload: str | bytes) -> None:
    with pytest.raises(InvalidPhotoError):
        decode_photo_payload(payload, allowed_types=ALLOWED)


def test_plain_string_rejected() -> None:
    with pytest.raises(InvalidPhotoError):
        decode_photo_payload("not a data url", allowed_types=ALLOWED)


def test_invalid_base64_rejected() -> None:
    with pytest.raises(InvalidPhotoError):
        decode_photo_payload("data:image/png;base64,@@@not-base64@@@", allowed_types=ALLOWED)


def test_non_image_bytes_rejected() -> None:
    payload = f"data:image/png;base64,{b64encode(b'plain text').decode()}"

    with pytest.raises(InvalidPhotoError):
        decode_photo_payload(payload, allowed_types=ALLOWED)


def test_declared_type_not_allowed(gif_bytes: bytes) -> None:
    payload = f"data:image/gif;base64,{b64encode(gif_bytes).decode()}"

    with pytest.raises(UnsupportedPhotoTypeError) as exc_info:
        decode_photo_payload(payload, allowed_types=ALLOWED)
    assert exc_info.value.content_type == "image/gif"
    assert exc_info.value.status_code == 415


def test_detected_type_not_allowed(gif_bytes: bytes) -> None:
    """A GIF declared as PNG is still rejected once its bytes are inspected."""
    payload = f"data:image/png;base64,{b64encode(gif_bytes).decode()}"

    with pytest.raises(UnsupportedPhotoTypeError) as exc_info:
        decode_photo_payload(payload, allowed_types=ALLOWED)
    assert exc_info.value.content_type == "image/gif"


def test_too_large_rejected(png_data_url: str) -> None:
    with pytest.raises(PhotoTooLargeError) as exc_info:
        decode_photo_payload(png_data_url, max_size_bytes=10, allowed_types=ALLOWED)
    assert exc_info.value.status_code == 413


def test_oversized_data_url_rejected_before_decoding(png_data_url: str) -> None:
    with (
        patch("blog_service.services.photo.b64decode") as decode,
        pytest.raises(PhotoTooLargeError),
    ):
        decode_photo_payload(png_data_url, max_size_bytes=10, allowed_types=ALLOWED)

    decode.assert_not_called()


def test_data_url_at_size_limit_accepted(png_data_url: str, png_bytes: bytes) -> None:
    photo = decode_photo_payload(
        png_data_url,
        max_size_bytes=len(png_bytes),
        allowed_types=ALLOWED,
    )

    assert photo.size == len(png_bytes)

