# tests/errors/test_errors.py
"""Tests for blog_service/errors."""

from unittest.mock import MagicMock

import orjson
import pytest
from fastapi.exceptions import RequestValidationError

from blog_service.errors import (
    AssetRemovalError,
    AssetStoreError,
    AssetUploadError,
    BaseAppError,
    DuplicateEntryError,
    InvalidIdentifierError,
    InvalidPhotoError,
    NotFoundError,
    PhotoTooLargeError,
    StoreError,
    UnsupportedPhotoTypeError,
    ValidationError,
    create_exception_handler,
    validation_exception_handler,
)


def _request() -> MagicMock:
    request = MagicMock()
    request.client.host = "192.168.1.1"
    request.url.path = "/blogs"
    return request


class TestBaseAppError:
    def test_default_values(self) -> None:
        error = BaseAppError()
        assert error.detail == "Internal Server Error"
        assert error.status_code == 500

    def test_str_representation(self) -> None:
        assert str(BaseAppError("Test error")) == "Test error"


class TestHierarchy:
    @pytest.mark.parametrize(
        ("error", "base", "status_code"),
        [
            (NotFoundError(), StoreError, 404),
            (DuplicateEntryError(), StoreError, 409),
            (AssetUploadError(), AssetStoreError, 502),
            (AssetRemovalError("abc"), AssetStoreError, 502),
            (InvalidPhotoError(), ValidationError, 400),
            (PhotoTooLargeError(5, 6.2), ValidationError, 413),
            (UnsupportedPhotoTypeError("image/gif"), ValidationError, 415),
            (InvalidIdentifierError("blogId", "x"), ValidationError, 422),
        ],
    )
    def test_status_codes(self, error: BaseAppError, base: type, status_code: int) -> None:
        assert isinstance(error, base)
        assert error.status_code == status_code

    def test_photo_too_large_message(self) -> None:
        assert "6.2MB" in PhotoTooLargeError(5, 6.2).detail


class TestCreateExceptionHandler:
    @pytest.mark.asyncio
    async def test_handler_renders_detail_and_logs(self) -> None:
        logger = MagicMock()
        handler = create_exception_handler(logger)

        response = await handler(_request(), NotFoundError("Blog not found"))

        assert response.status_code == 404
        assert orjson.loads(response.body) == {"detail": "Blog not found"}
        logger.warning.assert_called_once_with(
            "request_failed",
            detail="Blog not found",
            error="NotFoundError",
            status_code=404,
            ip="192.168.1.1",
            endpoint="/blogs",
        )

    @pytest.mark.asyncio
    async def test_handler_includes_extra_attributes(self) -> None:
        handler = create_exception_handler(MagicMock())

        response = await handler(_request(), InvalidIdentifierError("blogId", "x"))

        body = orjson.loads(response.body)
        assert body["errors"] == [{"field": "blogId", "message": "Invalid id", "input": "x"}]


@pytest.mark.asyncio
async def test_request_validation_handler_flattens_errors() -> None:
    exc = RequestValidationError(
        [
            {
                "loc": ("body", "title"),
                "msg": "String should have at least 1 character",
                "type": "string_too_short",
                "ctx": {"min_length": 1},
                "input": "",
            },
        ],
    )

    response = await validation_exception_handler(_request(), exc)

    assert response.status_code == 422
    body = orjson.loads(response.body)
    assert body["detail"] == "Validation failed"
    assert body["errors"] == [
        {
            "field": "title",
            "message": "String should have at least 1 character",
            "type": "string_too_short",
            "context": {"min_length": 1},
        },
    ]
