"""Custom validation error handling for FastAPI."""

from typing import cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_422_UNPROCESSABLE_CONTENT

from blog_service.errors.base import BaseAppError, create_exception_handler
from blog_service.monitoring import get_logger
from blog_service.utils.helpers import host

logger = get_logger(__name__)


class ValidationError(BaseAppError):
    """Malformed or missing input; the operation never starts."""

    def __init__(
        self,
        detail: str = "Validation Error",
        errors: list[dict] | None = None,
        status_code: int = HTTP_422_UNPROCESSABLE_CONTENT,
    ) -> None:
        super().__init__(detail=detail, status_code=status_code)
        self.errors = errors or []


class InvalidIdentifierError(ValidationError):
    """Raised when an id is not a 24-character hexadecimal string."""

    def __init__(self, field: str, value: object) -> None:
        super().__init__(
            detail=f"'{field}' must be a 24-character hexadecimal id",
            errors=[{"field": field, "message": "Invalid id", "input": str(value)}],
        )


app_validation_exception_handler = create_exception_handler(logger)


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle request validation errors with a flattened response format.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with formatted validation errors.
    """
    exec_error = cast(RequestValidationError, exc)

    formatted_errors = []
    for error in exec_error.errors():
        formatted_error = {
            "field": ".".join(str(loc) for loc in error.get("loc", [])[1:]),  # Skip 'body'
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "validation_error"),
        }
        # Context values such as ValueError instances are not JSON serializable
        if "ctx" in error:
            formatted_error["context"] = {
                key: str(value) if isinstance(value, Exception) else value
                for key, value in error["ctx"].items()
            }
        formatted_errors.append(formatted_error)

    logger.warning(
        "request_validation_failed",
        ip=host(request),
        endpoint=request.url.path,
        errors=formatted_errors,
    )

    return ORJSONResponse(
        status_code=HTTP_422_UNPROCESSABLE_CONTENT,
        content={
            "detail": "Validation failed",
            "errors": formatted_errors,
        },
    )
