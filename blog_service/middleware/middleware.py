"""
Middleware components for the blog content service.

This module contains middleware for security headers, request logging and
CORS handling, plus the lifespan event handler for service initialization
and cleanup.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from blog_service.configs import settings
from blog_service.db import close_db, init_db
from blog_service.monitoring import bind_request_id, clear_context, configure_logging, get_logger
from blog_service.utils.helpers import host

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Manage application startup and shutdown events with service initialization."""
    configure_logging()
    logger.info("app_starting", app=app.title, environment=settings.ENVIRONMENT)

    try:
        await init_db()
        if settings.STORAGE_PROVIDER == "local":
            settings.UPLOADS_DIR.mkdir(parents=True, exist_ok=True)
        logger.info(
            "services_initialized",
            storage_provider=settings.STORAGE_PROVIDER,
            docs=f"{settings.PUBLIC_BASE_URL}/docs",
            metrics=f"{settings.PUBLIC_BASE_URL}/metrics",
        )
    except Exception:
        logger.exception("services_initialization_failed")
        raise

    yield

    logger.info("app_shutting_down", app=app.title)
    try:
        await close_db()
    except Exception:
        logger.exception("services_cleanup_failed")


def configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware for the application."""
    allowed_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    if frontend_url := settings.PRODUCTION_FRONTEND_URL:
        allowed_origins.append(frontend_url)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Bind a request id, then log request summary and timing information."""
        clear_context()
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        bind_request_id(request_id)

        start_time = perf_counter()
        logger.info(
            "request_started",
            method=request.method,
            path=request.url.path,
            ip=host(request),
        )

        response = await call_next(request)
        duration = perf_counter() - start_time

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            "request_finished",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round(duration * 1000, 2),
        )
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Add security headers to all responses."""

        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-XSS-Protection"] = "1; mode=block"
        response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response
