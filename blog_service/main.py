"""Blog content service: blog posts with externally stored photos."""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from fastapi.staticfiles import StaticFiles

from blog_service.configs import settings
from blog_service.errors import (
    AssetStoreError,
    StoreError,
    ValidationError,
    app_validation_exception_handler,
    asset_exception_handler,
    store_exception_handler,
    validation_exception_handler,
)
from blog_service.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from blog_service.monitoring import setup_metrics_route
from blog_service.routes import blog_router, comment_router
from blog_service.schemas import HealthCheckResponse
from blog_service.utils.helpers import today_str

app = FastAPI(
    title=settings.APP_NAME,
    description="Blog posts with photos kept in an external asset store",
    version="1.0.0",
    lifespan=lifespan,
    default_response_class=ORJSONResponse,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)

routes = [blog_router, comment_router]

_ = [app.include_router(router) for router in routes]

errors = [
    (StoreError, store_exception_handler),
    (AssetStoreError, asset_exception_handler),
    (ValidationError, app_validation_exception_handler),
    (RequestValidationError, validation_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

setup_metrics_route(app)

if settings.STORAGE_PROVIDER == "local":
    app.mount(
        "/uploads",
        StaticFiles(directory=settings.UPLOADS_DIR, check_dir=False),
        name="uploads",
    )


@app.get(
    "/health",
    tags=["Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    operation_id="health_check",
)
async def health_check() -> ORJSONResponse:
    """
    Health check endpoint.

    Returns
    -------
    ORJSONResponse
        Service status, version and configured storage provider.
    """
    response_data = HealthCheckResponse(
        status="ok",
        version=app.version,
        environment=settings.ENVIRONMENT,
        storage_provider=settings.STORAGE_PROVIDER,
        timestamp=today_str(),
    )
    return ORJSONResponse(response_data.model_dump())
