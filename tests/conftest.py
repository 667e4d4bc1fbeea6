# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Settings are read at import time; this must happen before the app is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["STORAGE_PROVIDER"] = "local"
os.environ["LOG_TO_FILE"] = "false"
os.environ["ENVIRONMENT"] = "testing"
os.environ["PUBLIC_BASE_URL"] = "http://testserver"

from base64 import b64encode
from collections.abc import AsyncGenerator
from io import BytesIO
from typing import Any

import pytest
from PIL import Image
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from blog_service.errors import AssetRemovalError, AssetUploadError
from blog_service.models import BlogDB, CommentDB, UserDB  # noqa: F401
from blog_service.services.photo import PhotoData
from blog_service.services.storage import AssetUploadResult


def _image_bytes(image_format: str, mode: str = "RGB", color: str = "red") -> bytes:
    img = Image.new(mode, (64, 64), color=color)
    buffer = BytesIO()
    img.save(buffer, format=image_format)
    return buffer.getvalue()


@pytest.fixture
def jpeg_bytes() -> bytes:
    """Create valid JPEG image bytes."""
    return _image_bytes("JPEG")


@pytest.fixture
def png_bytes() -> bytes:
    """Create valid PNG image bytes."""
    return _image_bytes("PNG", mode="RGBA", color="blue")


@pytest.fixture
def gif_bytes() -> bytes:
    return _image_bytes("GIF")


@pytest.fixture
def png_data_url(png_bytes: bytes) -> str:
    """PNG image as a base64 data URL, the way browsers send it."""
    return f"data:image/png;base64,{b64encode(png_bytes).decode()}"


@pytest.fixture
def jpeg_data_url(jpeg_bytes: bytes) -> str:
    return f"data:image/jpeg;base64,{b64encode(jpeg_bytes).decode()}"


class InMemoryStorage:
    """Asset store double keeping uploaded photos in a dict."""

    def __init__(self) -> None:
        self.assets: dict[str, PhotoData] = {}
        self.removed: list[str] = []
        self.upload_calls = 0
        self.fail_uploads = False
        self.fail_removals = False

    async def upload(self, photo: PhotoData) -> AssetUploadResult:
        self.upload_calls += 1
        if self.fail_uploads:
            raise AssetUploadError
        asset_id = f"asset{self.upload_calls:03d}"
        self.assets[asset_id] = photo
        return AssetUploadResult(
            access_url=f"https://res.example.com/demo/image/upload/v1/{asset_id}.{photo.extension}",
            asset_id=asset_id,
        )

    async def remove(self, asset_id: str) -> bool:
        if self.fail_removals:
            raise AssetRemovalError(asset_id, reason="service unavailable")
        self.removed.append(asset_id)
        return self.assets.pop(asset_id, None) is not None


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


async def _sqlite_engine(*, foreign_keys: bool) -> AsyncEngine:
    """In-memory SQLite engine with all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    if foreign_keys:

        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    return engine


def _session_maker(engine: AsyncEngine) -> async_sessionmaker[SQLModelAsyncSession]:
    return async_sessionmaker(
        engine,
        class_=SQLModelAsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    engine = await _sqlite_engine(foreign_keys=True)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(db_engine: AsyncEngine) -> async_sessionmaker[SQLModelAsyncSession]:
    return _session_maker(db_engine)


@pytest.fixture
async def unconstrained_session() -> AsyncGenerator[AsyncSession]:
    """Session on a SQLite database that does not enforce foreign keys."""
    engine = await _sqlite_engine(foreign_keys=False)
    async with _session_maker(engine)() as session:
        yield session
    await engine.dispose()


@pytest.fixture
async def db_session(
    session_maker: async_sessionmaker[SQLModelAsyncSession],
) -> AsyncGenerator[AsyncSession]:
    async with session_maker() as session:
        yield session
