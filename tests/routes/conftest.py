# tests/routes/conftest.py
"""Pytest fixtures for route tests."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from blog_service.db import get_session
from blog_service.dependencies import get_asset_gateway
from blog_service.main import app
from blog_service.models import UserDB
from blog_service.repositories import UserRepository
from blog_service.services import AssetGateway


@pytest.fixture
async def client(
    session_maker: async_sessionmaker[SQLModelAsyncSession],
    storage,
) -> AsyncGenerator[AsyncClient]:
    """HTTP client bound to the app with SQLite and the in-memory asset store."""

    async def _get_session() -> AsyncGenerator[AsyncSession]:
        async with session_maker() as session:
            yield session
            await session.commit()

    gateway = AssetGateway(storage=storage)
    app.dependency_overrides[get_session] = _get_session
    app.dependency_overrides[get_asset_gateway] = lambda: gateway

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides = {}


@pytest.fixture
async def author(session_maker: async_sessionmaker[SQLModelAsyncSession]) -> UserDB:
    async with session_maker() as session:
        users = UserRepository(session)
        user = await users.create(name="Ada Lovelace", username="ada", email="ada@example.com")
        await users.commit()
        return user
