"""Tests for health, metrics and middleware behaviour."""

import pytest
from fastapi import status
from httpx import AsyncClient

from blog_service.middleware import REQUEST_ID_HEADER


@pytest.mark.asyncio
async def test_health(client: AsyncClient) -> None:
    response = await client.get("/health")

    assert response.status_code == status.HTTP_200_OK
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["storage_provider"] == "local"


@pytest.mark.asyncio
async def test_metrics_exposed(client: AsyncClient) -> None:
    response = await client.get("/metrics")

    assert response.status_code == status.HTTP_200_OK
    assert "blog_asset_cleanup_failures_total" in response.text


@pytest.mark.asyncio
async def test_security_headers(client: AsyncClient) -> None:
    response = await client.get("/health")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


@pytest.mark.asyncio
async def test_request_id_generated_and_echoed(client: AsyncClient) -> None:
    generated = await client.get("/health")
    echoed = await client.get("/health", headers={REQUEST_ID_HEADER: "req-123"})

    assert generated.headers[REQUEST_ID_HEADER]
    assert echoed.headers[REQUEST_ID_HEADER] == "req-123"
