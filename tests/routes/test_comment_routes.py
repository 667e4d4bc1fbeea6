"""Tests for the /comments endpoints."""

import pytest
from fastapi import status
from httpx import AsyncClient

from blog_service.models import UserDB


@pytest.fixture
async def blog_id(client: AsyncClient, author: UserDB, png_data_url: str) -> str:
    response = await client.post(
        "/blogs",
        json={"title": "T", "author": author.id, "content": "C", "photo": png_data_url},
    )
    return response.json()["blog"]["id"]


@pytest.mark.asyncio
async def test_create_and_list_comments(client: AsyncClient, author: UserDB, blog_id: str) -> None:
    response = await client.post(
        "/comments",
        json={"blog": blog_id, "author": author.id, "content": "Great tips"},
    )

    assert response.status_code == status.HTTP_201_CREATED
    comment = response.json()["comment"]
    assert comment["blogId"] == blog_id
    assert comment["authorId"] == author.id

    listing = await client.get(f"/comments/{blog_id}")
    assert listing.status_code == status.HTTP_200_OK
    assert [item["id"] for item in listing.json()["comments"]] == [comment["id"]]


@pytest.mark.asyncio
async def test_comment_on_missing_blog(client: AsyncClient, author: UserDB) -> None:
    response = await client.post(
        "/comments",
        json={"blog": "65f1c0a2b3d4e5f601234567", "author": author.id, "content": "Hi"},
    )

    assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.asyncio
async def test_comment_validation(client: AsyncClient, blog_id: str) -> None:
    response = await client.post(
        "/comments",
        json={"blog": blog_id, "author": "bad", "content": ""},
    )

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
    fields = {error["field"] for error in response.json()["errors"]}
    assert {"author", "content"} <= fields
