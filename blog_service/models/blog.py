"""Blog database model using SQLModel."""

from datetime import datetime
from typing import cast

from pydantic import ConfigDict
from sqlalchemy import DateTime, Index, Text
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

from blog_service.utils.helpers import utc_now
from blog_service.utils.ids import new_object_id


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    ``photo_url`` is the access URL handed out by the asset store and is the
    only photo field exposed to clients. ``photo_asset_id`` is the asset
    store's own key, persisted at upload time so later replacements and
    deletions never have to parse it back out of the URL.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    __table_args__ = (Index("ix_blogs_author_created", "author_id", "created_at"),)

    id: str = Field(
        default_factory=new_object_id,
        sa_column=Column(String(24), primary_key=True, nullable=False),
        description="Blog ID (24-char hex)",
    )
    author_id: str = Field(
        sa_column=Column(String(24), nullable=False, index=True),
        description="Author user ID (24-char hex)",
    )
    title: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Blog title",
    )
    content: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Blog content",
    )
    photo_url: str = Field(
        sa_column=Column(String(1000), nullable=False),
        description="Access URL of the blog photo",
    )
    photo_asset_id: str | None = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
        description="Asset store identifier of the blog photo",
    )

    # Timestamps (timezone-aware)
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Creation timestamp",
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
        description="Last update timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "65f1c2a4e4b0a1b2c3d4e5f6",
                "author_id": "507f1f77bcf86cd799439011",
                "title": "Hello",
                "content": "World",
                "photo_url": "https://res.cloudinary.com/demo/image/upload/v1710000000/abc123.jpg",
                "photo_asset_id": "abc123",
            },
        },
    )
