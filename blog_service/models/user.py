"""User database model using SQLModel."""

from datetime import datetime
from typing import cast

from sqlalchemy import DateTime
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

from blog_service.utils.helpers import utc_now
from blog_service.utils.ids import new_object_id


class UserDB(SQLModel, table=True):
    """
    User database model.

    Accounts are registered by the authentication service; this service only
    reads them to expand blog authors.
    """

    __tablename__ = cast("declared_attr[str]", "users")

    id: str = Field(
        default_factory=new_object_id,
        sa_column=Column(String(24), primary_key=True, nullable=False),
        description="User ID (24-char hex)",
    )
    name: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Display name",
    )
    username: str = Field(
        sa_column=Column(String(50), unique=True, nullable=False, index=True),
        description="Unique username",
    )
    email: str = Field(
        sa_column=Column(String(255), unique=True, nullable=False),
        description="Email address",
    )
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
