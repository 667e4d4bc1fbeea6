"""Comment database model using SQLModel."""

from datetime import datetime
from typing import cast

from sqlalchemy import DateTime, Text
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String

from blog_service.utils.helpers import utc_now
from blog_service.utils.ids import new_object_id


class CommentDB(SQLModel, table=True):
    """
    Comment database model.

    Comments cannot outlive their blog: the foreign key cascades on delete
    and the lifecycle service also removes them explicitly.
    """

    __tablename__ = cast("declared_attr[str]", "comments")

    id: str = Field(
        default_factory=new_object_id,
        sa_column=Column(String(24), primary_key=True, nullable=False),
        description="Comment ID (24-char hex)",
    )
    blog_id: str = Field(
        sa_column=Column(
            "blog_id",
            String(24),
            ForeignKey("blogs.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Owning blog ID (foreign key to blogs.id)",
    )
    author_id: str = Field(
        sa_column=Column(String(24), nullable=False, index=True),
        description="Comment author user ID",
    )
    content: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Comment text",
    )
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
