"""
Blog request and response models.

Request bodies keep the field names existing clients send (``author``,
``blogId``); responses use camelCase aliases.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from blog_service.configs.settings import (
    MAX_CONTENT_LENGTH,
    MAX_TITLE_LENGTH,
    OBJECT_ID_PATTERN,
)


class BlogCreate(BaseModel):
    """Blog creation model (request body)."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    title: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TITLE_LENGTH,
        description="Blog title",
        examples=["What to Pack for Your Bali Trip"],
    )
    author_id: str = Field(
        ...,
        validation_alias=AliasChoices("author", "authorId", "author_id"),
        pattern=OBJECT_ID_PATTERN,
        description="Author user ID (24-char hex)",
    )
    content: str = Field(
        ...,
        min_length=1,
        max_length=MAX_CONTENT_LENGTH,
        description="Blog content (plain text or markdown)",
    )
    photo: str = Field(
        ...,
        min_length=1,
        description="Photo as a base64 data URL (data:image/<type>;base64,...)",
    )


class BlogUpdate(BaseModel):
    """Blog update model; the photo is replaced only when supplied."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    blog_id: str = Field(
        ...,
        validation_alias=AliasChoices("blogId", "blog_id"),
        pattern=OBJECT_ID_PATTERN,
        description="ID of the blog to update",
    )
    title: str = Field(..., min_length=1, max_length=MAX_TITLE_LENGTH)
    content: str = Field(..., min_length=1, max_length=MAX_CONTENT_LENGTH)
    author_id: str = Field(
        ...,
        validation_alias=AliasChoices("author", "authorId", "author_id"),
        pattern=OBJECT_ID_PATTERN,
    )
    photo: str | None = Field(
        default=None,
        min_length=1,
        description="New photo as a base64 data URL",
    )


class AuthorProfile(BaseModel):
    """Author information for blog details (without sensitive data)."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    username: str


class BlogSummary(BaseModel):
    """Blog as returned by create, update and listing."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    author_id: str = Field(alias="authorId")
    content: str
    photo: str = Field(description="Photo access URL")
    created_at: str = Field(alias="createdAt")
    updated_at: str = Field(alias="updatedAt")


class BlogDetail(BlogSummary):
    """Blog as returned by a single-record fetch, with the author expanded."""

    author: AuthorProfile | None = None


class BlogResponse(BaseModel):
    blog: BlogSummary


class BlogDetailResponse(BaseModel):
    blog: BlogDetail


class BlogListResponse(BaseModel):
    blogs: list[BlogSummary]


class BlogUpdatedResponse(BaseModel):
    message: str
    blog: BlogSummary
