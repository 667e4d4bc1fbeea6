"""Comment request and response models."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from blog_service.configs.settings import MAX_COMMENT_LENGTH, OBJECT_ID_PATTERN


class CommentCreate(BaseModel):
    """Comment creation model (request body)."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    blog_id: str = Field(
        ...,
        validation_alias=AliasChoices("blog", "blogId", "blog_id"),
        pattern=OBJECT_ID_PATTERN,
    )
    author_id: str = Field(
        ...,
        validation_alias=AliasChoices("author", "authorId", "author_id"),
        pattern=OBJECT_ID_PATTERN,
    )
    content: str = Field(..., min_length=1, max_length=MAX_COMMENT_LENGTH)


class CommentSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    blog_id: str = Field(alias="blogId")
    author_id: str = Field(alias="authorId")
    content: str
    created_at: str = Field(alias="createdAt")


class CommentResponse(BaseModel):
    comment: CommentSchema


class CommentListResponse(BaseModel):
    comments: list[CommentSchema]
