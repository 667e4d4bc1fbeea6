"""
Blog Routes.

Provides create, list, fetch, update and delete endpoints for blogs. Each
endpoint delegates to `BlogLifecycle`, which keeps the stored photo and the
blog record consistent.

Summary
-------
Endpoints include:
  - Create blog
  - List all blogs
  - Get blog by id
  - Update blog
  - Delete blog
"""

from typing import Annotated

from fastapi import APIRouter, Body, Path
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from blog_service.configs.settings import BLOG_DELETED, BLOG_UPDATED, OBJECT_ID_PATTERN
from blog_service.dependencies import BlogLifecycleDep
from blog_service.schemas import (
    BlogCreate,
    BlogDetailResponse,
    BlogListResponse,
    BlogResponse,
    BlogUpdate,
    BlogUpdatedResponse,
    MessageResponse,
)

router = APIRouter(prefix="/blogs", tags=["Blogs"])

BlogIdPath = Annotated[
    str,
    Path(pattern=OBJECT_ID_PATTERN, description="Blog ID (24-char hex)"),
]

NOT_FOUND_EXAMPLE = {
    "description": "Blog not found",
    "content": {"application/json": {"example": {"detail": "Blog not found"}}},
}
ASSET_STORE_EXAMPLE = {
    "description": "Photo storage unavailable",
    "content": {
        "application/json": {
            "example": {"detail": "We couldn't upload your photo. Please try again."},
        },
    },
}


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new blog post",
    description="Upload the photo, then store the blog pointing at it.",
    responses={502: ASSET_STORE_EXAMPLE},
    operation_id="blogs_create",
)
async def create_blog(
    blog: Annotated[
        BlogCreate,
        Body(
            examples=[
                {
                    "title": "What to Pack for Your Bali Trip",
                    "author": "65f1c0a2b3d4e5f601234567",
                    "content": "Packing for Bali can be tricky...",
                    "photo": "data:image/png;base64,iVBORw0KGgo...",
                },
            ],
        ),
    ],
    lifecycle: BlogLifecycleDep,
) -> ORJSONResponse:
    """
    Create a new blog post.

    Parameters
    ----------
    blog : BlogCreate
        Blog fields and the photo as a base64 data URL.
    lifecycle : BlogLifecycle
        Blog lifecycle service.

    Returns
    -------
    ORJSONResponse
        `{"blog": BlogSummary}` with status 201.
    """
    created = await lifecycle.create(
        title=blog.title,
        author_id=blog.author_id,
        content=blog.content,
        photo=blog.photo,
    )
    return ORJSONResponse(
        content={"blog": created.model_dump(by_alias=True)},
        status_code=HTTP_201_CREATED,
    )


@router.get(
    "/all",
    response_class=ORJSONResponse,
    response_model=BlogListResponse,
    summary="List all blogs",
    operation_id="blogs_list",
)
async def get_all_blogs(lifecycle: BlogLifecycleDep) -> ORJSONResponse:
    """Return every blog in insertion order."""
    blogs = await lifecycle.get_all()
    return ORJSONResponse(content={"blogs": [blog.model_dump(by_alias=True) for blog in blogs]})


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogDetailResponse,
    summary="Get a blog by id",
    description="Return a blog with its author expanded to a public profile.",
    responses={404: NOT_FOUND_EXAMPLE},
    operation_id="blogs_get",
)
async def get_blog_by_id(blog_id: BlogIdPath, lifecycle: BlogLifecycleDep) -> ORJSONResponse:
    blog = await lifecycle.get_by_id(blog_id)
    return ORJSONResponse(content={"blog": blog.model_dump(by_alias=True)})


@router.put(
    "",
    response_class=ORJSONResponse,
    response_model=BlogUpdatedResponse,
    summary="Update a blog",
    description=(
        "Replace title, content and author. When a photo is supplied it is uploaded "
        "first and the previous photo is removed only after the blog points at the new one."
    ),
    responses={404: NOT_FOUND_EXAMPLE, 502: ASSET_STORE_EXAMPLE},
    operation_id="blogs_update",
)
async def update_blog(blog: BlogUpdate, lifecycle: BlogLifecycleDep) -> ORJSONResponse:
    """
    Update a blog post.

    Parameters
    ----------
    blog : BlogUpdate
        Blog id, new fields and an optional new photo.
    lifecycle : BlogLifecycle
        Blog lifecycle service.

    Returns
    -------
    ORJSONResponse
        `{"message": "blog updated!", "blog": BlogSummary}`.
    """
    updated = await lifecycle.update(
        blog.blog_id,
        title=blog.title,
        author_id=blog.author_id,
        content=blog.content,
        photo=blog.photo,
    )
    return ORJSONResponse(
        content={"message": BLOG_UPDATED, "blog": updated.model_dump(by_alias=True)},
    )


@router.delete(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=MessageResponse,
    summary="Delete a blog",
    description="Delete a blog, its comments and, best effort, its photo.",
    responses={404: NOT_FOUND_EXAMPLE},
    operation_id="blogs_delete",
)
async def delete_blog(blog_id: BlogIdPath, lifecycle: BlogLifecycleDep) -> ORJSONResponse:
    await lifecycle.delete(blog_id)
    return ORJSONResponse(content={"message": BLOG_DELETED})
