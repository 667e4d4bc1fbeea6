"""Comment Routes: add a comment to a blog and list a blog's comments."""

from typing import Annotated

from fastapi import APIRouter, Path
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from blog_service.configs.settings import OBJECT_ID_PATTERN
from blog_service.dependencies import CommentServiceDep
from blog_service.schemas import CommentCreate, CommentListResponse, CommentResponse

router = APIRouter(prefix="/comments", tags=["Comments"])


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=CommentResponse,
    status_code=HTTP_201_CREATED,
    summary="Comment on a blog",
    operation_id="comments_create",
)
async def create_comment(comment: CommentCreate, service: CommentServiceDep) -> ORJSONResponse:
    created = await service.create(
        blog_id=comment.blog_id,
        author_id=comment.author_id,
        content=comment.content,
    )
    return ORJSONResponse(
        content={"comment": created.model_dump(by_alias=True)},
        status_code=HTTP_201_CREATED,
    )


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=CommentListResponse,
    summary="List the comments of a blog",
    operation_id="comments_list",
)
async def get_comments(
    blog_id: Annotated[str, Path(pattern=OBJECT_ID_PATTERN)],
    service: CommentServiceDep,
) -> ORJSONResponse:
    comments = await service.list_for_blog(blog_id)
    return ORJSONResponse(
        content={"comments": [comment.model_dump(by_alias=True) for comment in comments]},
    )
