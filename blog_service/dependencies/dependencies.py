"""Application dependencies: repositories and services bound to the request session."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blog_service.db import get_session
from blog_service.repositories import BlogRepository, CommentRepository, UserRepository
from blog_service.services import AssetGateway, BlogLifecycle, CommentService

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_blog_repository(session: SessionDep) -> BlogRepository:
    return BlogRepository(session)


def get_comment_repository(session: SessionDep) -> CommentRepository:
    return CommentRepository(session)


def get_user_repository(session: SessionDep) -> UserRepository:
    return UserRepository(session)


@lru_cache(maxsize=1)
def get_asset_gateway() -> AssetGateway:
    """
    Return the process-wide asset gateway.

    The storage backend is configured once; it holds no per-request state.
    """
    return AssetGateway()


BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]
CommentRepoDep = Annotated[CommentRepository, Depends(get_comment_repository)]
UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
AssetGatewayDep = Annotated[AssetGateway, Depends(get_asset_gateway)]


def get_blog_lifecycle(
    blogs: BlogRepoDep,
    comments: CommentRepoDep,
    users: UserRepoDep,
    assets: AssetGatewayDep,
) -> BlogLifecycle:
    """Resolve the `BlogLifecycle` dependency for the current request."""
    return BlogLifecycle(blogs, comments, users, assets)


def get_comment_service(blogs: BlogRepoDep, comments: CommentRepoDep) -> CommentService:
    return CommentService(blogs, comments)


BlogLifecycleDep = Annotated[BlogLifecycle, Depends(get_blog_lifecycle)]
CommentServiceDep = Annotated[CommentService, Depends(get_comment_service)]
