from blog_service.dependencies.dependencies import (
    AssetGatewayDep,
    BlogLifecycleDep,
    BlogRepoDep,
    CommentRepoDep,
    CommentServiceDep,
    SessionDep,
    UserRepoDep,
    get_asset_gateway,
    get_blog_lifecycle,
    get_blog_repository,
    get_comment_repository,
    get_comment_service,
    get_user_repository,
)

__all__ = [
    "AssetGatewayDep",
    "BlogLifecycleDep",
    "BlogRepoDep",
    "CommentRepoDep",
    "CommentServiceDep",
    "SessionDep",
    "UserRepoDep",
    "get_asset_gateway",
    "get_blog_lifecycle",
    "get_blog_repository",
    "get_comment_repository",
    "get_comment_service",
    "get_user_repository",
]
