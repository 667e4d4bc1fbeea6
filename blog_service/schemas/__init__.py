from blog_service.schemas.blog import (
    AuthorProfile,
    BlogCreate,
    BlogDetail,
    BlogDetailResponse,
    BlogListResponse,
    BlogResponse,
    BlogSummary,
    BlogUpdate,
    BlogUpdatedResponse,
)
from blog_service.schemas.comment import (
    CommentCreate,
    CommentListResponse,
    CommentResponse,
    CommentSchema,
)
from blog_service.schemas.common import HealthCheckResponse, MessageResponse

__all__ = [
    "AuthorProfile",
    "BlogCreate",
    "BlogDetail",
    "BlogDetailResponse",
    "BlogListResponse",
    "BlogResponse",
    "BlogSummary",
    "BlogUpdate",
    "BlogUpdatedResponse",
    "CommentCreate",
    "CommentListResponse",
    "CommentResponse",
    "CommentSchema",
    "HealthCheckResponse",
    "MessageResponse",
]
