from blog_service.routes.blog import router as blog_router
from blog_service.routes.comment import router as comment_router

__all__ = ["blog_router", "comment_router"]
