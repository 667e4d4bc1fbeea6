from blog_service.configs.settings import (
    BLOG_DELETED,
    BLOG_NOT_FOUND,
    BLOG_UPDATED,
    OBJECT_ID_PATTERN,
    Settings,
    settings,
)

__all__ = [
    "BLOG_DELETED",
    "BLOG_NOT_FOUND",
    "BLOG_UPDATED",
    "OBJECT_ID_PATTERN",
    "Settings",
    "settings",
]
