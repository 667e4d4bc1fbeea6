"""Database models for the application."""

from blog_service.models.blog import BlogDB
from blog_service.models.comment import CommentDB
from blog_service.models.user import UserDB

__all__ = ["BlogDB", "CommentDB", "UserDB"]
