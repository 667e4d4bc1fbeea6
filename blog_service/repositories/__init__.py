"""Repository layer for database operations."""

from blog_service.repositories.blog import BlogRepository
from blog_service.repositories.comment import CommentRepository
from blog_service.repositories.user import UserRepository

__all__ = ["BlogRepository", "CommentRepository", "UserRepository"]
